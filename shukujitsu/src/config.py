"""Reading shukujitsu/config.yaml: reference-list source, verify span, listing language."""

from pathlib import Path

import yaml

DEFAULTS = {
    "reference": {
        "url": "https://www8.cao.go.jp/chosei/shukujitsu/syukujitsu.csv",
        "encoding": "cp932",
        "cache_file": "data/syukujitsu.csv",
        "timeout": 30,
    },
    "verify": {"start": None, "end": None},
    "listing": {"language": "ja"},
}


def load_config(path: Path | None = None) -> dict:
    """Read the YAML file (package config.yaml by default), filling gaps from DEFAULTS per section."""
    if path is None:
        path = package_root() / "config.yaml"
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    # Sections missing from the file, or keys missing from a section, fall back to DEFAULTS
    for section, defaults in DEFAULTS.items():
        cfg[section] = {**defaults, **(cfg.get(section) or {})}

    return cfg


def package_root() -> Path:
    """Return the shukujitsu package directory (holds config.yaml)."""
    return Path(__file__).parent.parent


def project_root() -> Path:
    """Return the repository root."""
    return Path(__file__).parent.parent.parent
