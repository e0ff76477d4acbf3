"""Cross-check the rule table against a published holiday list.

Usage: python -m shukujitsu.src.verify [--start 1955-01-01] [--end 2027-12-31]
"""

import argparse
from datetime import date
from pathlib import Path

import numpy as np
import pandas as pd

from .config import load_config, package_root
from .frames import holidays_frame
from .reference import fetch_reference, load_reference

# The Cabinet Office list names every substitute and bridging day just 休日
GENERIC_REFERENCE_NAMES = {"休日", "休日（祝日扱い）"}


def _names_agree(computed, reference) -> bool:
    if not isinstance(computed, str) or not isinstance(reference, str):
        return False
    if reference in GENERIC_REFERENCE_NAMES:
        return True
    return reference in computed or computed in reference


def compare_with_reference(reference: pd.DataFrame, start: date, end: date) -> pd.DataFrame:
    """Compare engine output with a reference (date, name) list over [start, end].

    Returns DataFrame with columns: date, name_computed, name_reference, status,
    where status is ok, name (names disagree), missing (reference only) or
    extra (engine only).
    """
    computed = holidays_frame(start, end)[["date", "name"]]
    in_range = reference[(reference["date"] >= start) & (reference["date"] <= end)]

    merged = computed.merge(
        in_range[["date", "name"]],
        on="date",
        how="outer",
        suffixes=("_computed", "_reference"),
        indicator=True,
    )
    agree = np.array(
        [_names_agree(c, r) for c, r in zip(merged["name_computed"], merged["name_reference"])],
        dtype=bool,
    )
    merged["status"] = np.select(
        [merged["_merge"] == "right_only", merged["_merge"] == "left_only", agree],
        ["missing", "extra", "ok"],
        default="name",
    )
    merged = merged.drop(columns="_merge").sort_values("date")
    return merged.reset_index(drop=True)


def summarize(result: pd.DataFrame) -> dict[str, int]:
    """Count comparison rows per status."""
    counts = result["status"].value_counts()
    return {status: int(counts.get(status, 0)) for status in ("ok", "name", "missing", "extra")}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cross-check holidays against a published list")
    parser.add_argument("--start", type=date.fromisoformat, default=None,
                        help="Start date (YYYY-MM-DD, default: verify.start in config)")
    parser.add_argument("--end", type=date.fromisoformat, default=None,
                        help="End date (YYYY-MM-DD, default: last reference date)")
    parser.add_argument("--reference", type=Path, default=None,
                        help="Local CSV/XML list instead of downloading")
    parser.add_argument("--refresh", action="store_true",
                        help="Re-download the reference list even if cached")
    args = parser.parse_args(argv)

    cfg = load_config()
    ref_cfg = cfg["reference"]

    if args.reference is not None:
        print(f"Loading reference: {args.reference}")
        reference = load_reference(args.reference, encoding=ref_cfg["encoding"])
    else:
        cache_file = package_root() / ref_cfg["cache_file"]
        print(f"Loading reference: {ref_cfg['url']}")
        print(f"  Cache: {cache_file}")
        reference = fetch_reference(
            ref_cfg["url"], cache_file,
            encoding=ref_cfg["encoding"], timeout=ref_cfg["timeout"], refresh=args.refresh,
        )

    if reference.empty:
        print("Reference list is empty, nothing to compare.")
        return 0

    start = args.start or cfg["verify"]["start"] or reference["date"].min()
    end = args.end or cfg["verify"]["end"] or reference["date"].max()
    print(f"  Range: {start} to {end} ({len(reference)} reference rows)\n")

    result = compare_with_reference(reference, start, end)
    problems = result[result["status"] != "ok"]

    if not problems.empty:
        print(f"{'Date':<12} {'Status':<8} {'Computed':<16} {'Reference':<16}")
        print("-" * 56)
        for _, row in problems.iterrows():
            computed = row["name_computed"] if isinstance(row["name_computed"], str) else "-"
            expected = row["name_reference"] if isinstance(row["name_reference"], str) else "-"
            print(f"{row['date'].isoformat():<12} {row['status']:<8} {computed:<16} {expected:<16}")
        print("-" * 56)

    counts = summarize(result)
    print(f"ok: {counts['ok']}  name: {counts['name']}  "
          f"missing: {counts['missing']}  extra: {counts['extra']}")

    return 1 if counts["missing"] or counts["extra"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
