"""Published holiday lists: download, cache and parse into a (date, name) DataFrame."""

from pathlib import Path

import pandas as pd
import requests


def fetch_reference(
    url: str,
    cache_file: Path,
    encoding: str = "cp932",
    timeout: float = 30,
    refresh: bool = False,
) -> pd.DataFrame:
    """Download the Cabinet Office holiday CSV, caching it to cache_file.

    The cached copy is reused unless refresh is set. The list is revised
    once a year, so a stale cache only misses the newest year.
    """
    if refresh or not cache_file.exists():
        cache_file.parent.mkdir(parents=True, exist_ok=True)
        print(f"  Downloading holiday list: {url}")
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        cache_file.write_bytes(resp.content)
    return load_reference(cache_file, encoding=encoding)


def load_reference(path: Path, encoding: str = "cp932") -> pd.DataFrame:
    """Load a reference list from CSV (Cabinet Office layout) or XML.

    CSV: header row, then `YYYY/M/D,name`. XML: <holidays><holiday date=".." name=".."/>.
    Returns DataFrame with columns: date (datetime.date), name.
    """
    path = Path(path)
    if path.suffix.lower() == ".xml":
        df = pd.read_xml(path, xpath=".//holiday", parser="etree", dtype=str)
        if not {"date", "name"} <= set(df.columns):
            raise ValueError(f"{path}: <holiday> elements need date and name attributes")
        df = df[["date", "name"]]
    else:
        df = pd.read_csv(path, encoding=encoding, dtype=str)
        if df.shape[1] < 2:
            raise ValueError(f"{path}: expected date and name columns, got {list(df.columns)}")
        df = df.iloc[:, :2]
        df.columns = ["date", "name"]
    return _normalize(df)


def _normalize(df: pd.DataFrame) -> pd.DataFrame:
    """Parse date strings, strip names, sort and de-duplicate by date."""
    df = df.dropna(subset=["date", "name"]).copy()
    if df.empty:
        return pd.DataFrame(columns=["date", "name"])

    # "1955/1/1", "1955-01-01" and "1955/01/01 0:00:00" all occur in the wild
    parts = (
        df["date"].str.strip().str.split().str[0]
        .str.split(r"[/-]", regex=True, expand=True)
        .iloc[:, :3]
        .astype(int)
    )
    parts.columns = ["year", "month", "day"]
    df["date"] = pd.to_datetime(parts).dt.date
    df["name"] = df["name"].str.strip()

    df = df.sort_values("date", kind="stable").drop_duplicates(subset=["date"], keep="last")
    return df[["date", "name"]].reset_index(drop=True)
