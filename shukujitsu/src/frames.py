"""DataFrame views over the holiday engine: listings and per-row calendar features."""

from datetime import date

import numpy as np
import pandas as pd

from .holidays import get_holiday, get_holidays

FRAME_COLUMNS = ["date", "name", "name_en", "category", "weekday"]


def holidays_frame(start: date, end: date) -> pd.DataFrame:
    """Holidays in [start, end] as a DataFrame, one row per date."""
    rows = [
        {
            "date": h.date,
            "name": h.name,
            "name_en": h.name_en,
            "category": h.category.value,
            "weekday": h.date.strftime("%a"),
        }
        for h in get_holidays(start, end)
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def add_holiday_features(df: pd.DataFrame, column: str = "timestamp") -> pd.DataFrame:
    """Add holiday_name, is_holiday, is_weekend and is_day_off columns.

    Timestamps are reduced to their calendar day in whatever timezone they
    carry; each distinct day is resolved once.
    """
    out = df.copy()
    ts = pd.to_datetime(out[column])
    days = ts.dt.date

    names = {d: getattr(get_holiday(d), "name", None) for d in days.unique()}
    out["holiday_name"] = days.map(names)
    out["is_holiday"] = out["holiday_name"].notna().astype(int)
    out["is_weekend"] = (ts.dt.dayofweek >= 5).astype(int)
    out["is_day_off"] = np.maximum(out["is_holiday"], out["is_weekend"])
    return out
