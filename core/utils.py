from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def coerce_date(value: Any) -> Optional[date]:
    """
    Normalize a date-like cell to a `datetime.date`.
    None, NaT, NaN and anything unparseable come back as None.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (str, np.datetime64)):
        ts = pd.to_datetime(value, errors="coerce")
        return None if pd.isna(ts) else ts.date()
    return None


def count_or_zero(value: Any) -> int:
    """Missing counts (None / NaN) sum as zero."""
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return 0
    return int(value)


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or NaN when the denominator is zero."""
    if denominator == 0:
        return np.nan
    return float(numerator) / float(denominator)
