"""
Turn a raw expeditions table into ExpeditionRecord objects.

Source exports spell columns differently (the Himalayan Database uses
SMTDATE / TOTMEMBERS / MDEATHS ..., cleaned extracts use snake_case). We map
known spellings to canonical names first, then convert cell by cell so blank
or junk cells become None instead of failing the load.
"""

from __future__ import annotations

import re
from datetime import date
from functools import reduce
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from core.config import AnalysisConfig
from core.models import ExpeditionRecord
from core.schema import (
    AUXILIARY_COLUMNS,
    COUNT_COLUMNS,
    EXPEDITION_COLUMNS,
    REQUIRED_COLUMNS,
)
from core.utils import require_columns


def _norm(s: Any) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())


# normalized spelling -> canonical column
_COLUMN_ALIASES: Dict[str, str] = {
    # dates
    "smtdate": "summit_date",
    "summitdate": "summit_date",
    "summitday": "summit_date",
    # party size
    "totmembers": "total_members",
    "totalmembers": "total_members",
    "members": "total_members",
    "tothired": "total_hired",
    "totalhired": "total_hired",
    "hired": "total_hired",
    # summiters
    "smtmembers": "summit_members",
    "summitmembers": "summit_members",
    "smthired": "summit_hired",
    "summithired": "summit_hired",
    # deaths
    "mdeaths": "member_deaths",
    "memberdeaths": "member_deaths",
    "hdeaths": "hired_deaths",
    "hireddeaths": "hired_deaths",
    # auxiliary
    "expid": "expedition_id",
    "expeditionid": "expedition_id",
    "year": "year",
    "highpoint": "high_point",
    "o2used": "oxygen_used",
    "oxygenused": "oxygen_used",
}

_TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "f", "no", "n", "0"}


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with known column spellings normalized and duplicates coalesced."""
    ren = {c: _COLUMN_ALIASES.get(_norm(c), c) for c in df.columns}
    out = df.rename(columns=ren).copy()

    # Renaming can map two source columns onto one name (e.g. SMTDATE and
    # summit_date); the leftmost non-null value per row wins.
    if out.columns.duplicated().any():
        merged: Dict[str, pd.Series] = {}
        for name in dict.fromkeys(out.columns):
            same = [out.iloc[:, i] for i, c in enumerate(out.columns) if c == name]
            merged[name] = reduce(lambda left, right: left.combine_first(right), same)
        out = pd.DataFrame(merged, index=out.index)

    return out


def resolve_date_column(config: AnalysisConfig) -> str:
    """Canonical name of the configured date column (SMTDATE -> summit_date)."""
    return _COLUMN_ALIASES.get(_norm(config.date_column), config.date_column)


def select_expedition_columns(
    df: pd.DataFrame,
    *,
    columns: Tuple[str, ...] = EXPEDITION_COLUMNS,
) -> pd.DataFrame:
    """Return a copy containing ONLY the expedition columns.

    Auxiliary columns are included when present but do not cause an error
    when missing.
    """
    d2 = canonicalize_columns(df)
    required = [c for c in columns if c in REQUIRED_COLUMNS]
    require_columns(d2, required)
    present = [c for c in columns if c in d2.columns]
    return d2.loc[:, present].copy()


def _to_int(x) -> Optional[int]:
    if x is None or pd.isna(x):
        return None
    try:
        f = float(x)
    except (TypeError, ValueError):
        return None
    # fractional or infinite counts are junk
    if not f.is_integer():
        return None
    return int(f)


def _to_bool(x) -> Optional[bool]:
    if x is None or pd.isna(x):
        return None
    if isinstance(x, str):
        s = x.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
        return None
    return bool(x)


def _to_str(x) -> Optional[str]:
    if x is None or pd.isna(x):
        return None
    s = str(x).strip()
    return s or None


def _is_date_like(value: Any) -> bool:
    return isinstance(value, (str, date, np.datetime64))


def parse_summit_dates(df: pd.DataFrame, config: AnalysisConfig) -> pd.Series:
    """
    Parse the configured date column; NaT where missing or unparseable.

    Only strings and date/datetime values count as dates. Numbers such as
    20210510 would otherwise be read as epoch offsets and land in 1970.
    Without a configured format each string is parsed on its own
    (format="mixed"), matching core.utils.coerce_date.
    """
    raw = df[resolve_date_column(config)]
    if not pd.api.types.is_datetime64_any_dtype(raw):
        raw = raw.where(raw.map(_is_date_like).astype(bool))
    return pd.to_datetime(
        raw,
        format=config.date_format or "mixed",
        dayfirst=config.dayfirst,
        errors="coerce",
    )


def records_from_frame(
    df: pd.DataFrame,
    config: Optional[AnalysisConfig] = None,
) -> List[ExpeditionRecord]:
    """
    Convert an expeditions table to ExpeditionRecord objects (one per row).

    Rows with a missing or unparseable summit date are kept with
    summit_date=None; the aggregation steps exclude them.
    """
    cfg = config or AnalysisConfig()
    d = canonicalize_columns(df)
    require_columns(d, (resolve_date_column(cfg),) + COUNT_COLUMNS)

    dates = parse_summit_dates(d, cfg)
    aux = [c for c in AUXILIARY_COLUMNS if c in d.columns]

    records: List[ExpeditionRecord] = []
    for ts, row in zip(dates.tolist(), d.to_dict("records")):
        records.append(
            ExpeditionRecord(
                summit_date=None if pd.isna(ts) else ts.date(),
                total_members=_to_int(row["total_members"]),
                total_hired=_to_int(row["total_hired"]),
                summit_members=_to_int(row["summit_members"]),
                summit_hired=_to_int(row["summit_hired"]),
                member_deaths=_to_int(row["member_deaths"]),
                hired_deaths=_to_int(row["hired_deaths"]),
                high_point=_to_int(row["high_point"]) if "high_point" in aux else None,
                oxygen_used=_to_bool(row["oxygen_used"]) if "oxygen_used" in aux else None,
                year=_to_int(row["year"]) if "year" in aux else None,
                expedition_id=_to_str(row["expedition_id"]) if "expedition_id" in aux else None,
            )
        )
    return records
