"""
Data quality validation for expedition tables before they enter the pipeline.

Catches problems early:
- Missing required columns
- Negative counts
- Missing, numeric or unparseable summit dates (those rows are excluded downstream)
- Non-numeric or fractional counts (read as missing, so they sum as zero)
- Summiters or deaths exceeding party size (reported, never corrected)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Number
from typing import List, Optional

import pandas as pd

from core.config import AnalysisConfig
from core.schema import COUNT_COLUMNS

from .records import canonicalize_columns, parse_summit_dates, resolve_date_column


@dataclass
class ValidationResult:
    """Findings for one expeditions table: errors block the run, warnings inform."""
    n_rows: int = 0
    n_dated: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        lines = [f"Expeditions: {self.n_rows} rows, {self.n_dated} with a usable summit date"]
        lines += [f"  ✗ {e}" for e in self.errors]
        lines += [f"  ⚠ {w}" for w in self.warnings]
        if not self.errors and not self.warnings:
            lines.append("  ✓ All checks passed.")
        return "\n".join(lines)


# (achieved count, party size) pairs that should satisfy achieved <= size
_BOUNDED_PAIRS = (
    ("summit_members", "total_members"),
    ("member_deaths", "total_members"),
    ("summit_hired", "total_hired"),
    ("hired_deaths", "total_hired"),
)


def validate_expeditions(
    df: pd.DataFrame,
    config: Optional[AnalysisConfig] = None,
) -> ValidationResult:
    """
    Run all validation checks on an expeditions table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    cfg = config or AnalysisConfig()
    data = canonicalize_columns(df)
    date_col = resolve_date_column(cfg)
    result = ValidationResult(n_rows=len(data))

    # --- Schema checks ---
    missing = [c for c in (date_col,) + COUNT_COLUMNS if c not in data.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result  # can't continue without columns

    n = len(data)
    if n == 0:
        result.warnings.append("Table is empty (0 rows); outputs will be empty.")
        return result

    # --- Summit dates ---
    dates = parse_summit_dates(data, cfg)
    result.n_dated = int(dates.notna().sum())
    n_undated = n - result.n_dated
    if n_undated > 0:
        result.warnings.append(
            f"{n_undated} of {n} rows have a missing/unparseable {date_col} "
            f"and will be excluded."
        )
    raw_dates = data[date_col]
    if not pd.api.types.is_datetime64_any_dtype(raw_dates):
        is_number = raw_dates.map(lambda v: isinstance(v, Number) and not pd.isna(v))
        n_numeric = int(is_number.astype(bool).sum())
        if n_numeric > 0:
            result.warnings.append(
                f"{n_numeric} rows have a numeric {date_col}; numbers are not read as dates."
            )

    # --- Counts ---
    counts = {c: pd.to_numeric(data[c], errors="coerce") for c in COUNT_COLUMNS}
    for col, vals in counts.items():
        n_neg = int((vals < 0).sum())
        if n_neg > 0:
            result.errors.append(f"{n_neg} rows have negative {col}.")
        n_bad = int((vals.isna() & data[col].notna()).sum())
        if n_bad > 0:
            result.warnings.append(f"{n_bad} rows have non-numeric {col} (treated as 0).")
        n_frac = int((vals.notna() & (vals % 1 != 0)).sum())
        if n_frac > 0:
            result.warnings.append(f"{n_frac} rows have fractional {col} (treated as 0).")

    # --- Plausibility (not corrected) ---
    for achieved, size in _BOUNDED_PAIRS:
        n_over = int((counts[achieved].fillna(0) > counts[size].fillna(0)).sum())
        if n_over > 0:
            result.warnings.append(f"{n_over} rows have {achieved} > {size}.")

    return result
