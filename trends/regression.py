"""
Linear trend of yearly rates over time.

A thin layer over scipy.stats.linregress: answers "is the summit rate rising,
and is the death rate falling?" from the RateSummarizer's output. Years with
undefined (NaN) rates are left out of the fit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np
import pandas as pd
from scipy import stats

from core.models import YearlyRate

logger = logging.getLogger(__name__)

RATE_METRICS = ("summit_rate", "death_rate")


@dataclass(frozen=True)
class RateTrend:
    """Least-squares line rate = intercept + slope * year."""
    metric: str
    slope: float
    intercept: float
    r_value: float
    p_value: float
    stderr: float
    n_years: int
    first_year: int
    last_year: int

    @property
    def r_squared(self) -> float:
        return self.r_value ** 2

    def predict(self, year: float) -> float:
        return self.intercept + self.slope * year

    def __repr__(self) -> str:
        return (
            f"RateTrend({self.metric}: slope={self.slope:.5f}/yr, "
            f"r={self.r_value:.3f}, p={self.p_value:.4f}, "
            f"years={self.first_year}-{self.last_year}, n={self.n_years})"
        )


def fit_rate_trend(
    rates: Iterable[YearlyRate],
    metric: str = "summit_rate",
    *,
    min_years: int = 3,
) -> RateTrend:
    """
    Fit a linear trend of one rate metric against year.

    Raises ValueError for an unknown metric or when fewer than `min_years`
    years have a defined rate.
    """
    if metric not in RATE_METRICS:
        raise ValueError(f"Unknown rate metric {metric!r}; expected one of {RATE_METRICS}")

    pairs = [(r.year, getattr(r, metric)) for r in rates]
    pairs = [(y, v) for y, v in pairs if not np.isnan(v)]
    if len(pairs) < max(min_years, 2):
        raise ValueError(
            f"Need at least {max(min_years, 2)} years with a defined {metric} "
            f"to fit a trend, got {len(pairs)}."
        )

    years = np.array([p[0] for p in pairs], dtype=float)
    values = np.array([p[1] for p in pairs], dtype=float)
    res = stats.linregress(years, values)

    return RateTrend(
        metric=metric,
        slope=float(res.slope),
        intercept=float(res.intercept),
        r_value=float(res.rvalue),
        p_value=float(res.pvalue),
        stderr=float(res.stderr),
        n_years=len(pairs),
        first_year=int(years.min()),
        last_year=int(years.max()),
    )


def trend_table(rates: Iterable[YearlyRate], *, min_years: int = 3) -> pd.DataFrame:
    """One row per rate metric; metrics without enough data are skipped."""
    rates = list(rates)
    rows: List[dict] = []
    for metric in RATE_METRICS:
        try:
            t = fit_rate_trend(rates, metric, min_years=min_years)
        except ValueError as exc:
            logger.info(f"Skipping {metric} trend: {exc}")
            continue
        rows.append({
            "metric": t.metric,
            "slope": t.slope,
            "intercept": t.intercept,
            "r_value": t.r_value,
            "r_squared": t.r_squared,
            "p_value": t.p_value,
            "stderr": t.stderr,
            "n_years": t.n_years,
            "first_year": t.first_year,
            "last_year": t.last_year,
        })
    return pd.DataFrame(
        rows,
        columns=[
            "metric", "slope", "intercept", "r_value", "r_squared",
            "p_value", "stderr", "n_years", "first_year", "last_year",
        ],
    )
