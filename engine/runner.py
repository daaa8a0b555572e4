"""
Pipeline runner — raw expeditions in, monthly series and yearly rates out.

  raw rows -> ExpeditionRecords -> monthly groups -> dense monthly buckets
                                  monthly groups -> yearly roll-up -> rates

Monthly groups are built once and feed both outputs. Results come back as
DataFrames with the column names of core.schema, ready for a reporting layer.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from core.config import AnalysisConfig
from core.models import (
    ExpeditionRecord,
    MonthlyBucket,
    MonthlyGroup,
    YearlyRate,
    dated_records,
)
from core.schema import (
    MONTHLY_BUCKET_COLUMNS,
    MONTHLY_TOTALS_COLUMNS,
    YEARLY_RATE_COLUMNS,
)
from data_prep.records import records_from_frame
from data_prep.validators import validate_expeditions

from .aggregator import complete_monthly, group_by_month, reshape_long
from .rates import summarize_rates_from_groups

logger = logging.getLogger(__name__)


def buckets_to_frame(buckets: Iterable[MonthlyBucket]) -> pd.DataFrame:
    rows = [asdict(b) for b in buckets]
    df = pd.DataFrame(rows, columns=list(MONTHLY_BUCKET_COLUMNS))
    return df.astype({"year": int, "month": int, "count": int})


def groups_to_frame(groups: Iterable[MonthlyGroup]) -> pd.DataFrame:
    """Auxiliary per-(year, month) sums, including participant totals."""
    rows = []
    for g in groups:
        t = g.totals
        rows.append({
            "year": g.year,
            "month": g.month,
            "n_records": t.n_records,
            "member_summits": t.member_summits,
            "member_deaths": t.member_deaths,
            "hired_summits": t.hired_summits,
            "hired_deaths": t.hired_deaths,
            "total_summits": t.total_summits,
            "total_deaths": t.total_deaths,
            "total_members": t.total_members,
            "total_hired": t.total_hired,
        })
    return pd.DataFrame(rows, columns=list(MONTHLY_TOTALS_COLUMNS))


def rates_to_frame(rates: Iterable[YearlyRate]) -> pd.DataFrame:
    """Yearly rates; undefined rates stay NaN."""
    rows = [asdict(r) for r in rates]
    df = pd.DataFrame(rows, columns=list(YEARLY_RATE_COLUMNS))
    return df.astype({"summit_rate": float, "death_rate": float})


def _to_records(
    data: Union[pd.DataFrame, Sequence[ExpeditionRecord]],
    cfg: AnalysisConfig,
) -> List[ExpeditionRecord]:
    if not isinstance(data, pd.DataFrame):
        return list(data)

    if cfg.validate:
        result = validate_expeditions(data, cfg)
        for w in result.warnings:
            logger.warning(w)
        if not result.is_valid:
            raise ValueError(f"Expeditions table failed validation:\n{result.summary()}")
    return records_from_frame(data, cfg)


def run_pipeline(
    data: Union[pd.DataFrame, Sequence[ExpeditionRecord]],
    config: Optional[AnalysisConfig] = None,
) -> Dict[str, pd.DataFrame]:
    """
    Run aggregation and rate summarization in one pass.

    Parameters
    ----------
    data : pd.DataFrame or sequence of ExpeditionRecord
        A DataFrame is canonicalized, validated (if config.validate) and
        converted; records are used as given.
    config : AnalysisConfig, optional
        Date parsing options and the inclusive summit-year window.

    Returns
    -------
    Dict with:
      "monthly":        dense MonthlyBucket rows (year, month, category, metric, count)
      "monthly_totals": one row per observed (year, month) with all sums
      "yearly_rates":   one row per year with summit_rate / death_rate
    """
    cfg = config or AnalysisConfig()
    records = _to_records(data, cfg)

    in_window = [
        r for r in dated_records(records) if cfg.year_in_window(r.summit_date.year)
    ]
    logger.debug(
        f"Running pipeline on {len(in_window)} dated records "
        f"({len(records)} supplied)"
    )

    groups = list(group_by_month(in_window).values())
    buckets = complete_monthly(reshape_long(groups))
    rates = summarize_rates_from_groups(groups)

    return {
        "monthly": buckets_to_frame(buckets),
        "monthly_totals": groups_to_frame(groups),
        "yearly_rates": rates_to_frame(rates),
    }
