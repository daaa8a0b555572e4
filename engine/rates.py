"""
Yearly summit-success and mortality rates.

  summit_rate = (member summits + hired summits) / (total members + total hired)
  death_rate  = (member deaths  + hired deaths)  / (total members + total hired)

Rates are computed from the same per-month groups the aggregator builds, rolled
up by year, so both outputs share one filtering rule and one set of sums.
A year with zero participants gets NaN rates (undefined, not zero); other
years are unaffected.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from core.models import ExpeditionRecord, MonthlyGroup, ParticipantTotals, YearlyRate
from core.utils import safe_ratio

from .aggregator import group_by_month

logger = logging.getLogger(__name__)


def rollup_yearly(groups: Iterable[MonthlyGroup]) -> Dict[int, ParticipantTotals]:
    """Sum per-month groups into per-year totals, ordered by year."""
    by_year: Dict[int, ParticipantTotals] = {}
    for group in groups:
        prev = by_year.get(group.year)
        by_year[group.year] = group.totals if prev is None else prev.combine(group.totals)
    return {year: by_year[year] for year in sorted(by_year)}


def _rate_for_year(year: int, totals: ParticipantTotals) -> YearlyRate:
    participants = totals.participants
    if participants == 0:
        logger.warning(f"Year {year} has zero participants; summit/death rates are undefined (NaN)")
    return YearlyRate(
        year=year,
        summit_rate=safe_ratio(totals.total_summits, participants),
        death_rate=safe_ratio(totals.total_deaths, participants),
        summits=totals.total_summits,
        deaths=totals.total_deaths,
        participants=participants,
    )


def summarize_rates_from_groups(groups: Iterable[MonthlyGroup]) -> List[YearlyRate]:
    """Yearly rates from already-built monthly groups (see engine.aggregator.group_by_month)."""
    return [_rate_for_year(year, totals) for year, totals in rollup_yearly(groups).items()]


def summarize_rates(records: Sequence[ExpeditionRecord]) -> List[YearlyRate]:
    """
    Per-year summit and death proportions relative to total participants.

    Parameters
    ----------
    records : sequence of ExpeditionRecord
        Raw expedition rows. Undated records are ignored; the year is taken
        from the summit date, not from the auxiliary `year` field.

    Returns
    -------
    List of YearlyRate sorted by year. Empty when no dated records exist.
    """
    return summarize_rates_from_groups(group_by_month(records).values())
