"""
Monthly aggregation of expedition records into a dense summit/death series.

Steps:
  1. Drop records without a usable summit date (shared rule in core.models)
  2. Group by (summit year, summit month) and sum counts per group
  3. Reshape each group into one row per (category, metric) pair
  4. Completeness pass: every month 1-12 of every observed year gets all six
     pairs, zero-filled where no record fell
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from core.models import (
    ExpeditionRecord,
    MonthlyBucket,
    MonthlyGroup,
    ParticipantTotals,
    has_summit_date,
)
from core.schema import BUCKET_FIELDS, MONTHS

logger = logging.getLogger(__name__)

MonthKey = Tuple[int, int]


def group_by_month(records: Iterable[ExpeditionRecord]) -> Dict[MonthKey, MonthlyGroup]:
    """
    Sum counts per (year, month) of the summit date.

    Returns a dict keyed by (year, month), ordered chronologically. A dated
    record whose counts are all missing still creates its group (with zeros).
    """
    sums: Dict[MonthKey, ParticipantTotals] = {}
    n_seen = 0
    for record in records:
        n_seen += 1
        if not has_summit_date(record):
            continue
        key = (record.summit_date.year, record.summit_date.month)
        part = ParticipantTotals.from_record(record)
        sums[key] = sums[key].combine(part) if key in sums else part

    n_dated = sum(t.n_records for t in sums.values())
    if n_seen > n_dated:
        logger.info(f"Excluded {n_seen - n_dated} of {n_seen} records without a summit date")

    return {
        key: MonthlyGroup(year=key[0], month=key[1], totals=sums[key])
        for key in sorted(sums)
    }


def reshape_long(groups: Iterable[MonthlyGroup]) -> List[MonthlyBucket]:
    """One MonthlyBucket per (category, metric) pair for each observed group."""
    rows: List[MonthlyBucket] = []
    for group in groups:
        for (category, metric), field_name in BUCKET_FIELDS.items():
            rows.append(
                MonthlyBucket(
                    year=group.year,
                    month=group.month,
                    category=category,
                    metric=metric,
                    count=int(getattr(group.totals, field_name)),
                )
            )
    return rows


def complete_monthly(buckets: Iterable[MonthlyBucket]) -> List[MonthlyBucket]:
    """
    Zero-fill the series so each observed year has all 12 months x 6 pairs.

    The fill is local to years already present: no year outside the input is
    introduced. Buckets sharing a key are summed; only the six standard
    (category, metric) pairs of months 1-12 are emitted.
    """
    counts: Dict[Tuple[int, int, str, str], int] = {}
    for b in buckets:
        counts[b.key] = counts.get(b.key, 0) + b.count

    years = sorted({key[0] for key in counts})
    out: List[MonthlyBucket] = []
    for year in years:
        for month in MONTHS:
            for category, metric in BUCKET_FIELDS:
                out.append(
                    MonthlyBucket(
                        year=year,
                        month=month,
                        category=category,
                        metric=metric,
                        count=counts.get((year, month, category, metric), 0),
                    )
                )
    return out


def aggregate(records: Sequence[ExpeditionRecord]) -> List[MonthlyBucket]:
    """
    Dense monthly summit/death counts by participant category.

    Parameters
    ----------
    records : sequence of ExpeditionRecord
        Raw expedition rows. Undated records are ignored.

    Returns
    -------
    List of MonthlyBucket sorted by year, month, category, metric;
    exactly 72 rows per observed year. Empty input gives an empty list.
    """
    groups = group_by_month(records)
    buckets = complete_monthly(reshape_long(groups.values()))
    logger.debug(f"Aggregated {len(groups)} observed months into {len(buckets)} monthly buckets")
    return buckets
