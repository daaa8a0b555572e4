from __future__ import annotations

from typing import Dict, Tuple

# Canonical expedition columns after data_prep.canonicalize_columns().
# The date column and the six counts are required; the rest ride along.
SUMMIT_DATE_COLUMN = "summit_date"

COUNT_COLUMNS: Tuple[str, ...] = (
    "total_members",
    "total_hired",
    "summit_members",
    "summit_hired",
    "member_deaths",
    "hired_deaths",
)

REQUIRED_COLUMNS: Tuple[str, ...] = (SUMMIT_DATE_COLUMN,) + COUNT_COLUMNS

AUXILIARY_COLUMNS: Tuple[str, ...] = (
    "expedition_id",
    "year",
    "high_point",
    "oxygen_used",
)

EXPEDITION_COLUMNS: Tuple[str, ...] = REQUIRED_COLUMNS + AUXILIARY_COLUMNS

# Participant categories and metrics, in display/sort order.
MEMBER = "Member"
HIRED = "Hired"
TOTAL = "Total"
CATEGORIES: Tuple[str, ...] = (MEMBER, HIRED, TOTAL)

SUMMITS = "Summits"
DEATHS = "Deaths"
METRICS: Tuple[str, ...] = (SUMMITS, DEATHS)

MONTHS: Tuple[int, ...] = tuple(range(1, 13))

# (category, metric) -> ParticipantTotals attribute holding its count.
# Iteration order is the output row order within one (year, month).
BUCKET_FIELDS: Dict[Tuple[str, str], str] = {
    (MEMBER, SUMMITS): "member_summits",
    (MEMBER, DEATHS): "member_deaths",
    (HIRED, SUMMITS): "hired_summits",
    (HIRED, DEATHS): "hired_deaths",
    (TOTAL, SUMMITS): "total_summits",
    (TOTAL, DEATHS): "total_deaths",
}

# Output table columns (the contract towards reporting layers).
MONTHLY_BUCKET_COLUMNS: Tuple[str, ...] = ("year", "month", "category", "metric", "count")

MONTHLY_TOTALS_COLUMNS: Tuple[str, ...] = (
    "year",
    "month",
    "n_records",
    "member_summits",
    "member_deaths",
    "hired_summits",
    "hired_deaths",
    "total_summits",
    "total_deaths",
    "total_members",
    "total_hired",
)

YEARLY_RATE_COLUMNS: Tuple[str, ...] = (
    "year",
    "summit_rate",
    "death_rate",
    "summits",
    "deaths",
    "participants",
)
