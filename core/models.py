"""
Data model for expedition records and everything derived from them.

All types are frozen: derived rows are pure functions of one input record set
and carry no identity beyond their key (year/month/category/metric, or year).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

import numpy as np

from .utils import coerce_date, count_or_zero


@dataclass(frozen=True)
class ExpeditionRecord:
    """One expedition attempt.

    Counts are nullable at the source; a missing count sums as zero.
    `summit_date` is normalized on construction and becomes None when it is
    absent or cannot be parsed, which excludes the record from aggregation.
    """
    summit_date: Optional[date] = None
    total_members: Optional[int] = None
    total_hired: Optional[int] = None
    summit_members: Optional[int] = None
    summit_hired: Optional[int] = None
    member_deaths: Optional[int] = None
    hired_deaths: Optional[int] = None
    # carried through for analyses outside the aggregation
    high_point: Optional[int] = None
    oxygen_used: Optional[bool] = None
    year: Optional[int] = None
    expedition_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "summit_date", coerce_date(self.summit_date))


def has_summit_date(record: ExpeditionRecord) -> bool:
    """Shared exclusion rule: only records with a usable summit date are time-attributable."""
    return record.summit_date is not None


def dated_records(records: Iterable[ExpeditionRecord]) -> Iterator[ExpeditionRecord]:
    return (r for r in records if has_summit_date(r))


@dataclass(frozen=True)
class ParticipantTotals:
    """Summed counts for one group of records (a month or a year)."""
    member_summits: int = 0
    member_deaths: int = 0
    hired_summits: int = 0
    hired_deaths: int = 0
    total_members: int = 0
    total_hired: int = 0
    n_records: int = 0

    @classmethod
    def from_record(cls, record: ExpeditionRecord) -> "ParticipantTotals":
        return cls(
            member_summits=count_or_zero(record.summit_members),
            member_deaths=count_or_zero(record.member_deaths),
            hired_summits=count_or_zero(record.summit_hired),
            hired_deaths=count_or_zero(record.hired_deaths),
            total_members=count_or_zero(record.total_members),
            total_hired=count_or_zero(record.total_hired),
            n_records=1,
        )

    def combine(self, other: "ParticipantTotals") -> "ParticipantTotals":
        # plain addition: associative and commutative, so any reduction order works
        return ParticipantTotals(
            member_summits=self.member_summits + other.member_summits,
            member_deaths=self.member_deaths + other.member_deaths,
            hired_summits=self.hired_summits + other.hired_summits,
            hired_deaths=self.hired_deaths + other.hired_deaths,
            total_members=self.total_members + other.total_members,
            total_hired=self.total_hired + other.total_hired,
            n_records=self.n_records + other.n_records,
        )

    @property
    def total_summits(self) -> int:
        return self.member_summits + self.hired_summits

    @property
    def total_deaths(self) -> int:
        return self.member_deaths + self.hired_deaths

    @property
    def participants(self) -> int:
        return self.total_members + self.total_hired


@dataclass(frozen=True)
class MonthlyGroup:
    """Per-(year, month) sums, including the participant totals the rate step needs."""
    year: int
    month: int
    totals: ParticipantTotals


@dataclass(frozen=True)
class MonthlyBucket:
    """One row of the dense monthly series."""
    year: int
    month: int
    category: str  # Member / Hired / Total
    metric: str  # Summits / Deaths
    count: int

    @property
    def key(self):
        return (self.year, self.month, self.category, self.metric)


@dataclass(frozen=True)
class YearlyRate:
    """Summit and death proportions for one year.

    Rates are NaN when the year has zero participants.
    """
    year: int
    summit_rate: float
    death_rate: float
    summits: int = 0
    deaths: int = 0
    participants: int = 0

    @property
    def is_defined(self) -> bool:
        return not (np.isnan(self.summit_rate) or np.isnan(self.death_rate))
