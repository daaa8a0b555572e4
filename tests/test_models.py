"""Tests for the record model and shared helpers."""

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from core.models import ExpeditionRecord, ParticipantTotals, dated_records, has_summit_date
from core.utils import coerce_date, count_or_zero, safe_ratio


class TestCoerceDate:
    @pytest.mark.parametrize(
        "value",
        [date(2021, 5, 10), datetime(2021, 5, 10, 12), pd.Timestamp("2021-05-10"),
         np.datetime64("2021-05-10"), "2021-05-10"],
    )
    def test_date_like_values(self, value):
        assert coerce_date(value) == date(2021, 5, 10)

    @pytest.mark.parametrize("value", [None, pd.NaT, np.nan, "", "unknown", 20210510])
    def test_missing_or_malformed(self, value):
        assert coerce_date(value) is None


class TestExpeditionRecord:
    def test_summit_date_normalized(self):
        assert ExpeditionRecord(summit_date="2019-05-23").summit_date == date(2019, 5, 23)

    def test_shared_predicate(self):
        dated = ExpeditionRecord(summit_date=date(2019, 5, 23))
        undated = ExpeditionRecord(summit_date="??")
        assert has_summit_date(dated)
        assert not has_summit_date(undated)
        assert list(dated_records([dated, undated])) == [dated]


class TestParticipantTotals:
    def test_missing_counts_sum_as_zero(self):
        record = ExpeditionRecord(summit_date=date(2020, 1, 1), summit_members=3,
                                  total_hired=float("nan"))
        t = ParticipantTotals.from_record(record)
        assert t.member_summits == 3
        assert t.total_hired == 0
        assert t.participants == 0
        assert t.n_records == 1

    def test_combine_is_order_free(self):
        a = ParticipantTotals(member_summits=1, hired_deaths=2, total_members=5, n_records=1)
        b = ParticipantTotals(hired_summits=4, member_deaths=1, total_hired=6, n_records=1)
        c = ParticipantTotals(member_summits=2, n_records=1)
        assert a.combine(b) == b.combine(a)
        assert a.combine(b).combine(c) == a.combine(b.combine(c))
        total = a.combine(b).combine(c)
        assert total.total_summits == 7
        assert total.total_deaths == 3
        assert total.participants == 11


class TestHelpers:
    def test_count_or_zero(self):
        assert count_or_zero(None) == 0
        assert count_or_zero(np.nan) == 0
        assert count_or_zero(pd.NA) == 0
        assert count_or_zero(4) == 4

    def test_safe_ratio(self):
        assert safe_ratio(1, 4) == 0.25
        assert np.isnan(safe_ratio(3, 0))
        assert safe_ratio(0, 5) == 0.0
