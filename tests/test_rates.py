"""Tests for yearly summit/death rate summaries."""

import logging
import math
from dataclasses import replace
from datetime import date

import pytest

from engine.aggregator import group_by_month
from engine.rates import rollup_yearly, summarize_rates, summarize_rates_from_groups


class TestSummarizeRates:
    def test_scenario_rates(self, may_2021_records):
        rates = summarize_rates(may_2021_records)
        assert len(rates) == 1
        r = rates[0]
        assert r.year == 2021
        assert r.summit_rate == pytest.approx(17 / 19)
        assert r.death_rate == pytest.approx(1 / 19)
        assert (r.summits, r.deaths, r.participants) == (17, 1, 19)
        assert r.is_defined

    def test_groups_by_year_across_months(self, make_record):
        records = [
            make_record(date(2019, 4, 1), total_members=4, summit_members=2),
            make_record(date(2019, 11, 1), total_hired=6, summit_hired=3, hired_deaths=1),
            make_record(date(2020, 5, 1), total_members=10, summit_members=1),
        ]
        rates = {r.year: r for r in summarize_rates(records)}
        assert sorted(rates) == [2019, 2020]
        assert rates[2019].summit_rate == pytest.approx(5 / 10)
        assert rates[2019].death_rate == pytest.approx(1 / 10)
        assert rates[2020].summit_rate == pytest.approx(0.1)
        assert rates[2020].death_rate == 0.0

    def test_year_comes_from_summit_date(self, make_record):
        record = make_record(date(2015, 5, 1), total_members=2, summit_members=1)
        record = replace(record, year=2014)
        assert [r.year for r in summarize_rates([record])] == [2015]

    def test_rates_non_negative(self, make_record):
        records = [
            make_record(date(2000 + i, 5, 1), total_members=i + 1, summit_members=i,
                        member_deaths=i % 2)
            for i in range(6)
        ]
        for r in summarize_rates(records):
            assert r.summit_rate >= 0
            assert r.death_rate >= 0


class TestUndefinedRates:
    """Zero participants yields NaN, local to that year."""

    def test_zero_participants_is_nan(self, make_record):
        rates = summarize_rates([make_record(date(2010, 5, 1))])
        assert len(rates) == 1
        assert math.isnan(rates[0].summit_rate)
        assert math.isnan(rates[0].death_rate)
        assert not rates[0].is_defined

    def test_other_years_unaffected(self, make_record, may_2021_records):
        rates = summarize_rates([make_record(date(2010, 5, 1))] + may_2021_records)
        by_year = {r.year: r for r in rates}
        assert not by_year[2010].is_defined
        assert by_year[2021].summit_rate == pytest.approx(17 / 19)

    def test_zero_participants_logged(self, make_record, caplog):
        with caplog.at_level(logging.WARNING, logger="engine.rates"):
            summarize_rates([make_record(date(2010, 5, 1))])
        assert "2010" in caplog.text

    def test_summits_without_participants_still_nan(self, make_record):
        # untrusted counts are not corrected
        rates = summarize_rates([make_record(date(2011, 5, 1), summit_members=3)])
        assert math.isnan(rates[0].summit_rate)
        assert rates[0].summits == 3


class TestFiltering:
    def test_undated_records_excluded(self, make_record, may_2021_records):
        undated = make_record(None, total_members=100, summit_members=1)
        assert summarize_rates(may_2021_records + [undated]) == summarize_rates(may_2021_records)

    def test_empty_input(self):
        assert summarize_rates([]) == []

    def test_only_undated_input(self, make_record):
        assert summarize_rates([make_record(None, total_members=3)]) == []


class TestRollup:
    def test_rollup_from_groups_matches_direct(self, make_record):
        records = [
            make_record(date(2019, m, 1), total_members=m, summit_members=m // 2)
            for m in range(1, 13)
        ]
        groups = group_by_month(records).values()
        assert summarize_rates_from_groups(groups) == summarize_rates(records)

    def test_rollup_sums_months(self, make_record):
        records = [
            make_record(date(2019, 1, 1), total_members=3),
            make_record(date(2019, 7, 1), total_hired=4),
            make_record(date(2020, 7, 1), total_hired=1),
        ]
        yearly = rollup_yearly(group_by_month(records).values())
        assert list(yearly) == [2019, 2020]
        assert yearly[2019].participants == 7
        assert yearly[2019].n_records == 2

    def test_order_independent(self, make_record, may_2021_records):
        records = may_2021_records + [make_record(date(2019, 1, 1), total_members=2)]
        assert summarize_rates(records) == summarize_rates(list(reversed(records)))
