"""Shared pytest fixtures for expedition pipeline tests."""

from datetime import date

import pytest

from core.models import ExpeditionRecord


@pytest.fixture
def make_record():
    """Factory for ExpeditionRecord with zero counts unless overridden."""

    def _make(summit_date=None, **counts):
        fields = {
            "total_members": 0,
            "total_hired": 0,
            "summit_members": 0,
            "summit_hired": 0,
            "member_deaths": 0,
            "hired_deaths": 0,
        }
        fields.update(counts)
        return ExpeditionRecord(summit_date=summit_date, **fields)

    return _make


@pytest.fixture
def may_2021_records():
    """Two expeditions summiting in May 2021 (17 summits, 1 death, 19 people)."""
    return [
        ExpeditionRecord(
            summit_date=date(2021, 5, 10),
            total_members=10,
            summit_members=8,
            member_deaths=0,
            total_hired=5,
            summit_hired=5,
            hired_deaths=1,
        ),
        ExpeditionRecord(
            summit_date=date(2021, 5, 20),
            total_members=4,
            summit_members=4,
            member_deaths=0,
            total_hired=0,
            summit_hired=0,
            hired_deaths=0,
        ),
    ]


@pytest.fixture
def raw_expeditions_rows():
    """Rows spelled the way the Himalayan Database exports them."""
    return [
        {
            "EXPID": "EVER21101",
            "YEAR": 2021,
            "SMTDATE": "2021-05-10",
            "TOTMEMBERS": 10,
            "TOTHIRED": 5,
            "SMTMEMBERS": 8,
            "SMTHIRED": 5,
            "MDEATHS": 0,
            "HDEATHS": 1,
            "HIGHPOINT": 8849,
            "O2USED": "TRUE",
        },
        {
            "EXPID": "EVER21102",
            "YEAR": 2021,
            "SMTDATE": "2021-05-20",
            "TOTMEMBERS": 4,
            "TOTHIRED": 0,
            "SMTMEMBERS": 4,
            "SMTHIRED": 0,
            "MDEATHS": 0,
            "HDEATHS": 0,
            "HIGHPOINT": 8849,
            "O2USED": "FALSE",
        },
        {
            "EXPID": "EVER21103",
            "YEAR": 2021,
            "SMTDATE": None,
            "TOTMEMBERS": 6,
            "TOTHIRED": 3,
            "SMTMEMBERS": 0,
            "SMTHIRED": 0,
            "MDEATHS": 0,
            "HDEATHS": 0,
            "HIGHPOINT": 7900,
            "O2USED": "FALSE",
        },
    ]
