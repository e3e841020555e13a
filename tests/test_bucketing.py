"""Tests for time bucketing."""

from datetime import date

import pytest

from farmstats.domain.bucketing import bucketize, days_in_year, week_key, year_range
from farmstats.domain.entities import AnalyticsPeriod, TransactionKind

from conftest import make_transaction


def _by_date(txn):
    return txn.occurred_on


def test_monthly_always_returns_twelve_buckets():
    buckets = bucketize([], AnalyticsPeriod.MONTHLY, _by_date, 2025)

    assert len(buckets) == 12
    assert [b.month_number for b in buckets] == list(range(1, 13))
    assert buckets[0].label == "January"
    assert buckets[11].label == "December"
    assert all(b.records == () for b in buckets)


def test_monthly_groups_records_by_month():
    txns = [
        make_transaction(TransactionKind.INCOME, "10", date(2025, 3, 2), txn_id=1),
        make_transaction(TransactionKind.INCOME, "20", date(2025, 3, 30), txn_id=2),
        make_transaction(TransactionKind.EXPENSE, "5", date(2025, 7, 1), txn_id=3),
    ]

    buckets = bucketize(txns, AnalyticsPeriod.MONTHLY, _by_date, 2025)

    assert [t.id for t in buckets[2].records] == [1, 2]
    assert [t.id for t in buckets[6].records] == [3]
    assert buckets[2].key == "2025-03"


def test_records_outside_year_are_excluded():
    txns = [
        make_transaction(TransactionKind.INCOME, "10", date(2024, 12, 31), txn_id=1),
        make_transaction(TransactionKind.INCOME, "20", date(2025, 1, 1), txn_id=2),
        make_transaction(TransactionKind.INCOME, "30", date(2026, 1, 1), txn_id=3),
    ]

    for period in AnalyticsPeriod:
        buckets = bucketize(txns, period, _by_date, 2025)
        ids = [t.id for b in buckets for t in b.records]
        assert ids == [2]


def test_daily_only_emits_dates_with_records_in_order():
    txns = [
        make_transaction(TransactionKind.INCOME, "10", date(2025, 5, 3), txn_id=1),
        make_transaction(TransactionKind.INCOME, "20", date(2025, 1, 9), txn_id=2),
        make_transaction(TransactionKind.INCOME, "30", date(2025, 5, 3), txn_id=3),
    ]

    buckets = bucketize(txns, AnalyticsPeriod.DAILY, _by_date, 2025)

    assert [b.label for b in buckets] == ["2025-01-09", "2025-05-03"]
    assert [t.id for t in buckets[1].records] == [1, 3]
    assert buckets[1].month_number == 5


def test_weekly_uses_iso_weeks():
    txns = [
        # Monday and Sunday of ISO week 2 of 2025
        make_transaction(TransactionKind.INCOME, "10", date(2025, 1, 6), txn_id=1),
        make_transaction(TransactionKind.INCOME, "20", date(2025, 1, 12), txn_id=2),
        make_transaction(TransactionKind.INCOME, "30", date(2025, 1, 13), txn_id=3),
    ]

    buckets = bucketize(txns, AnalyticsPeriod.WEEKLY, _by_date, 2025)

    assert [b.label for b in buckets] == ["2025-W02", "2025-W03"]
    assert [t.id for t in buckets[0].records] == [1, 2]
    assert buckets[0].start == date(2025, 1, 6)


def test_weekly_year_end_belongs_to_next_iso_year():
    # 2024-12-30 is the Monday of ISO week 1 of 2025
    txns = [
        make_transaction(TransactionKind.INCOME, "10", date(2024, 12, 30), txn_id=1),
        make_transaction(TransactionKind.INCOME, "20", date(2024, 6, 1), txn_id=2),
    ]

    buckets = bucketize(txns, AnalyticsPeriod.WEEKLY, _by_date, 2024)

    assert [b.label for b in buckets] == ["2024-W22", "2025-W01"]
    assert buckets[-1].month_number == 12


def test_weekly_new_year_days_in_previous_iso_week_53():
    # 2021-01-01 falls in ISO week 53 of 2020
    txns = [make_transaction(TransactionKind.INCOME, "10", date(2021, 1, 1))]

    buckets = bucketize(txns, AnalyticsPeriod.WEEKLY, _by_date, 2021)

    assert len(buckets) == 1
    assert buckets[0].label == "2020-W53"
    assert buckets[0].start == date(2021, 1, 1)
    assert buckets[0].month_number == 1


def test_leap_day_is_bucketed():
    txns = [make_transaction(TransactionKind.INCOME, "10", date(2024, 2, 29))]

    monthly = bucketize(txns, AnalyticsPeriod.MONTHLY, _by_date, 2024)
    daily = bucketize(txns, AnalyticsPeriod.DAILY, _by_date, 2024)

    assert len(monthly[1].records) == 1
    assert daily[0].label == "2024-02-29"


def test_unknown_period_rejected():
    with pytest.raises(ValueError):
        bucketize([], "hourly", _by_date, 2025)


@pytest.mark.parametrize(
    "year,expected",
    [(2023, 365), (2024, 366), (2000, 366), (2100, 365)],
)
def test_days_in_year(year, expected):
    assert days_in_year(year) == expected


def test_year_range_and_week_key():
    assert year_range(2025) == (date(2025, 1, 1), date(2025, 12, 31))
    assert week_key(date(2026, 12, 31)) == "2026-W53"
