"""Time bucketing of dated records.

Weeks follow ISO-8601 (Monday start, week 1 contains the first Thursday), as
returned by ``date.isocalendar()``. A week key uses the ISO year, so the last
days of December can land in week 1 of the next ISO year.
"""

import calendar
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Sequence, TypeVar

from farmstats.domain.entities import AnalyticsPeriod

T = TypeVar("T")

MONTH_NAMES = tuple(calendar.month_name[1:])


@dataclass(frozen=True)
class Bucket:
    """A time-partitioned group of records."""

    key: str
    label: str
    month_number: int
    start: date
    records: tuple


def year_range(year: int) -> tuple[date, date]:
    """Return the first and last day of a calendar year."""
    return date(year, 1, 1), date(year, 12, 31)


def days_in_year(year: int) -> int:
    """Return the number of calendar days in a year."""
    return 366 if calendar.isleap(year) else 365


def week_key(day: date) -> str:
    """Return the ISO week key (e.g. '2025-W01') for a date."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def bucketize(
    records: Iterable[T],
    period: AnalyticsPeriod,
    accessor: Callable[[T], date],
    year: int,
) -> list[Bucket]:
    """Group records into ordered time buckets within one calendar year.

    Args:
        records: Records to group
        period: Bucket granularity
        accessor: Returns the date a record is bucketed by
        year: Calendar year; records dated in other years are dropped

    Returns:
        Buckets in chronological order. Monthly always yields twelve buckets;
        weekly and daily only yield buckets that hold records.
    """
    in_year = [record for record in records if accessor(record).year == year]

    if period == AnalyticsPeriod.MONTHLY:
        return _monthly_buckets(in_year, accessor, year)
    if period == AnalyticsPeriod.WEEKLY:
        return _weekly_buckets(in_year, accessor, year)
    if period == AnalyticsPeriod.DAILY:
        return _daily_buckets(in_year, accessor)
    raise ValueError(f"Unknown period: {period!r}")


def _monthly_buckets(
    records: Sequence[T], accessor: Callable[[T], date], year: int
) -> list[Bucket]:
    by_month: dict[int, list[T]] = defaultdict(list)
    for record in records:
        by_month[accessor(record).month].append(record)

    return [
        Bucket(
            key=f"{year}-{month:02d}",
            label=MONTH_NAMES[month - 1],
            month_number=month,
            start=date(year, month, 1),
            records=tuple(by_month.get(month, ())),
        )
        for month in range(1, 13)
    ]


def _weekly_buckets(
    records: Sequence[T], accessor: Callable[[T], date], year: int
) -> list[Bucket]:
    by_week: dict[tuple[int, int], list[T]] = defaultdict(list)
    for record in records:
        iso_year, iso_week, _ = accessor(record).isocalendar()
        by_week[(iso_year, iso_week)].append(record)

    first_day = date(year, 1, 1)
    buckets = []
    for iso_year, iso_week in sorted(by_week):
        monday = date.fromisocalendar(iso_year, iso_week, 1)
        # A week spanning New Year starts on 1 January for this year
        start = max(monday, first_day)
        key = week_key(monday)
        buckets.append(
            Bucket(
                key=key,
                label=key,
                month_number=start.month,
                start=start,
                records=tuple(by_week[(iso_year, iso_week)]),
            )
        )
    return buckets


def _daily_buckets(
    records: Sequence[T], accessor: Callable[[T], date]
) -> list[Bucket]:
    by_day: dict[date, list[T]] = defaultdict(list)
    for record in records:
        by_day[accessor(record)].append(record)

    return [
        Bucket(
            key=day.isoformat(),
            label=day.isoformat(),
            month_number=day.month,
            start=day,
            records=tuple(by_day[day]),
        )
        for day in sorted(by_day)
    ]
