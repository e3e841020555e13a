"""Egg collection trends and egg sales statistics."""

from decimal import Decimal
from typing import Sequence

from farmstats.domain.bucketing import bucketize, days_in_year
from farmstats.domain.entities import (
    AnalyticsPeriod,
    EggCollectionEvent,
    EggReport,
    EggSale,
    EggStats,
    EggSummary,
    EggTrendPoint,
)


def summarize_eggs(
    events: Sequence[EggCollectionEvent], period: AnalyticsPeriod, year: int
) -> EggReport:
    """Build the egg collection trend for a year.

    Each collection event counts once towards ``collections`` regardless of
    hen count. Averages are returned unrounded.
    """
    trend = []
    total_eggs = 0
    for bucket in bucketize(events, period, lambda event: event.date, year):
        bucket_eggs = sum(event.eggs_collected for event in bucket.records)
        collections = len(bucket.records)
        trend.append(
            EggTrendPoint(
                period_label=bucket.label,
                total_eggs=bucket_eggs,
                collections=collections,
                average_per_collection=(
                    bucket_eggs / collections if collections > 0 else 0.0
                ),
            )
        )
        total_eggs += bucket_eggs

    summary = EggSummary(
        total_eggs=total_eggs,
        average_eggs_per_day=total_eggs / days_in_year(year),
    )
    return EggReport(trend=tuple(trend), summary=summary)


def summarize_egg_stats(
    events: Sequence[EggCollectionEvent], sales: Sequence[EggSale]
) -> EggStats:
    """Summarize collections and sales over all records given.

    The collection rate is eggs per hen as a percentage, with one egg per hen
    per collection counting as 100%.
    """
    total_eggs = sum(event.eggs_collected for event in events)
    total_hens = sum(event.hen_count for event in events)
    collection_rate = total_eggs / total_hens * 100 if total_hens > 0 else 0.0

    return EggStats(
        total_eggs_collected=total_eggs,
        total_eggs_sold=sum(sale.quantity for sale in sales),
        revenue=sum((sale.total for sale in sales), Decimal("0")),
        collection_rate=collection_rate,
    )
