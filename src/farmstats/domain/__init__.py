"""Domain layer for farmstats application."""

from farmstats.domain.bucketing import bucketize
from farmstats.domain.financials import summarize_financials
from farmstats.domain.eggs import summarize_eggs, summarize_egg_stats
from farmstats.domain.flocks import rank_flocks

__all__ = [
    "bucketize",
    "summarize_financials",
    "summarize_eggs",
    "summarize_egg_stats",
    "rank_flocks",
]
