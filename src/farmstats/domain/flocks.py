"""Flock scoring and ranking."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from farmstats.domain.entities import Flock, FlockRanking, FlockSortField

# Weights of the composite performance score; they sum to 1.
PRODUCTIVITY_WEIGHT = Decimal("0.40")
HEALTH_WEIGHT = Decimal("0.35")
FEED_EFFICIENCY_WEIGHT = Decimal("0.25")

MIN_SCORE = Decimal("0")
MAX_SCORE = Decimal("100")

_SORT_ATTRIBUTES = {
    FlockSortField.PERFORMANCE: "performance",
    FlockSortField.HEALTH: "health",
    FlockSortField.PRODUCTIVITY: "productivity",
    FlockSortField.FEED_EFFICIENCY: "feed_efficiency",
}


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def performance_score(health: float, productivity: float, feed_efficiency: float) -> float:
    """Weighted composite of a flock's scores, clamped to 0-100."""
    score = (
        PRODUCTIVITY_WEIGHT * _to_decimal(productivity)
        + HEALTH_WEIGHT * _to_decimal(health)
        + FEED_EFFICIENCY_WEIGHT * _to_decimal(feed_efficiency)
    )
    return float(min(max(score, MIN_SCORE), MAX_SCORE))


def score_flock(flock: Flock) -> FlockRanking:
    """Compute the derived scores of one flock."""
    performance = performance_score(
        flock.health_score, flock.productivity_score, flock.feed_efficiency_score
    )
    parts = [
        _to_decimal(flock.health_score),
        _to_decimal(flock.productivity_score),
        _to_decimal(flock.feed_efficiency_score),
        _to_decimal(performance),
    ]
    total = (sum(parts, Decimal("0")) / len(parts)).quantize(
        Decimal("0.1"), rounding=ROUND_HALF_UP
    )

    return FlockRanking(
        flock_name=flock.name,
        performance=performance,
        health=float(flock.health_score),
        productivity=float(flock.productivity_score),
        feed_efficiency=float(flock.feed_efficiency_score),
        total_score=float(total),
    )


def rank_flocks(flocks: Iterable[Flock], sort_by: FlockSortField) -> list[FlockRanking]:
    """Score flocks and order them best first.

    Flocks are sorted descending by the ``sort_by`` field, then by name
    ascending, so the result is the same for the same input.
    """
    attribute = _SORT_ATTRIBUTES[FlockSortField(sort_by)]
    scored = [score_flock(flock) for flock in flocks]
    return sorted(scored, key=lambda r: (-getattr(r, attribute), r.flock_name))
