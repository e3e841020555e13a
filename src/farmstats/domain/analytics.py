"""Analytics facade: one call per dashboard request."""

import logging
from dataclasses import replace
from typing import Callable, Mapping, Optional, TypeVar

from farmstats.database.base import Database
from farmstats.domain.bucketing import year_range
from farmstats.domain.cache import AnalyticsCache
from farmstats.domain.eggs import summarize_egg_stats, summarize_eggs
from farmstats.domain.entities import (
    AnalyticsPeriod,
    AnalyticsRequest,
    AnalyticsResponse,
    AnalyticsSummary,
    EggStats,
    FinancialReport,
    FlockSortField,
    Transaction,
)
from farmstats.domain.errors import (
    InvalidRequest,
    UpstreamUnavailable,
    invalid_choice,
    invalid_year,
    upstream_unavailable,
)
from farmstats.domain.financials import summarize_financials
from farmstats.domain.flocks import rank_flocks

logger = logging.getLogger(__name__)

MIN_YEAR = 2000
MAX_YEAR = 2100

T = TypeVar("T")


def _validate_year(year: object) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidRequest(invalid_year(year, MIN_YEAR, MAX_YEAR))
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidRequest(invalid_year(year, MIN_YEAR, MAX_YEAR))
    return year


def _validate_period(period: object) -> AnalyticsPeriod:
    try:
        return AnalyticsPeriod(period)
    except ValueError:
        raise InvalidRequest(
            invalid_choice("period", period, [p.value for p in AnalyticsPeriod])
        ) from None


def _validate_sort_by(sort_by: object) -> FlockSortField:
    try:
        return FlockSortField(sort_by)
    except ValueError:
        raise InvalidRequest(
            invalid_choice("sortBy", sort_by, [f.value for f in FlockSortField])
        ) from None


def validate_request(request: AnalyticsRequest) -> AnalyticsRequest:
    """Check an analytics request and normalize its enum fields.

    Raises:
        InvalidRequest: If year, period or sort_by is not acceptable
    """
    if not request.farm_id:
        raise InvalidRequest("Farm ID is required")
    return replace(
        request,
        year=_validate_year(request.year),
        period=_validate_period(request.period),
        sort_by=_validate_sort_by(request.sort_by),
    )


def parse_analytics_request(
    farm_id: str, params: Mapping[str, str], default_year: int
) -> AnalyticsRequest:
    """Build a validated request from raw query parameters.

    Args:
        farm_id: Farm the request is scoped to
        params: Query parameters ``year``, ``period`` and ``sortBy``
        default_year: Year used when ``year`` is absent

    Returns:
        Validated AnalyticsRequest

    Raises:
        InvalidRequest: If a parameter is malformed or out of range
    """
    raw_year = params.get("year")
    if raw_year is None or str(raw_year).strip() == "":
        year = default_year
    else:
        text = str(raw_year).strip()
        if not (len(text) == 4 and text.isdigit()):
            raise InvalidRequest(invalid_year(raw_year, MIN_YEAR, MAX_YEAR))
        year = int(text)

    request = AnalyticsRequest(
        farm_id=farm_id,
        year=year,
        period=params.get("period") or AnalyticsPeriod.MONTHLY.value,
        sort_by=params.get("sortBy") or FlockSortField.PERFORMANCE.value,
    )
    return validate_request(request)


class AnalyticsService:
    """Service assembling analytics views from a farm's records."""

    def __init__(self, db: Database, cache: Optional[AnalyticsCache] = None):
        """Initialize analytics service.

        Args:
            db: Database instance supplying the farm's records
            cache: Optional response cache; it is subscribed to the database's
                change notifications so writes invalidate it
        """
        self.db = db
        self.cache = cache
        if cache is not None:
            db.add_change_listener(cache.invalidate_farm)

    def _read(self, resource: str, farm_id: str, reader: Callable[[], T]) -> T:
        try:
            return reader()
        except UpstreamUnavailable:
            logger.warning("Reading %s failed for farm %s", resource, farm_id)
            raise
        except (ConnectionError, TimeoutError) as e:
            logger.warning("Reading %s failed for farm %s: %s", resource, farm_id, e)
            raise UpstreamUnavailable(upstream_unavailable(resource, farm_id)) from e

    def _load_transactions(
        self, farm_id: str, year: int
    ) -> tuple[list[Transaction], list[Transaction]]:
        """Return (requested year, previous year) transactions."""
        start, _ = year_range(year - 1)
        _, end = year_range(year)
        transactions = self._read(
            "transactions",
            farm_id,
            lambda: self.db.list_transactions(farm_id, start_date=start, end_date=end),
        )
        current = [txn for txn in transactions if txn.occurred_on.year == year]
        previous = [txn for txn in transactions if txn.occurred_on.year == year - 1]
        return current, previous

    def get_analytics(self, request: AnalyticsRequest) -> AnalyticsResponse:
        """Compute the analytics page for a farm.

        Growth always compares the requested calendar year with the previous
        one, whatever the bucket period. Daily or weekly requests only change
        how the year is broken down.

        Args:
            request: Farm, year, bucket period and flock sort field

        Returns:
            AnalyticsResponse for the request

        Raises:
            InvalidRequest: If the request parameters are invalid
            InvalidCurrencyMix: If the farm's transactions mix currencies
            UpstreamUnavailable: If the records could not be read
        """
        request = validate_request(request)
        key = request.cache_key

        version = None
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Analytics cache hit for %s", key)
                return cached
            version = self.cache.version(request.farm_id)

        farm_id = request.farm_id
        start, end = year_range(request.year)
        current, previous = self._load_transactions(farm_id, request.year)
        events = self._read(
            "egg collections",
            farm_id,
            lambda: self.db.list_egg_collections(farm_id, start_date=start, end_date=end),
        )
        flocks = self._read("flocks", farm_id, lambda: self.db.list_flocks(farm_id))
        logger.debug(
            "Loaded %d transactions, %d egg collections and %d flocks for farm %s",
            len(current) + len(previous),
            len(events),
            len(flocks),
            farm_id,
        )

        financials = summarize_financials(
            current, request.period, request.year, previous_transactions=previous
        )
        eggs = summarize_eggs(events, request.period, request.year)
        ranked = rank_flocks(flocks, request.sort_by)

        response = AnalyticsResponse(
            income_expenses=financials.per_period,
            egg_trends=eggs.trend,
            top_flocks=tuple(ranked),
            summary=AnalyticsSummary(
                total_income=financials.summary.total_income,
                total_expenses=financials.summary.total_expenses,
                net_profit=financials.summary.net_profit,
                profit_margin=financials.summary.profit_margin,
                total_eggs=eggs.summary.total_eggs,
                average_eggs_per_day=eggs.summary.average_eggs_per_day,
                top_flock_count=len(ranked),
            ),
            growth=financials.growth,
        )

        if self.cache is not None:
            self.cache.put(key, response, version)
        return response

    def get_financial_analytics(
        self,
        farm_id: str,
        year: int,
        period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY,
    ) -> FinancialReport:
        """Compute the financial analytics widget for a farm and year.

        Raises:
            InvalidRequest: If year or period is invalid
            InvalidCurrencyMix: If the farm's transactions mix currencies
            UpstreamUnavailable: If the records could not be read
        """
        request = validate_request(AnalyticsRequest(farm_id=farm_id, year=year, period=period))
        current, previous = self._load_transactions(farm_id, request.year)
        return summarize_financials(
            current, request.period, request.year, previous_transactions=previous
        )

    def get_egg_stats(self, farm_id: str) -> EggStats:
        """Compute lifetime egg collection and sales statistics for a farm."""
        if not farm_id:
            raise InvalidRequest("Farm ID is required")
        events = self._read(
            "egg collections", farm_id, lambda: self.db.list_egg_collections(farm_id)
        )
        sales = self._read("egg sales", farm_id, lambda: self.db.list_egg_sales(farm_id))
        return summarize_egg_stats(events, sales)
