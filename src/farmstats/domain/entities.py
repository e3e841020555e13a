"""Domain model entities for farmstats.

These are pure data classes representing farm records and the analytics views
built from them, independent of the database schema. The aggregation engine
only ever sees these types, so it can be exercised without a database.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class TransactionKind(str, Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"


class AnalyticsPeriod(str, Enum):
    """Granularity of analytics buckets."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class FlockSortField(str, Enum):
    """Flock ranking field, named as the dashboard query parameter."""

    PERFORMANCE = "performance"
    HEALTH = "health"
    PRODUCTIVITY = "productivity"
    FEED_EFFICIENCY = "feedEfficiency"


class PaymentMethod(str, Enum):
    """Payment methods accepted for egg sales."""

    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"
    MOBILE = "mobile"
    OTHER = "other"


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry for a farm."""

    id: int
    farm_id: str
    kind: TransactionKind
    category: str
    amount: Decimal
    currency: str
    occurred_on: date
    created_at: datetime


@dataclass(frozen=True)
class EggCollectionEvent:
    """Eggs collected from one house on one day."""

    id: int
    farm_id: str
    date: date
    eggs_collected: int
    hen_count: int
    created_at: datetime
    house: Optional[str] = None


@dataclass(frozen=True)
class EggSale:
    """Egg sale domain entity."""

    id: int
    farm_id: str
    date: date
    quantity: int
    price: Decimal
    customer: str
    payment_method: PaymentMethod
    created_at: datetime

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Flock:
    """Flock domain entity with its raw 0-100 scores."""

    id: int
    farm_id: str
    name: str
    health_score: float
    productivity_score: float
    feed_efficiency_score: float


@dataclass(frozen=True)
class PeriodFinancials:
    """Income and expenses of one time bucket."""

    period_label: str
    month_number: int
    income: Decimal
    expenses: Decimal
    net_profit: Decimal
    income_count: int
    expense_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.period_label,
            "monthNumber": self.month_number,
            "income": float(self.income),
            "expenses": float(self.expenses),
            "netProfit": float(self.net_profit),
            "incomeCount": self.income_count,
            "expenseCount": self.expense_count,
        }


@dataclass(frozen=True)
class FinancialSummary:
    """Totals over a whole reporting window."""

    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: float
    total_transactions: int = 0
    income_transactions: int = 0
    expense_transactions: int = 0


@dataclass(frozen=True)
class GrowthRates:
    """Percent change against the preceding window."""

    revenue_growth: float
    expense_growth: float
    profit_growth: float

    def to_dict(self) -> dict[str, float]:
        return {
            "revenueGrowth": self.revenue_growth,
            "expenseGrowth": self.expense_growth,
            "profitGrowth": self.profit_growth,
        }


@dataclass(frozen=True)
class FinancialReport:
    """Output of the financial summarizer."""

    per_period: tuple[PeriodFinancials, ...]
    summary: FinancialSummary
    growth: GrowthRates

    def to_dict(self) -> dict[str, Any]:
        """Render the dashboard's financial analytics payload."""
        return {
            "summary": {
                "totalRevenue": float(self.summary.total_income),
                "totalExpenses": float(self.summary.total_expenses),
                "netProfit": float(self.summary.net_profit),
                "profitMargin": self.summary.profit_margin,
            },
            "growth": self.growth.to_dict(),
            "monthlyBreakdown": [
                {
                    "month": entry.month_number,
                    "income": float(entry.income),
                    "expenses": float(entry.expenses),
                    "netProfit": float(entry.net_profit),
                    "incomeCount": entry.income_count,
                    "expenseCount": entry.expense_count,
                }
                for entry in self.per_period
            ],
            "transactions": {
                "totalTransactions": self.summary.total_transactions,
                "incomeTransactions": self.summary.income_transactions,
                "expenseTransactions": self.summary.expense_transactions,
            },
        }


@dataclass(frozen=True)
class EggTrendPoint:
    """Egg collection totals of one time bucket."""

    period_label: str
    total_eggs: int
    collections: int
    average_per_collection: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period_label,
            "totalEggs": self.total_eggs,
            "collections": self.collections,
            "averagePerCollection": self.average_per_collection,
        }


@dataclass(frozen=True)
class EggSummary:
    """Egg totals over the whole requested year."""

    total_eggs: int
    average_eggs_per_day: float


@dataclass(frozen=True)
class EggReport:
    """Output of the egg-trend summarizer."""

    trend: tuple[EggTrendPoint, ...]
    summary: EggSummary


@dataclass(frozen=True)
class EggStats:
    """Lifetime collection and sales figures for a farm."""

    total_eggs_collected: int
    total_eggs_sold: int
    revenue: Decimal
    collection_rate: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalEggsCollected": self.total_eggs_collected,
            "totalEggsSold": self.total_eggs_sold,
            "revenue": float(self.revenue),
            "collectionRate": self.collection_rate,
        }


@dataclass(frozen=True)
class FlockRanking:
    """Scored flock as shown in the top-flocks table."""

    flock_name: str
    performance: float
    health: float
    productivity: float
    feed_efficiency: float
    total_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "flockName": self.flock_name,
            "performance": self.performance,
            "health": self.health,
            "productivity": self.productivity,
            "feedEfficiency": self.feed_efficiency,
            "totalScore": self.total_score,
        }


@dataclass(frozen=True)
class AnalyticsSummary:
    """Headline numbers of the analytics page."""

    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: float
    total_eggs: int
    average_eggs_per_day: float
    top_flock_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": float(self.total_income),
            "totalExpenses": float(self.total_expenses),
            "netProfit": float(self.net_profit),
            "profitMargin": self.profit_margin,
            "totalEggs": self.total_eggs,
            "averageEggsPerDay": self.average_eggs_per_day,
            "topFlockCount": self.top_flock_count,
        }


@dataclass(frozen=True)
class AnalyticsRequest:
    """Query parameter bundle for the analytics page."""

    farm_id: str
    year: int
    period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY
    sort_by: FlockSortField = FlockSortField.PERFORMANCE

    @property
    def cache_key(self) -> tuple[str, int, str, str]:
        return (self.farm_id, self.year, self.period.value, self.sort_by.value)


@dataclass(frozen=True)
class AnalyticsResponse:
    """Everything the analytics page renders for one request."""

    income_expenses: tuple[PeriodFinancials, ...]
    egg_trends: tuple[EggTrendPoint, ...]
    top_flocks: tuple[FlockRanking, ...]
    summary: AnalyticsSummary
    growth: GrowthRates = field(
        default_factory=lambda: GrowthRates(0.0, 0.0, 0.0)
    )

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON payload served to the analytics page."""
        return {
            "incomeExpenses": [entry.to_dict() for entry in self.income_expenses],
            "eggTrends": [point.to_dict() for point in self.egg_trends],
            "topFlocks": [flock.to_dict() for flock in self.top_flocks],
            "summary": self.summary.to_dict(),
            "growth": self.growth.to_dict(),
        }
