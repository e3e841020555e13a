"""Financial summarizer: income, expenses, profit and growth."""

from decimal import Decimal
from typing import Iterable, Sequence

from farmstats.domain.bucketing import bucketize
from farmstats.domain.entities import (
    AnalyticsPeriod,
    FinancialReport,
    FinancialSummary,
    GrowthRates,
    PeriodFinancials,
    Transaction,
    TransactionKind,
)
from farmstats.domain.errors import InvalidCurrencyMix, currency_mix

ZERO = Decimal("0")


def ensure_single_currency(transactions: Iterable[Transaction]) -> None:
    """Raise InvalidCurrencyMix if transactions use more than one currency."""
    currencies = {txn.currency.upper() for txn in transactions}
    if len(currencies) > 1:
        raise InvalidCurrencyMix(currency_mix(currencies))


def compute_growth(current: Decimal, previous: Decimal) -> float:
    """Percent change of ``current`` against ``previous``.

    A zero baseline gives 0 when current is also zero and 100 otherwise.
    The baseline is taken as an absolute value so that moving from a loss
    towards profit reads as positive growth.
    """
    if previous == 0:
        return 100.0 if current != 0 else 0.0
    return float((current - previous) / abs(previous) * 100)


def profit_margin(net_profit: Decimal, total_income: Decimal) -> float:
    """Net profit as a percentage of income, 0 when there is no income."""
    if total_income <= 0:
        return 0.0
    return float(net_profit / total_income * 100)


def totals_by_kind(transactions: Iterable[Transaction]) -> tuple[Decimal, Decimal]:
    """Return (income, expenses) summed over transactions."""
    income = ZERO
    expenses = ZERO
    for txn in transactions:
        if txn.kind == TransactionKind.INCOME:
            income += txn.amount
        else:
            expenses += txn.amount
    return income, expenses


def summarize_period(
    label: str, month_number: int, transactions: Sequence[Transaction]
) -> PeriodFinancials:
    """Aggregate the transactions of one bucket."""
    income, expenses = totals_by_kind(transactions)
    income_count = sum(1 for txn in transactions if txn.kind == TransactionKind.INCOME)
    return PeriodFinancials(
        period_label=label,
        month_number=month_number,
        income=income,
        expenses=expenses,
        net_profit=income - expenses,
        income_count=income_count,
        expense_count=len(transactions) - income_count,
    )


def summarize_financials(
    transactions: Sequence[Transaction],
    period: AnalyticsPeriod,
    year: int,
    previous_transactions: Sequence[Transaction] = (),
) -> FinancialReport:
    """Summarize a year of transactions.

    Args:
        transactions: Transactions to report on; those outside ``year`` are ignored
        period: Bucket granularity for the per-period breakdown
        year: Reporting year
        previous_transactions: Transactions of the preceding window, used
            for growth rates

    Returns:
        FinancialReport with per-period rows, totals and growth

    Raises:
        InvalidCurrencyMix: If the transactions use more than one currency
    """
    ensure_single_currency([*transactions, *previous_transactions])

    per_period = tuple(
        summarize_period(bucket.label, bucket.month_number, bucket.records)
        for bucket in bucketize(
            transactions, period, lambda txn: txn.occurred_on, year
        )
    )

    total_income = sum((entry.income for entry in per_period), ZERO)
    total_expenses = sum((entry.expenses for entry in per_period), ZERO)
    net_profit = total_income - total_expenses
    income_transactions = sum(entry.income_count for entry in per_period)
    expense_transactions = sum(entry.expense_count for entry in per_period)

    summary = FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_profit=net_profit,
        profit_margin=profit_margin(net_profit, total_income),
        total_transactions=income_transactions + expense_transactions,
        income_transactions=income_transactions,
        expense_transactions=expense_transactions,
    )

    previous_income, previous_expenses = totals_by_kind(previous_transactions)
    growth = GrowthRates(
        revenue_growth=compute_growth(total_income, previous_income),
        expense_growth=compute_growth(total_expenses, previous_expenses),
        profit_growth=compute_growth(net_profit, previous_income - previous_expenses),
    )

    return FinancialReport(per_period=per_period, summary=summary, growth=growth)
