"""Income and expense commands."""

import click
from farmstats.cli.error_handling import handle_domain_error
from farmstats.domain.entities import TransactionKind
from farmstats.domain.errors import DomainError
from farmstats.domain.records import RecordService
from farmstats.utils.amount_parser import parse_amount
from farmstats.utils.date_parser import parse_date


def _record_transaction(
    ctx,
    kind: TransactionKind,
    farm_id: str,
    date: str,
    amount: str,
    category: str,
    currency: str,
) -> None:
    """Parse CLI input and create a transaction of the given kind."""
    service = RecordService(ctx.obj["db"])

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            farm_id=farm_id,
            kind=kind,
            amount=txn_amount,
            occurred_on=txn_date,
            category=category,
            currency=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {kind.value} {transaction_id}")
    click.echo(f"  Farm: {farm_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {currency.upper()} {txn_amount:,.2f}")
    click.echo(f"  Category: {category}")


_transaction_options = [
    click.argument("farm_id"),
    click.option(
        "--date",
        required=True,
        help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')",
    ),
    click.option("--amount", required=True, help="Amount (e.g., 150000 or 1,500.50)"),
    click.option("--category", default="General", show_default=True, help="Category name"),
    click.option(
        "--currency",
        default="UGX",
        show_default=True,
        envvar="FARMSTATS_CURRENCY",
        help="ISO currency code",
    ),
]


def _with_transaction_options(func):
    for option in reversed(_transaction_options):
        func = option(func)
    return func


@click.command("income")
@_with_transaction_options
@click.pass_context
def add_income(ctx, farm_id: str, date: str, amount: str, category: str, currency: str):
    """Record income for a farm.

    Example:
        farmstats income my-farm --date 2025-01-05 --amount 100000 --category "Egg sales"
    """
    _record_transaction(ctx, TransactionKind.INCOME, farm_id, date, amount, category, currency)


@click.command("expense")
@_with_transaction_options
@click.pass_context
def add_expense(ctx, farm_id: str, date: str, amount: str, category: str, currency: str):
    """Record an expense for a farm.

    Example:
        farmstats expense my-farm --date 2025-01-10 --amount 40000 --category Feed
    """
    _record_transaction(ctx, TransactionKind.EXPENSE, farm_id, date, amount, category, currency)


@click.group("transaction")
def transaction_group():
    """Manage recorded transactions."""
    pass


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int):
    """Delete a transaction."""
    service = RecordService(ctx.obj["db"])
    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(add_income)
    cli.add_command(add_expense)
    cli.add_command(transaction_group)
