"""Egg collection and egg sale commands."""

import click
from farmstats.cli.error_handling import handle_domain_error
from farmstats.domain.entities import PaymentMethod
from farmstats.domain.errors import DomainError
from farmstats.domain.records import RecordService
from farmstats.utils.amount_parser import parse_amount
from farmstats.utils.date_parser import parse_date


@click.command("collect")
@click.argument("farm_id")
@click.option("--date", required=True, help="Collection date (YYYY-MM-DD or 'today')")
@click.option("--eggs", type=int, required=True, help="Number of eggs collected")
@click.option("--hens", type=int, required=True, help="Number of hens in the house")
@click.option("--house", help="House or coop name")
@click.pass_context
def collect_eggs(ctx, farm_id: str, date: str, eggs: int, hens: int, house: str | None):
    """Record an egg collection."""
    service = RecordService(ctx.obj["db"])

    try:
        collection_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        event_id = service.record_egg_collection(
            farm_id=farm_id,
            date=collection_date,
            eggs_collected=eggs,
            hen_count=hens,
            house=house,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Recorded collection {event_id}: {eggs} eggs from {hens} hens on {collection_date}")


@click.command("sell-eggs")
@click.argument("farm_id")
@click.option("--date", required=True, help="Sale date (YYYY-MM-DD or 'today')")
@click.option("--quantity", type=int, required=True, help="Number of eggs sold")
@click.option("--price", required=True, help="Price per egg")
@click.option("--customer", required=True, help="Customer name")
@click.option(
    "--payment-method",
    type=click.Choice([method.value for method in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
)
@click.pass_context
def sell_eggs(
    ctx,
    farm_id: str,
    date: str,
    quantity: int,
    price: str,
    customer: str,
    payment_method: str,
):
    """Record an egg sale."""
    service = RecordService(ctx.obj["db"])

    try:
        sale_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        unit_price = parse_amount(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price format: {e}", err=True)
        ctx.exit(1)

    try:
        sale_id = service.record_egg_sale(
            farm_id=farm_id,
            date=sale_date,
            quantity=quantity,
            price=unit_price,
            customer=customer,
            payment_method=PaymentMethod(payment_method),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Recorded sale {sale_id}: {quantity} eggs to {customer} ({unit_price * quantity:,.2f})")


def register_commands(cli):
    """Register egg commands with main CLI."""
    cli.add_command(collect_eggs)
    cli.add_command(sell_eggs)
