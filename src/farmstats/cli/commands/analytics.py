"""Analytics commands printing dashboard JSON."""

import json
from datetime import date

import click
from farmstats.cli.error_handling import handle_domain_error
from farmstats.domain.analytics import AnalyticsService, parse_analytics_request
from farmstats.domain.entities import AnalyticsPeriod, FlockSortField
from farmstats.domain.errors import DomainError


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.command("analytics")
@click.argument("farm_id")
@click.option("--year", help="Reporting year (defaults to the current year)")
@click.option(
    "--period",
    type=click.Choice([p.value for p in AnalyticsPeriod]),
    default=AnalyticsPeriod.MONTHLY.value,
    show_default=True,
)
@click.option(
    "--sort-by",
    type=click.Choice([f.value for f in FlockSortField]),
    default=FlockSortField.PERFORMANCE.value,
    show_default=True,
    help="Field the flock ranking is sorted by",
)
@click.pass_context
def analytics(ctx, farm_id: str, year: str | None, period: str, sort_by: str):
    """Print the analytics page data for a farm as JSON."""
    service = AnalyticsService(ctx.obj["db"])
    params = {"period": period, "sortBy": sort_by}
    if year is not None:
        params["year"] = year

    try:
        request = parse_analytics_request(farm_id, params, default_year=date.today().year)
        response = service.get_analytics(request)
    except DomainError as e:
        handle_domain_error(ctx, e)

    _echo_json(response.to_dict())


@click.command("financials")
@click.argument("farm_id")
@click.option("--year", type=int, help="Reporting year (defaults to the current year)")
@click.option(
    "--period",
    type=click.Choice([p.value for p in AnalyticsPeriod]),
    default=AnalyticsPeriod.MONTHLY.value,
    show_default=True,
)
@click.pass_context
def financials(ctx, farm_id: str, year: int | None, period: str):
    """Print income, expenses, profit and growth for a farm as JSON."""
    service = AnalyticsService(ctx.obj["db"])
    try:
        report = service.get_financial_analytics(
            farm_id,
            year if year is not None else date.today().year,
            AnalyticsPeriod(period),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    _echo_json(report.to_dict())


@click.command("egg-stats")
@click.argument("farm_id")
@click.pass_context
def egg_stats(ctx, farm_id: str):
    """Print lifetime egg collection and sales statistics as JSON."""
    service = AnalyticsService(ctx.obj["db"])
    try:
        stats = service.get_egg_stats(farm_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    _echo_json(stats.to_dict())


def register_commands(cli):
    """Register analytics commands with main CLI."""
    cli.add_command(analytics)
    cli.add_command(financials)
    cli.add_command(egg_stats)
