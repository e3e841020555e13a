"""Flock management commands."""

import click
from farmstats.cli.error_handling import handle_domain_error
from farmstats.domain.errors import DomainError
from farmstats.domain.records import RecordService


@click.group()
def flock():
    """Manage flocks."""
    pass


@flock.command("add")
@click.argument("farm_id")
@click.option("--name", required=True, help="Flock name")
@click.option("--health", type=float, required=True, help="Health score (0-100)")
@click.option("--productivity", type=float, required=True, help="Productivity score (0-100)")
@click.option(
    "--feed-efficiency", type=float, required=True, help="Feed efficiency score (0-100)"
)
@click.pass_context
def add_flock(
    ctx, farm_id: str, name: str, health: float, productivity: float, feed_efficiency: float
):
    """Add a flock to a farm."""
    service = RecordService(ctx.obj["db"])
    try:
        flock_id = service.create_flock(
            farm_id=farm_id,
            name=name,
            health_score=health,
            productivity_score=productivity,
            feed_efficiency_score=feed_efficiency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created flock '{name}' with ID {flock_id}")


@flock.command("list")
@click.argument("farm_id")
@click.pass_context
def list_flocks(ctx, farm_id: str):
    """List a farm's flocks."""
    service = RecordService(ctx.obj["db"])
    flocks = service.list_flocks(farm_id)

    if not flocks:
        click.echo("No flocks found.")
        return

    click.echo(f"{'ID':<5} {'Name':<30} {'Health':>8} {'Product.':>9} {'Feed eff.':>10}")
    click.echo("-" * 66)
    for item in flocks:
        click.echo(
            f"{item.id:<5} {item.name:<30} {item.health_score:>8.1f} "
            f"{item.productivity_score:>9.1f} {item.feed_efficiency_score:>10.1f}"
        )


def register_commands(cli):
    """Register flock commands with main CLI."""
    cli.add_command(flock)
