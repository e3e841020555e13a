"""Main CLI entry point."""

import logging

import click
from farmstats.database.factories import create_sqlite_database

# Import and register all commands at module level
from farmstats.cli.commands import (
    analytics,
    eggs,
    flock,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FARMSTATS_DB_PATH environment variable)",
    envvar="FARMSTATS_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Farmstats - Farm analytics.

    Record income, expenses, egg collections, egg sales and flocks, and
    compute the analytics shown on the farm dashboard.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
transaction.register_commands(cli)
eggs.register_commands(cli)
flock.register_commands(cli)
analytics.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
