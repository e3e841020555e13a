"""CLI error handling helpers."""

import click

from farmstats.domain.errors import DomainError

# sysexits EX_TEMPFAIL: the caller may retry
RETRYABLE_EXIT_CODE = 75


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if getattr(error, "retryable", False):
        ctx.exit(RETRYABLE_EXIT_CODE)
    ctx.exit(1)
