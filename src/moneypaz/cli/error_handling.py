"""CLI error handling helpers."""

from decimal import Decimal

import click

from moneypaz.domain.errors import DomainError
from moneypaz.utils.amount_parser import parse_amount


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, amount: str) -> Decimal:
    """Parse a CLI amount, exiting with an error message if it is invalid."""
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
