"""Initial balance and profile commands."""

import click

from moneypaz.cli.display import format_euros
from moneypaz.cli.error_handling import handle_domain_error, parse_amount_or_exit
from moneypaz.domain.errors import ValidationError


@click.command("setup")
@click.argument("amount")
@click.pass_context
def setup_balance(ctx, amount: str):
    """Set the initial balance (e.g., 1500 or 1.500,50)."""
    service = ctx.obj["service"]
    balance = parse_amount_or_exit(ctx, amount)
    if balance <= 0:
        click.echo("Error: Initial balance must be greater than zero", err=True)
        ctx.exit(1)

    try:
        service.set_initial_balance(balance)
    except ValidationError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Initial balance set to {format_euros(balance)}")
    click.echo(f"Current balance: {format_euros(service.current_balance())}")


@click.command("name")
@click.argument("name")
@click.pass_context
def set_name(ctx, name: str):
    """Set the display name."""
    service = ctx.obj["service"]
    service.set_user_name(name)
    click.echo(f"Hola, {name}")


def register_commands(cli):
    """Register setup commands with main CLI."""
    cli.add_command(setup_balance)
    cli.add_command(set_name)
