"""Movement viewing commands."""

import click

from moneypaz.cli.display import echo_movement_row
from moneypaz.domain.aggregates import movements_of_type
from moneypaz.domain.entities import MovementType


@click.command("list")
@click.option("--limit", type=int, default=10, show_default=True, help="Number of movements to show")
@click.option("--all", "show_all", is_flag=True, help="Show every movement")
@click.option(
    "--type",
    "movement_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    help="Only show one movement type",
)
@click.option("--grouped", is_flag=True, help="Group this month's movements by day")
@click.pass_context
def list_movements(ctx, limit: int, show_all: bool, movement_type: str | None, grouped: bool):
    """List movements, newest first."""
    service = ctx.obj["service"]

    if grouped:
        groups = service.grouped_movements()
        if not groups:
            click.echo("No movements this month.")
            return
        for group in groups:
            click.echo(f"\n{group.label}")
            click.echo("-" * 100)
            for movement in group.movements:
                echo_movement_row(movement, service.format_relative_date(movement.date))
        return

    movements = list(service.movements) if show_all else service.recent_movements(limit)
    if movement_type:
        movements = movements_of_type(movements, MovementType(movement_type.lower()))

    if not movements:
        click.echo("No movements found.")
        return

    click.echo(f"\nShowing {len(movements)} movement(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<28} {'When':<12} {'Amount':>12} {'Category':<20} Concept")
    click.echo("-" * 100)
    for movement in movements:
        echo_movement_row(movement, service.format_relative_date(movement.date))


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(list_movements)
