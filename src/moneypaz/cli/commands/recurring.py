"""Recurring expense commands."""

import click

from moneypaz.cli.display import echo_movement_row, format_euros
from moneypaz.cli.error_handling import parse_amount_or_exit
from moneypaz.domain.entities import ComparisonType, RecurringComparison


def echo_comparison(comparison: RecurringComparison) -> None:
    """Print a human message for a recurring comparison."""
    if comparison.type == ComparisonType.INCREASED:
        click.echo(f"Heads up: this costs {format_euros(comparison.difference)} more than last time")
    elif comparison.type == ComparisonType.DECREASED:
        click.echo(f"Good news: this costs {format_euros(comparison.difference)} less than last time")
    elif comparison.type == ComparisonType.STABLE:
        click.echo("Same price as last time")
    elif comparison.type == ComparisonType.NEW:
        click.echo("First time recording this recurring expense")
    else:
        click.echo("No price comparison for this category")


@click.command("compare")
@click.argument("amount")
@click.option("--concept", default="", help="Concept to match (e.g., 'Netflix')")
@click.option("--category", required=True, help="Category id to match")
@click.pass_context
def compare_recurring(ctx, amount: str, concept: str, category: str):
    """Compare a recurring expense with the last one recorded."""
    service = ctx.obj["service"]
    value = parse_amount_or_exit(ctx, amount)

    comparison = service.compare_recurring_expense(value, concept or category, category)
    click.echo(f"Result: {comparison.type.value}")
    echo_comparison(comparison)


@click.command("committed")
@click.pass_context
def committed(ctx):
    """Show this month's recurring expenses."""
    service = ctx.obj["service"]
    expenses = service.recurring_expenses()

    click.echo(f"Committed this month: {format_euros(service.committed_money())}")
    if not expenses:
        click.echo("No recurring expenses this month.")
        return
    for movement in expenses:
        echo_movement_row(movement, service.format_relative_date(movement.date))


def register_commands(cli):
    """Register recurring commands with main CLI."""
    cli.add_command(compare_recurring)
    cli.add_command(committed)
