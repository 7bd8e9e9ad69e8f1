"""Add and delete movement commands."""

import click

from moneypaz.cli.display import format_euros
from moneypaz.cli.error_handling import handle_domain_error, parse_amount_or_exit
from moneypaz.cli.commands.recurring import echo_comparison
from moneypaz.domain.categories import (
    DEFAULT_CATEGORY,
    category_label,
    is_predefined,
    make_custom_category,
    resolve_category,
)
from moneypaz.domain.entities import ComparisonType, MovementType
from moneypaz.domain.errors import ValidationError, movement_not_found

DEFAULT_INCOME_CATEGORY = "otros_ingresos"


@click.command("add")
@click.argument("amount")
@click.option(
    "--type",
    "movement_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    default="expense",
    help="Movement type (default: expense)",
)
@click.option("--category", help="Category id (default: varios / otros_ingresos)")
@click.option("--concept", help="Merchant or source name (e.g., 'Netflix')")
@click.option("--recurring", is_flag=True, help="Mark as a recurring bill or subscription")
@click.pass_context
def add_movement(
    ctx,
    amount: str,
    movement_type: str,
    category: str | None,
    concept: str | None,
    recurring: bool,
):
    """Record an expense or income.

    Examples:
        moneypaz add 12,99 --category suscripciones --concept Netflix --recurring
        moneypaz add 1800 --type income --category nomina
    """
    service = ctx.obj["service"]
    kind = MovementType(movement_type.lower())

    value = parse_amount_or_exit(ctx, amount)
    if value <= 0:
        click.echo("Error: Amount must be greater than zero", err=True)
        ctx.exit(1)

    if category is None:
        category = DEFAULT_INCOME_CATEGORY if kind == MovementType.INCOME else DEFAULT_CATEGORY
    category = category.strip().lower()
    if kind == MovementType.INCOME and not is_predefined(category):
        # Income custom categories are stored with the income prefix
        category = make_custom_category(category, kind).id
    if not is_predefined(category) and category not in service.custom_categories:
        click.echo(
            f"Error: Category '{category}' not found. "
            "Create it first with 'moneypaz category add'.",
            err=True,
        )
        ctx.exit(1)
    if resolve_category(category, service.state.custom_categories).movement_type != kind:
        click.echo(f"Error: Category '{category}' is not an {kind.value} category", err=True)
        ctx.exit(1)

    concept = (concept or "").strip()
    if recurring and kind == MovementType.EXPENSE:
        comparison = service.compare_recurring_expense(value, concept or category, category)
        if comparison.type not in (ComparisonType.SILENT, ComparisonType.NEW):
            echo_comparison(comparison)

    description = concept or category_label(category)
    try:
        movement = service.add_movement(
            kind,
            value,
            category,
            description,
            concept=concept or None,
            is_recurring=recurring,
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Saved {movement.type.value} {movement.id}")
    click.echo(f"  Amount: {format_euros(movement.amount)}")
    click.echo(f"  Category: {category_label(movement.category)}")
    if movement.concept:
        click.echo(f"  Concept: {movement.concept}")
    if movement.is_recurring:
        click.echo("  Recurring: yes")
    click.echo(f"Current balance: {format_euros(service.current_balance())}")


@click.command("delete")
@click.argument("movement_id")
@click.pass_context
def delete_movement(ctx, movement_id: str):
    """Delete a movement by ID."""
    service = ctx.obj["service"]
    if not service.delete_movement(movement_id):
        click.echo(f"Warning: {movement_not_found(movement_id)}", err=True)
        return
    click.echo(f"Deleted movement {movement_id}")
    click.echo(f"Current balance: {format_euros(service.current_balance())}")


def register_commands(cli):
    """Register movement commands with main CLI."""
    cli.add_command(add_movement)
    cli.add_command(delete_movement)
