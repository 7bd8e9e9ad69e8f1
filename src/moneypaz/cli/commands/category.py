"""Category management commands."""

import click

from moneypaz.cli.error_handling import handle_domain_error
from moneypaz.domain.categories import (
    categories_for,
    category_label,
    make_custom_category,
    search_categories,
)
from moneypaz.domain.entities import MovementType
from moneypaz.domain.errors import ValidationError

TYPE_OPTION = click.Choice(["expense", "income"], case_sensitive=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--type", "movement_type", type=TYPE_OPTION, default="expense", help="Movement type (default: expense)")
@click.pass_context
def list_categories(ctx, movement_type: str):
    """List selectable categories for a movement type."""
    service = ctx.obj["service"]
    kind = MovementType(movement_type.lower())
    custom_ids = set(service.custom_categories)

    click.echo(f"\n{kind.value.capitalize()} categories:")
    for category_id, label in categories_for(kind, service.state.custom_categories):
        marker = " (custom)" if category_id in custom_ids else ""
        click.echo(f"  {label} [{category_id}]{marker}")


@category_group.command("add")
@click.argument("name")
@click.option(
    "--type",
    "movement_type",
    type=TYPE_OPTION,
    help="Movement type (default: expense, or income for names starting with 'ingreso_')",
)
@click.pass_context
def add_category(ctx, name: str, movement_type: str | None):
    """Create a custom category."""
    service = ctx.obj["service"]
    kind = MovementType(movement_type.lower()) if movement_type else None

    if not name.strip():
        click.echo("Error: Category name cannot be empty", err=True)
        ctx.exit(1)

    try:
        existed = service.state.get_custom_category(make_custom_category(name, kind).id) is not None
        category_id = service.add_custom_category(name, kind)
    except ValidationError as e:
        handle_domain_error(ctx, e)
    if existed:
        click.echo(f"Category '{category_label(category_id)}' already exists [{category_id}]")
    else:
        click.echo(f"Created category '{category_label(category_id)}' [{category_id}]")


@category_group.command("search")
@click.argument("query")
@click.option("--type", "movement_type", type=TYPE_OPTION, default="expense", help="Movement type (default: expense)")
@click.pass_context
def search(ctx, query: str, movement_type: str):
    """Search categories by id or label."""
    service = ctx.obj["service"]
    kind = MovementType(movement_type.lower())

    matches = search_categories(query, kind, service.state.custom_categories)
    if not matches:
        click.echo(f"No categories match '{query}'.")
        return
    for category_id, label in matches:
        click.echo(f"  {label} [{category_id}]")


@category_group.command("frequent")
@click.option("--type", "movement_type", type=TYPE_OPTION, default="expense", help="Movement type (default: expense)")
@click.pass_context
def frequent(ctx, movement_type: str):
    """Show your most used custom categories."""
    service = ctx.obj["service"]
    picks = service.quick_pick_categories(MovementType(movement_type.lower()))

    if not picks:
        click.echo("No frequently used custom categories yet.")
        return
    for category_id in picks:
        click.echo(f"  {category_label(category_id)} [{category_id}]")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
