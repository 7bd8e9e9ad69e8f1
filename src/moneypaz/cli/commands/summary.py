"""Monthly summary command."""

import click

from moneypaz.cli.display import format_euros
from moneypaz.domain.categories import category_label


@click.command("summary")
@click.option("--legacy", is_flag=True, help="Also show the legacy four-category breakdown")
@click.pass_context
def summary(ctx, legacy: bool):
    """Show balance and this month's totals."""
    service = ctx.obj["service"]

    if service.needs_setup():
        click.echo("No balance yet. Run 'moneypaz setup AMOUNT' to get started.")
        return

    month = service.month_summary()
    today = service.today_status()

    if service.user_name:
        click.echo(f"Hola, {service.user_name}")
    click.echo(f"Current balance:   {format_euros(service.current_balance())}")
    click.echo(f"Initial balance:   {format_euros(service.initial_balance)}")
    click.echo(f"Spent this month:  {format_euros(service.monthly_spent())}")
    click.echo(f"Income this month: {format_euros(month.total_income)}")
    click.echo(f"Committed:         {format_euros(service.committed_money())}")

    if today.has_big_expense:
        click.echo(f"Today: {today.today_expenses_count} expense(s), including a big one")
    elif today.has_any_expense:
        click.echo(f"Today: {today.today_expenses_count} expense(s)")
    else:
        click.echo("Today: no expenses yet")

    categories = month.sorted_categories()
    if categories:
        click.echo("\nBy category:")
        for category, total in categories:
            click.echo(f"  {category_label(category):<24} {format_euros(total):>12}")

    if legacy:
        click.echo("\nLegacy categories:")
        for category, total in service.spending_by_category().items():
            click.echo(f"  {category:<24} {format_euros(total):>12}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
