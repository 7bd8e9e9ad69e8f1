"""Shared display helpers for CLI output."""

from decimal import Decimal

import click

from moneypaz.domain.categories import category_label
from moneypaz.domain.entities import Movement


def format_euros(amount: Decimal) -> str:
    return f"{amount:,.2f}€"


def format_signed(movement: Movement) -> str:
    sign = "-" if movement.is_expense else "+"
    return f"{sign}{format_euros(movement.amount)}"


def echo_movement_row(movement: Movement, when: str) -> None:
    """Print one movement as a compact table row."""
    recurring = "R" if movement.is_recurring else ""
    click.echo(
        f"{movement.id:<28} {when:<12} {format_signed(movement):>12} "
        f"{category_label(movement.category)[:20]:<20} {recurring:<2}{movement.label[:30]}"
    )
