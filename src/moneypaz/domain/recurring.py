"""Recurring expense price-change comparison."""

from decimal import Decimal
from typing import Optional, Sequence

from moneypaz.domain.categories import is_silent_recurring
from moneypaz.domain.entities import (
    ComparisonType,
    Movement,
    RecurringComparison,
)

PRICE_TOLERANCE = Decimal("0.01")


def find_previous_recurring(
    movements: Sequence[Movement], concept: str, category: str
) -> Optional[Movement]:
    """Find the latest recurring expense matching a concept or category.

    Movements are scanned newest first and the first match wins, whether it
    matched on concept or on category.

    Args:
        movements: Movements in newest-first order
        concept: Concept to match, compared trimmed and case-insensitively
        category: Category to match, compared case-insensitively

    Returns:
        Matching movement or None
    """
    wanted_concept = concept.strip().lower()
    wanted_category = category.lower()

    for movement in movements:
        if not (movement.is_expense and movement.is_recurring):
            continue
        if movement.concept and movement.concept.strip().lower() == wanted_concept:
            return movement
        if movement.category.lower() == wanted_category:
            return movement
    return None


def compare_recurring_expense(
    movements: Sequence[Movement],
    amount: Decimal,
    concept: str,
    category: str,
) -> RecurringComparison:
    """Classify a recurring expense against its previous occurrence.

    Housing and loan expenses are always SILENT. Otherwise the result is NEW
    when nothing matches, STABLE within one cent, or INCREASED / DECREASED
    with the absolute difference.
    """
    if is_silent_recurring(concept, category):
        return RecurringComparison(type=ComparisonType.SILENT)

    previous = find_previous_recurring(movements, concept, category)
    if previous is None:
        return RecurringComparison(type=ComparisonType.NEW)

    diff = Decimal(amount) - previous.amount
    if abs(diff) < PRICE_TOLERANCE:
        return RecurringComparison(type=ComparisonType.STABLE)
    if diff > 0:
        return RecurringComparison(type=ComparisonType.INCREASED, difference=diff)
    return RecurringComparison(type=ComparisonType.DECREASED, difference=abs(diff))
