"""Finance domain service.

FinanceService is the only way to change the ledger. Each mutation builds a
new FinanceState from the previous one and hands it to the state container,
which saves it. Aggregates are recomputed from the current state on every
call.
"""

import uuid
from dataclasses import replace
from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Union

from moneypaz.domain import aggregates
from moneypaz.domain.categories import make_custom_category
from moneypaz.domain.entities import (
    FinanceState,
    Movement,
    MovementGroup,
    MovementType,
    MonthSummary,
    RecurringComparison,
    TodayStatus,
)
from moneypaz.domain.errors import ValidationError, non_finite_amount
from moneypaz.domain.recurring import compare_recurring_expense, find_previous_recurring
from moneypaz.domain.state import FinanceStateContainer
from moneypaz.domain.suggestions import frequent_custom_categories, suggested_concepts
from moneypaz.storage.base import StateStore, STORAGE_KEY

AmountLike = Union[Decimal, int, float, str]


def local_now() -> datetime:
    """Return the current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def to_amount(value: AmountLike) -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Raises:
        ValidationError: If the value is not a finite number
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(non_finite_amount(value)) from e
    if not amount.is_finite():
        raise ValidationError(non_finite_amount(value))
    return amount


def generate_movement_id(timestamp: int) -> str:
    return f"mov-{timestamp}-{uuid.uuid4().hex[:9]}"


def format_iso_date(moment: datetime) -> str:
    """Format as an ISO-8601 UTC string with milliseconds, e.g. 2024-01-15T09:30:00.000Z."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FinanceService:
    """Service for recording movements and reading finance aggregates."""

    def __init__(
        self,
        store: StateStore,
        key: str = STORAGE_KEY,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize finance service.

        Args:
            store: State store used to load and save the ledger
            key: Key of the state record in the store
            clock: Callable returning the current local time; defaults to the
                system clock
        """
        self.container = FinanceStateContainer(store, key)
        self.clock = clock or local_now

    @property
    def state(self) -> FinanceState:
        return self.container.state

    @property
    def initial_balance(self) -> Decimal:
        return self.state.initial_balance

    @property
    def movements(self) -> tuple[Movement, ...]:
        return self.state.movements

    @property
    def custom_categories(self) -> list[str]:
        return self.state.custom_category_ids

    @property
    def used_concepts(self) -> tuple[str, ...]:
        return self.state.used_concepts

    @property
    def user_name(self) -> str:
        return self.state.user_name

    def _commit(self, state: FinanceState) -> None:
        self.container.replace(state)

    # Mutations
    def set_initial_balance(self, amount: AmountLike) -> None:
        """Replace the initial balance.

        Raises:
            ValidationError: If the amount is not a finite number
        """
        self._commit(replace(self.state, initial_balance=to_amount(amount)))

    def set_user_name(self, name: str) -> None:
        self._commit(replace(self.state, user_name=name))

    def add_movement(
        self,
        movement_type: MovementType,
        amount: AmountLike,
        category: str,
        description: str,
        concept: Optional[str] = None,
        is_recurring: bool = False,
    ) -> Movement:
        """Record a new movement at the current time.

        Args:
            movement_type: Expense or income
            amount: Movement amount; positivity is the caller's responsibility
            category: Category id
            description: Fallback display label
            concept: Optional merchant or source name
            is_recurring: Whether this is a recurring bill

        Returns:
            The created Movement

        Raises:
            ValidationError: If the amount is not a finite number
        """
        now = self.clock()
        timestamp = aggregates.to_millis(now)
        clean_concept = concept.strip() if concept else ""

        movement = Movement(
            id=generate_movement_id(timestamp),
            type=MovementType(movement_type),
            amount=to_amount(amount),
            category=category,
            description=description,
            concept=clean_concept or None,
            is_recurring=bool(is_recurring),
            date=format_iso_date(now),
            timestamp=timestamp,
        )

        used_concepts = self.state.used_concepts
        memory_key = clean_concept.lower()
        if memory_key and memory_key not in {c.lower() for c in used_concepts}:
            used_concepts = used_concepts + (memory_key,)

        self._commit(
            replace(
                self.state,
                movements=(movement,) + self.state.movements,
                used_concepts=used_concepts,
            )
        )
        return movement

    def delete_movement(self, movement_id: str) -> bool:
        """Delete a movement by id.

        Returns:
            True if a movement was removed, False if the id was unknown
        """
        remaining = tuple(m for m in self.state.movements if m.id != movement_id)
        if len(remaining) == len(self.state.movements):
            return False
        self._commit(replace(self.state, movements=remaining))
        return True

    def add_custom_category(
        self, name: str, movement_type: Optional[MovementType] = None
    ) -> str:
        """Add a user-created category.

        Args:
            name: Category name; trimmed and lower-cased
            movement_type: INCOME to create an income category

        Returns:
            Normalized category id, existing or new

        Raises:
            ValidationError: If an expense category is named with the income prefix
        """
        tag = make_custom_category(name, movement_type)
        if self.state.get_custom_category(tag.id) is None:
            self._commit(
                replace(
                    self.state,
                    custom_categories=self.state.custom_categories + (tag,),
                )
            )
        return tag.id

    def reset_all(self) -> None:
        """Replace everything with the zero-value state."""
        self._commit(FinanceState.empty())

    # Aggregates
    def current_balance(self) -> Decimal:
        return aggregates.current_balance(self.state)

    def needs_setup(self) -> bool:
        return aggregates.needs_setup(self.state)

    def monthly_spent(self) -> Decimal:
        return aggregates.monthly_spent(self.state, self.clock())

    def spending_by_category(self) -> dict[str, Decimal]:
        return aggregates.spending_by_category(self.state, self.clock())

    def month_summary(self) -> MonthSummary:
        return aggregates.month_summary(self.state, self.clock())

    def frequent_categories(self) -> list[str]:
        return aggregates.frequent_categories(self.state)

    def committed_money(self) -> Decimal:
        return aggregates.committed_money(self.state, self.clock())

    def recurring_expenses(self) -> list[Movement]:
        return aggregates.recurring_expenses(self.state, self.clock())

    def today_status(self) -> TodayStatus:
        return aggregates.today_status(self.state, self.clock())

    def last_movement_time(self) -> Optional[int]:
        return aggregates.last_movement_time(self.state)

    def recent_movements(self, limit: int = aggregates.RECENT_MOVEMENTS_LIMIT) -> list[Movement]:
        return aggregates.recent_movements(self.state, limit)

    def grouped_movements(self) -> list[MovementGroup]:
        return aggregates.group_movements_by_time(self.state.movements, self.clock())

    def format_relative_date(self, date_string: str) -> str:
        return aggregates.format_relative_date(date_string, self.clock())

    # Recurring comparison
    def find_previous_recurring(self, concept: str, category: str) -> Optional[Movement]:
        return find_previous_recurring(self.state.movements, concept, category)

    def compare_recurring_expense(
        self, amount: AmountLike, concept: str, category: str
    ) -> RecurringComparison:
        return compare_recurring_expense(
            self.state.movements, to_amount(amount), concept, category
        )

    # Suggestions
    def suggested_concepts(self) -> list[str]:
        return suggested_concepts(self.state.movements)

    def quick_pick_categories(self, movement_type: MovementType) -> list[str]:
        """Most used custom categories for the given movement type."""
        return frequent_custom_categories(
            self.frequent_categories(), self.state.custom_categories, movement_type
        )
