"""Domain model entities for moneypaz.

These are pure data classes representing the finance ledger, independent of
how the state is serialized. Every entity is immutable: mutations build a new
FinanceState instead of editing one in place.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class MovementType(str, Enum):
    """Direction of a movement."""

    EXPENSE = "expense"
    INCOME = "income"


class CategoryKind(str, Enum):
    """Whether a category comes from the built-in catalog or from the user."""

    PREDEFINED = "predefined"
    CUSTOM = "custom"


class ComparisonType(str, Enum):
    """Outcome of comparing a recurring expense with its previous occurrence."""

    SILENT = "silent"
    NEW = "new"
    STABLE = "stable"
    INCREASED = "increased"
    DECREASED = "decreased"


@dataclass(frozen=True)
class CategoryTag:
    """Category tag with its kind decided when it was created."""

    id: str
    kind: CategoryKind
    movement_type: MovementType

    @property
    def is_income(self) -> bool:
        return self.movement_type == MovementType.INCOME


@dataclass(frozen=True)
class Movement:
    """A single recorded income or expense event."""

    id: str
    type: MovementType
    amount: Decimal
    category: str
    description: str
    date: str
    timestamp: int
    concept: Optional[str] = None
    is_recurring: bool = False

    @property
    def is_expense(self) -> bool:
        return self.type == MovementType.EXPENSE

    @property
    def label(self) -> str:
        """Display label: the concept when present, else the description."""
        return self.concept or self.description

    @property
    def signed_amount(self) -> Decimal:
        return -self.amount if self.is_expense else self.amount


@dataclass(frozen=True)
class FinanceState:
    """Root aggregate persisted as a single record."""

    initial_balance: Decimal = Decimal("0")
    movements: tuple[Movement, ...] = ()
    custom_categories: tuple[CategoryTag, ...] = ()
    used_concepts: tuple[str, ...] = ()
    user_name: str = ""

    @classmethod
    def empty(cls) -> "FinanceState":
        """Return the zero-value state."""
        return cls()

    @property
    def custom_category_ids(self) -> list[str]:
        return [tag.id for tag in self.custom_categories]

    def get_custom_category(self, category_id: str) -> Optional[CategoryTag]:
        for tag in self.custom_categories:
            if tag.id == category_id:
                return tag
        return None


@dataclass(frozen=True)
class RecurringComparison:
    """Price-change classification for a recurring expense."""

    type: ComparisonType
    difference: Optional[Decimal] = None


@dataclass(frozen=True)
class TodayStatus:
    """Expense activity for the current local day."""

    has_big_expense: bool
    has_any_expense: bool
    today_expenses_count: int


@dataclass(frozen=True)
class MonthSummary:
    """Income and spend totals for the current month."""

    total_income: Decimal
    total_spent: Decimal
    category_totals: dict[str, Decimal] = field(default_factory=dict)
    max_category_spent: Decimal = Decimal("1")

    def sorted_categories(self) -> list[tuple[str, Decimal]]:
        """Return (category, total) pairs, highest spend first."""
        return sorted(self.category_totals.items(), key=lambda item: item[1], reverse=True)


@dataclass(frozen=True)
class MovementGroup:
    """Movements sharing a time bucket such as 'Hoy' or 'Ayer'."""

    label: str
    movements: tuple[Movement, ...]
