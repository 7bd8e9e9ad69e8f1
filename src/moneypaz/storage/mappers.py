"""Mapper functions to convert between domain entities and the stored record.

The stored record is a JSON object using the camelCase field names of the
persisted layout. Amounts are written as strings so no precision is lost;
numbers written by older releases are still accepted.
"""

from decimal import Decimal
from typing import Any, Optional

from dateutil import parser as date_parser

from moneypaz.domain.entities import (
    CategoryKind,
    CategoryTag,
    FinanceState,
    Movement,
    MovementType,
)
from moneypaz.storage.migrations import CURRENT_SCHEMA_VERSION


def to_decimal(value: Any) -> Decimal:
    """Convert a stored number or numeric string to a finite Decimal."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a number: {value!r}")
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return amount


def _text(data: dict[str, Any], field: str, required: bool = True) -> Optional[str]:
    """Return a stored text field, rejecting values of any other type.

    Optional fields may be absent or null and then return None.
    """
    if field not in data:
        if required:
            raise KeyError(field)
        return None
    value = data[field]
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Field '{field}' must be text, got {type(value).__name__}")
    return value


def _concept(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Stored concept must be text, got {type(value).__name__}")
    return value


def movement_to_dict(movement: Movement) -> dict[str, Any]:
    """Convert a domain Movement to its stored form."""
    data: dict[str, Any] = {
        "id": movement.id,
        "type": movement.type.value,
        "amount": str(movement.amount),
        "category": movement.category,
        "description": movement.description,
        "isRecurring": movement.is_recurring,
        "date": movement.date,
        "timestamp": movement.timestamp,
    }
    if movement.concept is not None:
        data["concept"] = movement.concept
    return data


def movement_from_dict(data: dict[str, Any]) -> Movement:
    """Convert a stored movement to a domain Movement."""
    if not isinstance(data, dict):
        raise ValueError(f"Stored movement must be an object, got {type(data).__name__}")
    date = _text(data, "date")
    # Unparseable dates are rejected at load
    date_parser.isoparse(date)
    return Movement(
        id=_text(data, "id"),
        type=MovementType(data["type"]),
        amount=to_decimal(data["amount"]),
        category=_text(data, "category"),
        description=_text(data, "description", required=False) or "",
        concept=_text(data, "concept", required=False) or None,
        is_recurring=bool(data.get("isRecurring", False)),
        date=date,
        timestamp=int(data["timestamp"]),
    )


def category_to_dict(tag: CategoryTag) -> dict[str, str]:
    return {"id": tag.id, "movementType": tag.movement_type.value}


def category_from_dict(data: dict[str, Any]) -> CategoryTag:
    if not isinstance(data, dict):
        raise ValueError(f"Stored category must be an object, got {type(data).__name__}")
    return CategoryTag(
        id=_text(data, "id"),
        kind=CategoryKind.CUSTOM,
        movement_type=MovementType(data["movementType"]),
    )


def state_to_dict(state: FinanceState) -> dict[str, Any]:
    """Convert a FinanceState to the full stored record."""
    return {
        "schemaVersion": CURRENT_SCHEMA_VERSION,
        "initialBalance": str(state.initial_balance),
        "movements": [movement_to_dict(m) for m in state.movements],
        "customCategories": [category_to_dict(c) for c in state.custom_categories],
        "usedConcepts": list(state.used_concepts),
        "userName": state.user_name,
    }


def state_from_dict(data: dict[str, Any]) -> FinanceState:
    """Convert a stored record at the current schema version to a FinanceState.

    Raises:
        KeyError, TypeError, ValueError, ArithmeticError: If the record is
            malformed
    """
    return FinanceState(
        initial_balance=to_decimal(data["initialBalance"]),
        movements=tuple(movement_from_dict(m) for m in data["movements"]),
        custom_categories=tuple(
            category_from_dict(c) for c in data["customCategories"]
        ),
        used_concepts=tuple(_concept(c) for c in data["usedConcepts"]),
        user_name=_text(data, "userName"),
    )
