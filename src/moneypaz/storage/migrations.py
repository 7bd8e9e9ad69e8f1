"""Versioned migrations for the stored finance record.

Records without a ``schemaVersion`` field were written by the first release,
which kept only the fields it knew about at the time. Each step upgrades a
record by exactly one version:

- 0 -> 1: back-fill fields that older records lack (custom categories, used
  concepts, user name, per-movement recurring flag and timestamp).
- 1 -> 2: turn plain custom category strings into tagged records. Income
  categories are recognised by their ``ingreso_`` id prefix.
"""

import logging
from typing import Any, Callable

from dateutil import parser as date_parser

from moneypaz.domain.errors import unsupported_schema_version

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 2

# Kept local so the stored format does not depend on the category catalog
_INCOME_PREFIX = "ingreso_"


def _migrate_v0_to_v1(data: dict[str, Any]) -> dict[str, Any]:
    migrated = dict(data)
    migrated["initialBalance"] = data.get("initialBalance") or 0
    migrated["customCategories"] = data.get("customCategories") or []
    migrated["usedConcepts"] = data.get("usedConcepts") or []
    migrated["userName"] = data.get("userName") or ""

    movements = []
    for movement in data.get("movements") or []:
        movement = dict(movement)
        movement.setdefault("isRecurring", False)
        if "timestamp" not in movement:
            moment = date_parser.isoparse(movement["date"])
            movement["timestamp"] = int(moment.timestamp() * 1000)
        movements.append(movement)
    migrated["movements"] = movements
    return migrated


def _migrate_v1_to_v2(data: dict[str, Any]) -> dict[str, Any]:
    migrated = dict(data)
    categories = []
    for category in data["customCategories"]:
        if isinstance(category, dict):
            categories.append(category)
            continue
        if not isinstance(category, str):
            raise ValueError(
                f"Stored category must be text or an object, got {type(category).__name__}"
            )
        movement_type = "income" if category.startswith(_INCOME_PREFIX) else "expense"
        categories.append({"id": category, "movementType": movement_type})
    migrated["customCategories"] = categories
    return migrated


MIGRATIONS: dict[int, Callable[[dict[str, Any]], dict[str, Any]]] = {
    0: _migrate_v0_to_v1,
    1: _migrate_v1_to_v2,
}


def schema_version(data: dict[str, Any]) -> int:
    return int(data.get("schemaVersion", 0))


def migrate_payload(data: dict[str, Any]) -> dict[str, Any]:
    """Upgrade a stored record to CURRENT_SCHEMA_VERSION.

    Args:
        data: Decoded stored record

    Returns:
        New dict at the current schema version

    Raises:
        ValueError: If the record is not an object or was written by a newer
            schema version
    """
    if not isinstance(data, dict):
        raise ValueError(f"Stored state must be an object, got {type(data).__name__}")

    version = schema_version(data)
    if version > CURRENT_SCHEMA_VERSION:
        raise ValueError(unsupported_schema_version(version, CURRENT_SCHEMA_VERSION))

    while version < CURRENT_SCHEMA_VERSION:
        logger.info("Migrating stored state from schema version %d", version)
        data = MIGRATIONS[version](data)
        version += 1
        data["schemaVersion"] = version
    return data
