"""Read-only export views over the finance state."""

import csv
import io
import json
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from moneypaz.domain.aggregates import current_balance
from moneypaz.domain.entities import FinanceState, Movement
from moneypaz.storage.mappers import movement_to_dict

CSV_HEADERS = ["Fecha", "Tipo", "Categoría", "Descripción", "Importe"]
CSV_DELIMITER = ";"


def format_local_date(date_string: str) -> str:
    """Format a stored date as day/month/year in local time, e.g. '5/1/2024'."""
    moment = date_parser.isoparse(date_string)
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return f"{moment.day}/{moment.month}/{moment.year}"


def build_json_snapshot(state: FinanceState, now: datetime) -> dict[str, Any]:
    """Build the backup snapshot: metadata plus every movement."""
    movements = []
    for movement in state.movements:
        data = movement_to_dict(movement)
        data["dateFormatted"] = format_local_date(movement.date)
        movements.append(data)

    return {
        "exportDate": now.isoformat(),
        "initialBalance": str(state.initial_balance),
        "currentBalance": str(current_balance(state)),
        "customCategories": state.custom_category_ids,
        "movements": movements,
    }


def export_json(state: FinanceState, now: datetime) -> str:
    return json.dumps(build_json_snapshot(state, now), indent=2, ensure_ascii=False)


def csv_row(movement: Movement) -> list[str]:
    amount = f"{movement.amount:.2f}"
    return [
        format_local_date(movement.date),
        "Gasto" if movement.is_expense else "Ingreso",
        movement.category,
        movement.description,
        f"-{amount}" if movement.is_expense else amount,
    ]


def export_csv(state: FinanceState) -> str:
    """Render all movements as semicolon-separated CSV with a signed amount."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for movement in state.movements:
        writer.writerow(csv_row(movement))
    return buffer.getvalue()


def default_export_filename(kind: str, now: datetime) -> str:
    """Return the default file name for a 'json' or 'csv' export."""
    stamp = now.strftime("%Y-%m-%d")
    if kind == "json":
        return f"moneypaz-backup-{stamp}.json"
    return f"moneypaz-movimientos-{stamp}.csv"
