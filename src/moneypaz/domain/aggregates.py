"""Aggregation engine.

Pure derivations over a FinanceState. Every function takes the reference time
``now`` explicitly so results are reproducible; month and day boundaries are
local midnight in the timezone of ``now``.
"""

from collections import Counter
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from moneypaz.domain.categories import LEGACY_ALIASES, LEGACY_SPENDING_KEYS
from moneypaz.domain.entities import (
    FinanceState,
    Movement,
    MovementGroup,
    MovementType,
    MonthSummary,
    TodayStatus,
)

BIG_EXPENSE_THRESHOLD = Decimal("50")
RECENT_MOVEMENTS_LIMIT = 10

SHORT_MONTHS_ES = (
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sept", "oct", "nov", "dic",
)

ZERO = Decimal("0")


def to_millis(moment: datetime) -> int:
    """Convert a datetime to epoch milliseconds."""
    return int(moment.timestamp() * 1000)


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(now: datetime) -> datetime:
    return start_of_day(now).replace(day=1)


def month_bounds(now: datetime) -> tuple[int, int]:
    """Return [start, end) epoch milliseconds of the month containing now."""
    start = start_of_month(now)
    end = start + relativedelta(months=1)
    return to_millis(start), to_millis(end)


def _in_month(movement: Movement, bounds: tuple[int, int]) -> bool:
    start, end = bounds
    return start <= movement.timestamp < end


def _total(movements: Iterable[Movement]) -> Decimal:
    return sum((m.amount for m in movements), ZERO)


def current_balance(state: FinanceState) -> Decimal:
    """Initial balance plus income minus expenses over all movements."""
    return state.initial_balance + sum(
        (m.signed_amount for m in state.movements), ZERO
    )


def needs_setup(state: FinanceState) -> bool:
    """True only for the pristine state: no balance and no movements."""
    return state.initial_balance == 0 and not state.movements


def month_expenses(state: FinanceState, now: datetime) -> list[Movement]:
    bounds = month_bounds(now)
    return [m for m in state.movements if m.is_expense and _in_month(m, bounds)]


def monthly_spent(state: FinanceState, now: datetime) -> Decimal:
    """Sum of this month's expenses."""
    return _total(month_expenses(state, now))


def spending_by_category(state: FinanceState, now: datetime) -> dict[str, Decimal]:
    """This month's expenses for the four legacy category keys only.

    Categories outside LEGACY_SPENDING_KEYS are not reported here; use
    monthly_category_totals for the full breakdown.
    """
    totals = {key: ZERO for key in LEGACY_SPENDING_KEYS}
    for movement in month_expenses(state, now):
        if movement.category in totals:
            totals[movement.category] += movement.amount
    return totals


def monthly_category_totals(state: FinanceState, now: datetime) -> dict[str, Decimal]:
    """This month's expenses per category, with legacy ids folded in."""
    totals: dict[str, Decimal] = {}
    for movement in month_expenses(state, now):
        category = LEGACY_ALIASES.get(movement.category, movement.category)
        totals[category] = totals.get(category, ZERO) + movement.amount
    return totals


def month_summary(state: FinanceState, now: datetime) -> MonthSummary:
    """Income, spend and per-category totals for the current month."""
    bounds = month_bounds(now)
    month_movements = [m for m in state.movements if _in_month(m, bounds)]
    total_income = _total(m for m in month_movements if not m.is_expense)
    total_spent = _total(m for m in month_movements if m.is_expense)
    category_totals = monthly_category_totals(state, now)
    return MonthSummary(
        total_income=total_income,
        total_spent=total_spent,
        category_totals=category_totals,
        max_category_spent=max([*category_totals.values(), Decimal("1")]),
    )


def frequent_categories(state: FinanceState) -> list[str]:
    """Categories used by any movement, most used first.

    Ties keep the order in which categories first appear in the
    newest-first movement list.
    """
    counts = Counter(m.category for m in state.movements)
    return [category for category, _ in counts.most_common()]


def recurring_expenses(state: FinanceState, now: datetime) -> list[Movement]:
    """This month's expenses flagged as recurring, newest first."""
    return [m for m in month_expenses(state, now) if m.is_recurring]


def committed_money(state: FinanceState, now: datetime) -> Decimal:
    """Sum of this month's recurring expenses."""
    return _total(recurring_expenses(state, now))


def today_status(state: FinanceState, now: datetime) -> TodayStatus:
    day_start = to_millis(start_of_day(now))
    day_end = to_millis(start_of_day(now) + relativedelta(days=1))
    today_expenses = [
        m
        for m in state.movements
        if m.is_expense and day_start <= m.timestamp < day_end
    ]
    return TodayStatus(
        has_big_expense=any(m.amount >= BIG_EXPENSE_THRESHOLD for m in today_expenses),
        has_any_expense=bool(today_expenses),
        today_expenses_count=len(today_expenses),
    )


def last_movement_time(state: FinanceState) -> Optional[int]:
    """Timestamp of the most recently added movement, or None."""
    if not state.movements:
        return None
    return state.movements[0].timestamp


def recent_movements(
    state: FinanceState, limit: int = RECENT_MOVEMENTS_LIMIT
) -> list[Movement]:
    return list(state.movements[:limit])


def movements_of_type(
    movements: Sequence[Movement], movement_type: MovementType
) -> list[Movement]:
    return [m for m in movements if m.type == movement_type]


def _local_datetime(timestamp: int, now: datetime) -> datetime:
    return datetime.fromtimestamp(timestamp / 1000, tz=now.tzinfo)


def group_movements_by_time(
    movements: Sequence[Movement], now: datetime
) -> list[MovementGroup]:
    """Bucket this month's movements into today, yesterday and earlier.

    Movements from previous months are left out. Empty buckets are dropped.
    """
    today = start_of_day(now).date()
    yesterday = today - timedelta(days=1)
    month_start = to_millis(start_of_month(now))

    buckets: dict[str, list[Movement]] = {
        "Hoy": [],
        "Ayer": [],
        "Anteriores este mes": [],
    }
    for movement in movements:
        day = _local_datetime(movement.timestamp, now).date()
        if day == today:
            buckets["Hoy"].append(movement)
        elif day == yesterday:
            buckets["Ayer"].append(movement)
        elif movement.timestamp >= month_start:
            buckets["Anteriores este mes"].append(movement)

    return [
        MovementGroup(label=label, movements=tuple(grouped))
        for label, grouped in buckets.items()
        if grouped
    ]


def format_short_date(moment: datetime) -> str:
    """Format as a Spanish short date, e.g. '15 ene'."""
    return f"{moment.day} {SHORT_MONTHS_ES[moment.month - 1]}"


def format_relative_date(date_string: str, now: datetime) -> str:
    """Describe a stored date relative to now.

    Day differences count calendar days in the local timezone, so a date from
    late yesterday is 'Ayer' even if fewer than 24 hours have passed.

    Returns:
        'Hoy', 'Ayer', 'Hace N días' for 2 to 6 days, else a short date
    """
    moment = date_parser.isoparse(date_string)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=now.tzinfo)
    elif now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)
    else:
        moment = moment.astimezone().replace(tzinfo=None)

    diff_days = (now.date() - moment.date()).days
    if diff_days == 0:
        return "Hoy"
    if diff_days == 1:
        return "Ayer"
    if 1 < diff_days < 7:
        return f"Hace {diff_days} días"
    return format_short_date(moment)
