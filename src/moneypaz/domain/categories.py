"""Category catalog and category helpers.

Predefined categories are fixed ids with display labels. User-created
categories are CategoryTag entries stored in the FinanceState; their movement
type is decided when they are created.
"""

from typing import Optional, Sequence

from moneypaz.domain.entities import CategoryKind, CategoryTag, MovementType
from moneypaz.domain.errors import ValidationError

# Reserved id prefix for user-created income categories in the persisted state
INCOME_PREFIX = "ingreso_"

# (id, label) pairs in display order
MAIN_CATEGORIES = [
    ("alimentacion", "Alimentación"),
    ("movilidad", "Movilidad"),
    ("ocio", "Ocio"),
    ("varios", "Varios"),
]

BILL_CATEGORIES = [
    ("luz", "Luz"),
    ("agua", "Agua"),
    ("movil", "Móvil"),
    ("vivienda", "Hipoteca/Alquiler"),
    ("seguros", "Seguros"),
    ("suscripciones", "Suscripciones"),
]

INCOME_CATEGORIES = [
    ("nomina", "Nómina"),
    ("bizum", "Bizum"),
    ("regalo", "Regalo"),
    ("otros_ingresos", "Otros ingresos"),
]

# Ids that older releases wrote and that still need a label
LEGACY_LABELS = {
    "transporte": "Movilidad",
    "comida": "Comida",
    "casa": "Casa",
    "ingreso": "Ingreso",
}

# Old ids folded into their replacements for the monthly breakdown
LEGACY_ALIASES = {
    "comida": "alimentacion",
    "transporte": "movilidad",
}

# The only keys reported by the legacy per-category spending aggregate
LEGACY_SPENDING_KEYS = ("comida", "casa", "ocio", "varios")

# Housing and loan terms exempt from recurring price-change alerts
SILENT_RECURRING_CATEGORIES = ("vivienda", "hipoteca", "alquiler", "prestamo")

DEFAULT_CATEGORY = "varios"

PREDEFINED_LABELS = dict(MAIN_CATEGORIES + BILL_CATEGORIES + INCOME_CATEGORIES)
PREDEFINED_IDS = frozenset(PREDEFINED_LABELS)
INCOME_IDS = frozenset(category_id for category_id, _ in INCOME_CATEGORIES)


def normalize_category_name(name: str) -> str:
    """Trim and lower-case a category name."""
    return name.strip().lower()


def is_predefined(category_id: str) -> bool:
    return category_id in PREDEFINED_IDS


def make_custom_category(
    name: str, movement_type: Optional[MovementType] = None
) -> CategoryTag:
    """Build a custom category tag from user input.

    Args:
        name: Category name as typed; may already carry the income prefix
        movement_type: Movement type the category is created for. None means
            expense unless the name carries the income prefix.

    Returns:
        CategoryTag with a normalized id

    Raises:
        ValidationError: If an expense category is named with the income prefix
    """
    normalized = normalize_category_name(name)
    if normalized.startswith(INCOME_PREFIX):
        if movement_type == MovementType.EXPENSE:
            raise ValidationError(
                f"Category '{normalized}' uses the income prefix '{INCOME_PREFIX}'"
            )
        return CategoryTag(
            id=normalized, kind=CategoryKind.CUSTOM, movement_type=MovementType.INCOME
        )
    if movement_type == MovementType.INCOME:
        return CategoryTag(
            id=INCOME_PREFIX + normalized,
            kind=CategoryKind.CUSTOM,
            movement_type=MovementType.INCOME,
        )
    return CategoryTag(
        id=normalized, kind=CategoryKind.CUSTOM, movement_type=MovementType.EXPENSE
    )


def resolve_category(
    category_id: str, custom_categories: Sequence[CategoryTag] = ()
) -> CategoryTag:
    """Resolve a category id to its tag.

    Unknown ids (legacy or removed) resolve to an expense custom tag.
    """
    if category_id in PREDEFINED_IDS:
        movement_type = (
            MovementType.INCOME if category_id in INCOME_IDS else MovementType.EXPENSE
        )
        return CategoryTag(
            id=category_id, kind=CategoryKind.PREDEFINED, movement_type=movement_type
        )
    for tag in custom_categories:
        if tag.id == category_id:
            return tag
    return CategoryTag(
        id=category_id, kind=CategoryKind.CUSTOM, movement_type=MovementType.EXPENSE
    )


def category_label(category_id: str) -> str:
    """Return a human label for a category id.

    Examples:
        "movil" -> "Móvil"
        "ingreso_alquiler piso" -> "Alquiler Piso"
    """
    if category_id in PREDEFINED_LABELS:
        return PREDEFINED_LABELS[category_id]
    if category_id in LEGACY_LABELS:
        return LEGACY_LABELS[category_id]
    clean = category_id.replace(INCOME_PREFIX, "", 1)
    return " ".join(word[:1].upper() + word[1:] for word in clean.split(" "))


def categories_for(
    movement_type: MovementType, custom_categories: Sequence[CategoryTag]
) -> list[tuple[str, str]]:
    """List selectable (id, label) pairs for a movement type."""
    if movement_type == MovementType.INCOME:
        base = list(INCOME_CATEGORIES)
    else:
        base = MAIN_CATEGORIES + BILL_CATEGORIES
    custom = [
        (tag.id, category_label(tag.id))
        for tag in custom_categories
        if tag.movement_type == movement_type
    ]
    return base + custom


def search_categories(
    query: str,
    movement_type: MovementType,
    custom_categories: Sequence[CategoryTag],
) -> list[tuple[str, str]]:
    """Find categories whose id or label contains the query."""
    if not query.strip():
        return []
    needle = query.lower()
    return [
        (category_id, label)
        for category_id, label in categories_for(movement_type, custom_categories)
        if needle in label.lower() or needle in category_id.lower()
    ]


def can_create_category(
    query: str,
    movement_type: MovementType,
    custom_categories: Sequence[CategoryTag],
) -> bool:
    """Return True if the query would name a new category."""
    if not query.strip() or len(query) < 2:
        return False
    needle = query.strip().lower()
    return not any(
        category_id.lower() == needle or label.lower() == needle
        for category_id, label in categories_for(movement_type, custom_categories)
    )


def is_silent_recurring(concept: str, category: str) -> bool:
    """Return True if price-change alerts are suppressed for this expense."""
    concept = concept.lower()
    category = category.lower()
    return any(
        term in category or term in concept for term in SILENT_RECURRING_CATEGORIES
    )
