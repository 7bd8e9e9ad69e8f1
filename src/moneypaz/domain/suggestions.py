"""Autocomplete suggestions for concepts and categories."""

from collections import Counter
from typing import Sequence

from moneypaz.domain.categories import INCOME_IDS, is_predefined
from moneypaz.domain.entities import CategoryTag, Movement, MovementType

# Common merchants and income sources offered before the user has history
DEFAULT_CONCEPTS = [
    "mercadona", "lidl", "coviran", "carrefour", "dia",
    "netflix", "spotify", "hbo", "disney", "amazon prime",
    "gasolina", "parking", "renfe", "bus", "taxi",
    "cajamar", "santander", "bbva", "ing",
    "seguro ocaso", "seguro mapfre", "mutua",
    "endesa", "iberdrola", "naturgy",
    "vodafone", "movistar", "orange",
    "nómina papá", "nómina mamá", "bizum papá", "bizum mamá",
    "comunidad", "hipoteca", "alquiler",
]

CONCEPT_SUGGESTION_LIMIT = 5
QUICK_PICK_LIMIT = 4


def suggested_concepts(movements: Sequence[Movement]) -> list[str]:
    """Rank the user's concepts by use, then append unused defaults."""
    counts = Counter(m.concept.lower() for m in movements if m.concept)
    merged = [concept for concept, _ in counts.most_common()]
    seen = set(merged)
    for concept in DEFAULT_CONCEPTS:
        if concept not in seen:
            merged.append(concept)
            seen.add(concept)
    return merged


def filter_concepts(
    suggestions: Sequence[str], query: str, limit: int = CONCEPT_SUGGESTION_LIMIT
) -> list[str]:
    """Narrow suggestions to those containing the query."""
    if not query.strip():
        return list(suggestions[:limit])
    needle = query.lower()
    return [s for s in suggestions if needle in s.lower()][:limit]


def frequent_custom_categories(
    frequent: Sequence[str],
    custom_categories: Sequence[CategoryTag],
    movement_type: MovementType,
    limit: int = QUICK_PICK_LIMIT,
) -> list[str]:
    """Pick the most used custom categories for a movement type.

    Predefined categories are always shown in the main grid, so only
    user-created ones are offered here.
    """
    custom_by_id = {tag.id: tag for tag in custom_categories}

    def matches_type(category_id: str) -> bool:
        tag = custom_by_id.get(category_id)
        if movement_type == MovementType.INCOME:
            return category_id in INCOME_IDS or (tag is not None and tag.is_income)
        return tag is None or not tag.is_income

    picks = [
        category_id
        for category_id in frequent
        if matches_type(category_id)
        and not is_predefined(category_id)
        and category_id in custom_by_id
    ]
    return picks[:limit]
