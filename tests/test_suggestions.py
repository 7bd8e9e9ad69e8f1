"""Tests for concept and category suggestions."""

from moneypaz.domain.entities import MovementType
from moneypaz.domain.suggestions import (
    DEFAULT_CONCEPTS,
    filter_concepts,
    frequent_custom_categories,
    suggested_concepts,
)
from moneypaz.domain.categories import make_custom_category


def test_suggested_concepts_defaults_only(finance_service):
    """Test that a new user gets the default dictionary."""
    assert finance_service.suggested_concepts() == DEFAULT_CONCEPTS


def test_user_concepts_rank_first(finance_service):
    """Test that learned concepts outrank defaults, most used first."""
    finance_service.add_movement(MovementType.EXPENSE, 5, "varios", "Panadería", concept="Panadería")
    finance_service.add_movement(MovementType.EXPENSE, 30, "alimentacion", "Lidl", concept="Lidl")
    finance_service.add_movement(MovementType.EXPENSE, 25, "alimentacion", "lidl", concept="lidl")

    suggestions = finance_service.suggested_concepts()

    assert suggestions[:2] == ["lidl", "panadería"]
    assert suggestions.count("lidl") == 1
    assert "mercadona" in suggestions
    assert len(suggestions) == len(DEFAULT_CONCEPTS) + 1


def test_suggested_concepts_ignore_blank(finance_service):
    finance_service.add_movement(MovementType.EXPENSE, 5, "varios", "Varios")

    assert finance_service.suggested_concepts() == DEFAULT_CONCEPTS


def test_filter_concepts_blank_query():
    assert filter_concepts(["a", "b", "c", "d", "e", "f"], "  ") == ["a", "b", "c", "d", "e"]


def test_filter_concepts_substring():
    suggestions = suggested_concepts(())

    assert filter_concepts(suggestions, "Seg") == ["seguro ocaso", "seguro mapfre"]
    assert filter_concepts(suggestions, "zzz") == []


def test_filter_concepts_limit():
    assert len(filter_concepts(suggested_concepts(()), "a", limit=3)) == 3


class TestQuickPickCategories:
    """Tests for the frequently used custom category shortcut."""

    def test_excludes_predefined(self, finance_service):
        finance_service.add_custom_category("gimnasio")
        for category in ("ocio", "ocio", "gimnasio"):
            finance_service.add_movement(MovementType.EXPENSE, 1, category, category)

        assert finance_service.quick_pick_categories(MovementType.EXPENSE) == ["gimnasio"]

    def test_partitions_by_type(self, finance_service):
        finance_service.add_custom_category("gimnasio")
        income_id = finance_service.add_custom_category("alquiler piso", MovementType.INCOME)
        finance_service.add_movement(MovementType.EXPENSE, 1, "gimnasio", "Gimnasio")
        finance_service.add_movement(MovementType.INCOME, 500, income_id, "Alquiler Piso")

        assert finance_service.quick_pick_categories(MovementType.EXPENSE) == ["gimnasio"]
        assert finance_service.quick_pick_categories(MovementType.INCOME) == [income_id]

    def test_capped_at_four(self):
        tags = [make_custom_category(name) for name in ("a1", "b2", "c3", "d4", "e5")]
        frequent = ["e5", "d4", "c3", "b2", "a1"]

        picks = frequent_custom_categories(frequent, tags, MovementType.EXPENSE)

        assert picks == ["e5", "d4", "c3", "b2"]

    def test_ignores_unknown_categories(self):
        tags = [make_custom_category("gimnasio")]

        picks = frequent_custom_categories(["legacy", "gimnasio"], tags, MovementType.EXPENSE)

        assert picks == ["gimnasio"]
