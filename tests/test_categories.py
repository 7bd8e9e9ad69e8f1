"""Tests for the category catalog helpers."""

import pytest

from moneypaz.domain.categories import (
    INCOME_PREFIX,
    can_create_category,
    categories_for,
    category_label,
    is_silent_recurring,
    make_custom_category,
    resolve_category,
    search_categories,
)
from moneypaz.domain.entities import CategoryKind, MovementType
from moneypaz.domain.errors import ValidationError


def test_make_custom_category_normalizes():
    tag = make_custom_category("  Mascotas ")

    assert tag.id == "mascotas"
    assert tag.kind == CategoryKind.CUSTOM
    assert tag.movement_type == MovementType.EXPENSE


def test_make_custom_income_category():
    tag = make_custom_category("Clases", MovementType.INCOME)

    assert tag.id == f"{INCOME_PREFIX}clases"
    assert tag.is_income


def test_make_custom_category_with_prefix():
    tag = make_custom_category("INGRESO_Clases")

    assert tag.id == "ingreso_clases"
    assert tag.movement_type == MovementType.INCOME


def test_make_custom_category_prefix_conflicts_with_expense():
    with pytest.raises(ValidationError):
        make_custom_category("ingreso_clases", MovementType.EXPENSE)


def test_resolve_predefined():
    assert resolve_category("luz").kind == CategoryKind.PREDEFINED
    assert resolve_category("luz").movement_type == MovementType.EXPENSE
    assert resolve_category("nomina").movement_type == MovementType.INCOME


def test_resolve_custom():
    income = make_custom_category("clases", MovementType.INCOME)

    assert resolve_category(income.id, [income]) == income


def test_resolve_unknown_is_custom_expense():
    tag = resolve_category("comida")

    assert tag.kind == CategoryKind.CUSTOM
    assert tag.movement_type == MovementType.EXPENSE


@pytest.mark.parametrize(
    "category_id, label",
    [
        ("movil", "Móvil"),
        ("vivienda", "Hipoteca/Alquiler"),
        ("transporte", "Movilidad"),
        ("mascotas", "Mascotas"),
        ("ropa de niños", "Ropa De Niños"),
        ("ingreso_alquiler piso", "Alquiler Piso"),
    ],
)
def test_category_label(category_id, label):
    assert category_label(category_id) == label


def test_categories_for_expense_includes_custom_expense_only():
    custom = [
        make_custom_category("mascotas"),
        make_custom_category("clases", MovementType.INCOME),
    ]

    ids = [category_id for category_id, _ in categories_for(MovementType.EXPENSE, custom)]

    assert ids[:4] == ["alimentacion", "movilidad", "ocio", "varios"]
    assert "suscripciones" in ids
    assert "mascotas" in ids
    assert "ingreso_clases" not in ids
    assert "nomina" not in ids


def test_categories_for_income():
    custom = [make_custom_category("clases", MovementType.INCOME)]

    ids = [category_id for category_id, _ in categories_for(MovementType.INCOME, custom)]

    assert ids == ["nomina", "bizum", "regalo", "otros_ingresos", "ingreso_clases"]


def test_search_categories():
    matches = search_categories("ALQ", MovementType.EXPENSE, [])

    assert matches == [("vivienda", "Hipoteca/Alquiler")]
    assert search_categories("  ", MovementType.EXPENSE, []) == []


def test_can_create_category():
    custom = [make_custom_category("mascotas")]

    assert can_create_category("Gimnasio", MovementType.EXPENSE, custom) is True
    assert can_create_category("mascotas", MovementType.EXPENSE, custom) is False
    assert can_create_category("Ocio", MovementType.EXPENSE, custom) is False
    assert can_create_category("g", MovementType.EXPENSE, custom) is False


def test_is_silent_recurring():
    assert is_silent_recurring("Cuota", "vivienda") is True
    assert is_silent_recurring("HIPOTECA BBVA", "varios") is True
    assert is_silent_recurring("Netflix", "suscripciones") is False
