"""Tests for CLI commands."""

import json
from decimal import Decimal

import pytest

from moneypaz.cli.main import cli
from moneypaz.domain.entities import MovementType


@pytest.fixture
def invoke(cli_runner, finance_service):
    """Invoke the CLI against the in-memory finance service."""

    def _invoke(*args, **kwargs):
        return cli_runner.invoke(cli, list(args), obj={"service": finance_service}, **kwargs)

    return _invoke


def test_help_does_not_open_database(cli_runner, monkeypatch, tmp_path):
    monkeypatch.setenv("MONEYPAZ_DB_PATH", str(tmp_path / "unused.db"))

    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Moneypaz" in result.output
    assert not (tmp_path / "unused.db").exists()


def test_setup(invoke, finance_service):
    result = invoke("setup", "1.500,50")

    assert result.exit_code == 0
    assert "Initial balance set to 1,500.50€" in result.output
    assert finance_service.initial_balance == Decimal("1500.50")


@pytest.mark.parametrize("amount", ["0", "-10", "abc"])
def test_setup_rejects_invalid_amount(invoke, finance_service, amount):
    result = invoke("setup", "--", amount)

    assert result.exit_code == 1
    assert "Error" in result.output
    assert finance_service.needs_setup() is True


def test_name(invoke, finance_service):
    result = invoke("name", "Ana")

    assert result.exit_code == 0
    assert finance_service.user_name == "Ana"


def test_add_expense(invoke, finance_service):
    result = invoke("add", "12,99", "--category", "suscripciones", "--concept", "Netflix", "--recurring")

    assert result.exit_code == 0
    assert "Saved expense" in result.output
    movement = finance_service.movements[0]
    assert movement.amount == Decimal("12.99")
    assert movement.description == "Netflix"
    assert movement.is_recurring is True
    assert finance_service.used_concepts == ("netflix",)


def test_add_defaults(invoke, finance_service):
    invoke("add", "5")
    invoke("add", "100", "--type", "income")

    income, expense = finance_service.movements
    assert expense.category == "varios"
    assert expense.description == "Varios"
    assert income.category == "otros_ingresos"
    assert income.type == MovementType.INCOME


def test_add_warns_about_price_increase(invoke, clock):
    invoke("add", "12.99", "--category", "suscripciones", "--concept", "Netflix", "--recurring")
    clock.advance(days=30)

    result = invoke("add", "15.99", "--category", "suscripciones", "--concept", "Netflix", "--recurring")

    assert result.exit_code == 0
    assert "3.00€ more than last time" in result.output


def test_add_unknown_category(invoke, finance_service):
    result = invoke("add", "10", "--category", "mascotas")

    assert result.exit_code == 1
    assert "not found" in result.output
    assert finance_service.movements == ()


def test_add_custom_category_movement(invoke, finance_service):
    invoke("category", "add", "Mascotas")

    result = invoke("add", "10", "--category", "Mascotas")

    assert result.exit_code == 0
    assert finance_service.movements[0].category == "mascotas"


def test_add_rejects_category_of_other_type(invoke, finance_service):
    result = invoke("add", "100", "--type", "income", "--category", "luz")

    assert result.exit_code == 1
    assert "is not an income category" in result.output
    assert finance_service.movements == ()


def test_add_income_to_custom_category_by_name(invoke, finance_service):
    invoke("category", "add", "freelance", "--type", "income")

    result = invoke("add", "100", "--type", "income", "--category", "freelance")

    assert result.exit_code == 0
    assert finance_service.movements[0].category == "ingreso_freelance"
    assert finance_service.movements[0].type == MovementType.INCOME


def test_add_rejects_zero(invoke, finance_service):
    result = invoke("add", "0")

    assert result.exit_code == 1
    assert finance_service.movements == ()


def test_delete(invoke, finance_service):
    movement = finance_service.add_movement(MovementType.EXPENSE, 10, "ocio", "Ocio")

    result = invoke("delete", movement.id)

    assert result.exit_code == 0
    assert f"Deleted movement {movement.id}" in result.output
    assert finance_service.movements == ()


def test_delete_unknown(invoke):
    result = invoke("delete", "mov-missing")

    assert result.exit_code == 0
    assert "not found" in result.output


def test_list(invoke, sample_movements):
    result = invoke("list")

    assert result.exit_code == 0
    assert "Showing 4 movement(s)" in result.output
    assert "Hoy" in result.output
    assert "Hace 3 días" in result.output
    assert "14 feb" in result.output


def test_list_filters_type(invoke, sample_movements):
    result = invoke("list", "--type", "income")

    assert "Showing 1 movement(s)" in result.output
    assert "Nómina" in result.output


def test_list_grouped(invoke, sample_movements):
    result = invoke("list", "--grouped")

    assert result.exit_code == 0
    assert "Hoy" in result.output
    assert "Anteriores este mes" in result.output
    assert "Netflix" not in result.output


def test_list_empty(invoke):
    result = invoke("list")

    assert "No movements found." in result.output


def test_summary_needs_setup(invoke):
    result = invoke("summary")

    assert result.exit_code == 0
    assert "moneypaz setup" in result.output


def test_summary(invoke, finance_service, sample_movements):
    finance_service.set_user_name("Ana")

    result = invoke("summary", "--legacy")

    assert result.exit_code == 0
    assert "Hola, Ana" in result.output
    assert "Current balance:   1,681.81€" in result.output
    assert "Spent this month:  105.20€" in result.output
    assert "Income this month: 1,800.00€" in result.output
    assert "including a big one" in result.output
    assert "Alimentación" in result.output
    assert "Legacy categories:" in result.output


def test_compare(invoke, finance_service):
    finance_service.add_movement(
        MovementType.EXPENSE, Decimal("40"), "movil", "Vodafone",
        concept="Vodafone", is_recurring=True,
    )

    result = invoke("compare", "35", "--concept", "Vodafone", "--category", "movil")

    assert result.exit_code == 0
    assert "Result: decreased" in result.output
    assert "5.00€ less" in result.output


def test_compare_silent(invoke):
    result = invoke("compare", "700", "--category", "vivienda")

    assert "Result: silent" in result.output


def test_committed(invoke, finance_service):
    finance_service.add_movement(
        MovementType.EXPENSE, Decimal("9.99"), "suscripciones", "Spotify",
        concept="Spotify", is_recurring=True,
    )

    result = invoke("committed")

    assert "Committed this month: 9.99€" in result.output
    assert "Spotify" in result.output


def test_suggest(invoke, finance_service):
    finance_service.add_movement(MovementType.EXPENSE, 5, "varios", "Netto", concept="Netto")

    result = invoke("suggest", "net")

    assert result.output.splitlines() == ["Netto", "Netflix"]


def test_category_add_twice(invoke, finance_service):
    first = invoke("category", "add", "Netflix ")
    second = invoke("category", "add", "netflix")

    assert "Created category 'Netflix' [netflix]" in first.output
    assert "already exists" in second.output
    assert finance_service.custom_categories == ["netflix"]


def test_category_add_income(invoke, finance_service):
    result = invoke("category", "add", "Clases", "--type", "income")

    assert "[ingreso_clases]" in result.output
    assert finance_service.custom_categories == ["ingreso_clases"]


def test_category_add_prefixed_name_is_income(invoke, finance_service):
    result = invoke("category", "add", "ingreso_clases")

    assert result.exit_code == 0
    assert finance_service.state.get_custom_category("ingreso_clases").is_income


def test_category_add_prefixed_expense_rejected(invoke, finance_service):
    result = invoke("category", "add", "ingreso_clases", "--type", "expense")

    assert result.exit_code == 1
    assert "income prefix" in result.output
    assert finance_service.custom_categories == []


def test_category_list(invoke, finance_service):
    finance_service.add_custom_category("clases", MovementType.INCOME)

    result = invoke("category", "list", "--type", "income")

    assert "Nómina [nomina]" in result.output
    assert "Clases [ingreso_clases] (custom)" in result.output
    assert "Ocio" not in result.output


def test_category_search(invoke):
    result = invoke("category", "search", "sus")

    assert "Suscripciones [suscripciones]" in result.output


def test_category_frequent(invoke, finance_service):
    finance_service.add_custom_category("gimnasio")
    finance_service.add_movement(MovementType.EXPENSE, 30, "gimnasio", "Gimnasio")

    result = invoke("category", "frequent")

    assert "Gimnasio [gimnasio]" in result.output


def test_export_csv_stdout(invoke, sample_movements):
    result = invoke("export", "csv", "--output", "-")

    assert result.exit_code == 0
    assert result.output.startswith("Fecha;Tipo;Categoría;Descripción;Importe")


def test_export_json_file(invoke, sample_movements, tmp_path):
    target = tmp_path / "backup.json"

    result = invoke("export", "json", "-o", str(target))

    assert result.exit_code == 0
    assert "Exported 4 movement(s)" in result.output
    assert len(json.loads(target.read_text(encoding="utf-8"))["movements"]) == 4


def test_reset(invoke, finance_service, sample_movements):
    result = invoke("reset", "--yes")

    assert result.exit_code == 0
    assert finance_service.movements == ()
    assert finance_service.needs_setup() is True


def test_reset_aborted(invoke, finance_service, sample_movements):
    result = invoke("reset", input="n\n")

    assert result.exit_code == 0
    assert "Reset cancelled." in result.output
    assert len(finance_service.movements) == 4


def test_migrate(invoke, memory_store):
    result = invoke("migrate")

    assert result.exit_code == 0
    assert "up to date" in result.output
    assert memory_store.write_count == 1


def test_state_persists_across_invocations(cli_runner, temp_store):
    """Test a full flow against a SQLite file."""
    db_path = temp_store.database_path

    result = cli_runner.invoke(cli, ["--db-path", db_path, "setup", "1000"])
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "250", "--category", "vivienda"])
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, ["--db-path", db_path, "summary"])
    assert result.exit_code == 0
    assert "Current balance:   750.00€" in result.output
    assert "Hipoteca/Alquiler" in result.output
