"""Shared pytest fixtures for moneypaz tests."""

import tempfile
import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
import pytest

from moneypaz.domain.entities import MovementType
from moneypaz.domain.finance import FinanceService
from moneypaz.storage.factories import create_sqlite_store
from moneypaz.storage.memory import InMemoryStateStore

# Fixed offset so day and month boundaries do not depend on the host timezone
MADRID = timezone(timedelta(hours=1))


class FakeClock:
    """Callable clock that tests can move around."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def now():
    """Reference time: mid-March 2024, noon local time."""
    return datetime(2024, 3, 15, 12, 0, tzinfo=MADRID)


@pytest.fixture
def clock(now):
    return FakeClock(now)


@pytest.fixture
def memory_store():
    return InMemoryStateStore()


@pytest.fixture
def finance_service(memory_store, clock):
    """Create a FinanceService over an in-memory store."""
    return FinanceService(memory_store, clock=clock)


@pytest.fixture
def temp_store():
    """Create a temporary SQLite store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path

    yield store

    # Cleanup
    store.close()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sample_movements(finance_service, clock, now):
    """Record a small ledger: last month, earlier this month and today."""
    clock.set(now - timedelta(days=30))
    finance_service.add_movement(
        MovementType.EXPENSE, Decimal("12.99"), "suscripciones", "Netflix",
        concept="Netflix", is_recurring=True,
    )
    clock.set(now - timedelta(days=10))
    finance_service.add_movement(
        MovementType.INCOME, Decimal("1800"), "nomina", "Nómina",
    )
    clock.set(now - timedelta(days=3))
    finance_service.add_movement(
        MovementType.EXPENSE, Decimal("45.20"), "alimentacion", "Mercadona",
        concept="Mercadona",
    )
    clock.set(now)
    finance_service.add_movement(
        MovementType.EXPENSE, Decimal("60"), "ocio", "Cena",
        concept="Cena",
    )
    return finance_service.movements


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
