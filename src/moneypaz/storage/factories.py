"""Store factory functions for creating state store instances."""

import os
from pathlib import Path
from typing import Optional

from moneypaz.storage.sqlalchemy_store import SQLAlchemyStateStore

DB_PATH_ENV_VAR = "MONEYPAZ_DB_PATH"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite file path.

    Args:
        database_path: Explicit path. If None, checks MONEYPAZ_DB_PATH
            environment variable, then defaults to ~/.moneypaz/moneypaz.db

    Returns:
        Database file path
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        db_dir = Path.home() / ".moneypaz"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "moneypaz.db")

    return database_path


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStateStore:
    """Create a SQLite-backed state store.

    Args:
        database_path: Path to SQLite database file, resolved as in
            resolve_database_path

    Returns:
        SQLAlchemyStateStore instance configured for SQLite
    """
    database_url = f"sqlite:///{resolve_database_path(database_path)}"
    return SQLAlchemyStateStore(database_url)
