"""Storage layer for moneypaz application."""

from moneypaz.storage.base import StateStore, STORAGE_KEY
from moneypaz.storage.memory import InMemoryStateStore
from moneypaz.storage.factories import create_sqlite_store

__all__ = ["StateStore", "STORAGE_KEY", "InMemoryStateStore", "create_sqlite_store"]
