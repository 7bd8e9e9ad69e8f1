"""In-memory state store."""

from typing import Optional

from moneypaz.domain.errors import PersistenceError
from moneypaz.storage.base import StateStore


class InMemoryStateStore(StateStore):
    """State store backed by a dict, for tests and throwaway sessions."""

    def __init__(self, records: Optional[dict[str, str]] = None):
        self.records: dict[str, str] = dict(records or {})
        self.fail_writes = False
        self.write_count = 0

    def read_state(self, key: str) -> Optional[str]:
        return self.records.get(key)

    def write_state(self, key: str, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"Could not write state '{key}': store is read-only")
        self.records[key] = payload
        self.write_count += 1
