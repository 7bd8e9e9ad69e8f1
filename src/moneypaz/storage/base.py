"""Abstract persistence interface for the finance state."""

from abc import ABC, abstractmethod
from typing import Optional

# Well-known key of the single finance state record
STORAGE_KEY = "moneypaz-finance-store"


class StateStore(ABC):
    """Keyed store holding serialized finance state records.

    Implementations raise PersistenceError when the underlying storage fails.
    """

    @abstractmethod
    def read_state(self, key: str) -> Optional[str]:
        """Return the serialized record stored under key, or None."""
        pass

    @abstractmethod
    def write_state(self, key: str, payload: str) -> None:
        """Store the full serialized record under key, replacing any previous one."""
        pass

    def close(self) -> None:
        """Release any resources held by the store."""
        pass
