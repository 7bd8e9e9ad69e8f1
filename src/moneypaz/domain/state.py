"""Persisted finance state container."""

import json
import logging
from decimal import Decimal

from moneypaz.domain.entities import FinanceState
from moneypaz.domain.errors import PersistenceError
from moneypaz.storage.base import StateStore, STORAGE_KEY
from moneypaz.storage.mappers import state_from_dict, state_to_dict
from moneypaz.storage.migrations import migrate_payload

logger = logging.getLogger(__name__)


def decode_state(payload: str) -> FinanceState:
    """Decode a serialized record, migrating older schema versions.

    Raises:
        ValueError, KeyError, TypeError, ArithmeticError: If the payload is
            malformed
    """
    data = json.loads(payload, parse_float=Decimal)
    return state_from_dict(migrate_payload(data))


def encode_state(state: FinanceState) -> str:
    return json.dumps(state_to_dict(state), ensure_ascii=False)


class FinanceStateContainer:
    """Owns the canonical FinanceState and keeps the store in sync with it.

    The in-memory state is the source of truth for the session. Saving is
    best effort: a failed write is logged and the in-memory state is kept.
    """

    def __init__(self, store: StateStore, key: str = STORAGE_KEY):
        """Initialize the container and load the stored state.

        Args:
            store: Persistence port used for reads and writes
            key: Key of the state record in the store
        """
        self.store = store
        self.key = key
        self._state = self.load()

    @property
    def state(self) -> FinanceState:
        return self._state

    def load(self) -> FinanceState:
        """Read the stored state, falling back to the zero-value state."""
        try:
            payload = self.store.read_state(self.key)
        except PersistenceError as e:
            logger.error("Error reading stored state: %s", e)
            return FinanceState.empty()

        if payload is None:
            return FinanceState.empty()

        try:
            return decode_state(payload)
        except (ValueError, KeyError, TypeError, AttributeError, ArithmeticError) as e:
            logger.warning("Discarding malformed stored state: %s", e)
            return FinanceState.empty()

    def replace(self, state: FinanceState) -> None:
        """Swap in a new state and save it."""
        self._state = state
        self.save()

    def save(self) -> bool:
        """Write the current state in full. Returns False if the write failed."""
        try:
            self.store.write_state(self.key, encode_state(self._state))
        except PersistenceError as e:
            logger.error("Error saving state: %s", e)
            return False
        return True
