"""Domain layer for moneypaz application."""

from moneypaz.domain.finance import FinanceService
from moneypaz.domain.state import FinanceStateContainer

__all__ = [
    "FinanceService",
    "FinanceStateContainer",
]
