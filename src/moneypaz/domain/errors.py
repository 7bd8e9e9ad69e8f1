"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class PersistenceError(Exception):
    """Reading or writing the persisted finance state failed."""


def movement_not_found(movement_id: str) -> str:
    """Return message for missing movement."""
    return f"Movement '{movement_id}' not found"


def non_finite_amount(amount) -> str:
    """Return message for NaN or infinite amounts."""
    return f"Amount must be a finite number, got '{amount}'"


def unsupported_schema_version(version: int, current: int) -> str:
    """Return message for a persisted state written by a newer release."""
    return f"Stored state has schema version {version}, newer than supported {current}"
