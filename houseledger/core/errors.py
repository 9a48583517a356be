"""Domain error types shared by services and mapped to HTTP responses in the web layer."""
from __future__ import annotations


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care about "bad input".
    """


class ValidationError(DomainError):
    """One or more input-contract violations, keyed by request field."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__("One or more validation errors occurred.")


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class AccountNotFound(DomainError):
    """Referenced account is missing or inactive."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found or inactive")


class DuplicateTransaction(DomainError):
    """An active transaction with the same dedup key already exists."""

    def __init__(self, unique_key: str) -> None:
        self.unique_key = unique_key
        super().__init__(f"Duplicate transaction detected ({unique_key})")


class DependencyError(DomainError):
    """Operation blocked because other rows still reference the entity."""


class ConstraintViolation(DomainError):
    """Write rejected by the database: unknown reference or missing required value."""


__all__ = [
    "AccountNotFound",
    "ConstraintViolation",
    "DependencyError",
    "DomainError",
    "DuplicateTransaction",
    "NotFoundError",
    "ValidationError",
]
