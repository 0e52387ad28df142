from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class PersistenceError(DomainError):
    """Raised when the data store is unreachable or rejects an operation."""


class ConflictError(PersistenceError):
    """Raised when a write violates a uniqueness or reference constraint."""

    def __init__(self, message: str, *, errno: int | None = None):
        super().__init__(message)
        self.errno = errno


class PayrollConflictError(ConflictError):
    """Raised when a batch pays an employee twice for the same period."""


class InconsistentWriteError(PersistenceError):
    """Raised when the second write of a paired operation did not apply."""
