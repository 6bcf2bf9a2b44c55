"""
Exception hierarchy for the mindfulness backend.

Two failure kinds reach callers of the service layer: validation failures
(caller-correctable) and data access failures (storage faults). Both share
a base class so a boundary can catch either with one clause.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MindfulnessError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the bare message; details stay available for logging."""
        return self.message


class ValidationError(MindfulnessError):
    """Raised when an entity fails business validation before persistence."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message shown to the client
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class DataAccessError(MindfulnessError):
    """
    Raised by the service layer when the storage layer fails.

    The original storage exception is chained as ``__cause__`` and kept on
    ``cause`` for logging; it is never rendered to HTTP clients.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize data access error.

        Args:
            message: Short description of the failed operation
            cause: Underlying storage exception
            operation: Operation that failed (insert, select, update, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.cause = cause
        super().__init__(message, details)
