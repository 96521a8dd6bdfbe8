from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(DomainError):
    """Raised when a payroll check action is not allowed in its current state."""


class NotFoundError(DomainError):
    """Raised when a requested record is not returned by the backend."""


class ApiError(DomainError):
    """Raised when the payroll backend cannot be reached or answers with an error."""

    def __init__(self, message: str, *, endpoint: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
