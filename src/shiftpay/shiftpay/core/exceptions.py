class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced staff member, record or shift does not exist."""


class InvalidTransitionError(DomainError):
    """Raised when an attendance action is attempted from the wrong state."""


class ConflictError(DomainError):
    """Raised when a store write lost a race; the caller should re-fetch."""
