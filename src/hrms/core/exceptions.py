class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ConflictError(DomainError):
    """Raised when a write would duplicate a unique record."""


class AuthenticationError(DomainError):
    """Raised when a login email cannot be resolved to an active employee."""
