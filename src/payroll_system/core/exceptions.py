class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee id has no matching record."""


class StorageError(DomainError):
    """Raised when the employee document cannot be read or written."""
