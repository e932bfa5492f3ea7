class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule (e.g. duplicate email)."""


class NotFoundError(DomainError):
    """Raised when the requested entity does not exist."""


class StudentNotFoundError(NotFoundError):
    """Raised when an operation references a student that does not exist."""


class StorageError(DomainError):
    """Raised when the underlying database fails."""
