"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_REFERENCE = "INVALID_REFERENCE"
CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
INVALID_STATE = "INVALID_STATE"
INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to create or update a resource that would violate a uniqueness constraint."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. days_rented below 1)."""

    pass


class InvalidReferenceError(DomainError):
    """Raised when a payload references a customer, game or category that does not exist."""

    pass


class CapacityExceededError(DomainError):
    """Raised when every copy of a game is already out on an open rental."""

    pass


class InvalidStateError(DomainError):
    """Raised when an operation is illegal for the rental's current state (already returned)."""

    pass
