class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFound(DomainError):
    """Raised when a referenced record does not exist."""


class PermissionDenied(DomainError):
    """Raised when a role lacks permission for an action."""


class StoreUnavailable(DomainError):
    """Raised when the database is unreachable or a query failed."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
