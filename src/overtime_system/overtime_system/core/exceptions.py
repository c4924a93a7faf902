class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidIntervalError(ValidationError):
    """Raised when a registered interval does not start strictly before it ends."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class UnresolvableScheduleError(NotFoundError):
    """Raised when a shift id is unknown to the schedule source."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
