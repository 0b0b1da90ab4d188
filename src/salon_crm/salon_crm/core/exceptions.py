class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRateError(ValidationError):
    """Raised when a rate profile holds a negative rate, a multiplier below 1
    or planned daily hours outside (0, 24]."""


class InvalidHoursError(ValidationError):
    """Raised when planned or actual hours are negative."""


class InvalidPeriodError(ValidationError):
    """Raised when a payroll month/year is out of range or daily records do
    not belong to the requested month."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""
