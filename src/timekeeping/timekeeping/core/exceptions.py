class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedTimeError(ValidationError):
    """Raised when a clock-time string is not in HH:MM form."""


class SessionError(DomainError):
    """Raised when a work-session transition is not allowed."""


class AlreadyActiveError(SessionError):
    """Raised when check-in is requested while a session is already active."""
