"""
Custom exceptions for the application.
"""


class FlashdrillException(Exception):
    """Base exception for all Flashdrill application exceptions."""
    pass


class ValidationError(FlashdrillException):
    """Raised when validation fails."""
    pass


class NotFoundError(FlashdrillException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(FlashdrillException):
    """Raised when there's a conflict (e.g., duplicate assignment)."""
    pass


class AuthenticationError(FlashdrillException):
    """Raised when no valid user identity accompanies the request."""
    pass


class AuthorizationError(FlashdrillException):
    """Raised when an administrative operation is attempted by a non-admin."""
    pass


class AccessDeniedError(AuthorizationError):
    """Raised when the user has no assignment for the requested flashcard set."""
    pass
