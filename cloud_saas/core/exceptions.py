"""
Exception hierarchy for the account and contact flows.

Every error carries a ``user_message`` that is safe to return to the client.
Client-caused errors reuse their descriptive message; internal errors keep
the technical detail in ``message`` (for logs) and expose a generic text.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account-service errors."""

    default_user_message = "Server error"

    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        message = message or user_message or self.default_user_message
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


# -----------------------------------------------------------------------------
# Client-caused
# -----------------------------------------------------------------------------


class ValidationError(AccountError):
    """Raised when a required field is missing or blank."""

    default_user_message = "All fields are required"


class ConflictError(AccountError):
    """Raised when registering an email that already exists."""

    default_user_message = "Email already exists"


class InvalidCredentialsError(AccountError):
    """Raised for an unknown email or a wrong password (deliberately identical)."""

    default_user_message = "Invalid email or password"


class AuthenticationError(InvalidCredentialsError):
    """Raised when a bearer token is missing, invalid or expired."""

    default_user_message = "Invalid or expired token"

    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        super().__init__(message, user_message or self.default_user_message)


class NotFoundError(AccountError):
    """Raised when no user matches the request."""

    default_user_message = "User not found"


# -----------------------------------------------------------------------------
# Internal
# -----------------------------------------------------------------------------


class InternalError(AccountError):
    """Raised on storage or hashing failures. Never exposes the cause."""

    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        super().__init__(message, user_message or self.default_user_message)


class EmailDeliveryError(InternalError):
    """Raised when the SMTP server rejects or cannot receive a message."""

    default_user_message = "Email sending failed"


# -----------------------------------------------------------------------------
# Start-up
# -----------------------------------------------------------------------------


class ConfigurationError(Exception):
    """Raised at start-up when required configuration is missing or invalid."""
    pass
