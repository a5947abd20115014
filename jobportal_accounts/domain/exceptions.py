"""
Exception hierarchy for the account flows.

Raised by use cases, the user repository and the media uploader. Every
exception carries the message that is safe to show to the client; the API
layer maps each class to an HTTP status code.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account errors."""

    default_message = "An error occurred. Please try again."

    def __init__(
        self,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


# -----------------------------------------------------------------------------
# Request problems
# -----------------------------------------------------------------------------


class ValidationError(AccountError):
    """Raised when a required field is missing or malformed."""

    default_message = "All fields are required."


class ConflictError(AccountError):
    """Raised when an email is already registered."""

    default_message = "User already exists with this email."


class NotFoundError(AccountError):
    """Raised when the user being modified does not exist."""

    default_message = "User not found."


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AuthError(AccountError):
    """Raised on bad credentials. The message never says which field was wrong."""

    default_message = "Incorrect email or password."


class NotAuthenticatedError(AccountError):
    """Raised when a request needs a session and has none (or a bad one)."""

    default_message = "User not authenticated."


# -----------------------------------------------------------------------------
# Media host
# -----------------------------------------------------------------------------


class UploadError(AccountError):
    """Raised when the media host rejects or fails an upload."""

    default_message = "File upload failed. Please try again."
