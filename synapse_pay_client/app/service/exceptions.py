"""
Custom exceptions for the SynapsePay client.
"""
from typing import Any, Optional


class SynapsePayError(Exception):
    """Base class for exceptions in this module."""
    pass

class ValidationError(SynapsePayError):
    """Raised when arguments violate a model's contract. Always raised before any API call."""
    pass

class ArgumentError(ValidationError):
    """Raised when a call-time argument is missing, empty or of the wrong kind."""
    pass

class ApiError(SynapsePayError):
    """Raised when the API answers with a non-success status or cannot be reached."""
    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Any] = None):
        self.status_code = status_code
        self.response = response
        super().__init__(message)

class AuthError(SynapsePayError):
    """Raised when a user's credentials are rejected during authentication."""
    def __init__(self, user_id: Optional[str], reason: str = "credentials rejected"):
        self.user_id = user_id
        super().__init__(f"Authentication failed for user '{user_id}': {reason}.")
