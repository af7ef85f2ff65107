"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedError(AppException):
    """Raised when a protected endpoint is called without a session cookie."""

    def __init__(self, message: str = "Unauthorized."):
        super().__init__(message, status_code=401)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            details: Optional context such as the failing operation.
        """
        super().__init__(message, status_code=500, details=details)
