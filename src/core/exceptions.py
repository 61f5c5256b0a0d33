"""
Custom exceptions for the Reminders API.

This module defines a small exception hierarchy with:
- Machine-readable error codes for logging
- HTTP status codes for the handler boundary
- A single wire envelope: {"error": <message>}

Design pattern: Base exception → Specific exceptions
- ReminderAPIError: Base for every error the API surfaces to clients
- InvalidInputError / ConflictError / NotFoundError: predefined status codes
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes used in structured logs.

    Naming convention: <DOMAIN>_<NUMBER>
    - REMINDER_xxx: Reminder store errors
    - API_xxx: General API errors
    """

    INVALID_INPUT = "REMINDER_001"
    REMINDER_CONFLICT = "REMINDER_002"
    REMINDER_NOT_FOUND = "REMINDER_003"

    INTERNAL_ERROR = "API_001"


class ReminderAPIError(Exception):
    """
    Base exception for all errors surfaced by the Reminders API.

    Attributes:
        message: Human-readable error description (sent to the client)
        status_code: HTTP status code for the response
        error_code: Machine-readable error identifier (logged, not sent)
        details: Additional context for logging

    Usage:
        try:
            reminder = repository.get_by_id("r1")
        except NotFoundError as e:
            logger.warning("reminder_lookup_failed", error_code=e.error_code.value)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the JSON error envelope.

        Returns:
            dict: {"error": message}
        """
        return {"error": self.message}

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code.value}: {self.message}"


class InvalidInputError(ReminderAPIError):
    """
    Raised when a request body is missing required fields or has wrong types.

    HTTP Status: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Bad Request: Missing or invalid required fields.",
        details: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code=ErrorCode.INVALID_INPUT,
            details=details,
        )


class ConflictError(ReminderAPIError):
    """
    Raised when creating a reminder whose id is already taken.

    Surfaced as 400 rather than 409 to keep the established API contract.

    HTTP Status: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Reminder with this ID already exists.",
        details: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code=ErrorCode.REMINDER_CONFLICT,
            details=details,
        )


class NotFoundError(ReminderAPIError):
    """
    Raised when no reminder matches an id, or a listing comes back empty.

    Each listing carries its own message ("No completed reminders." etc).

    HTTP Status: 404 Not Found
    """

    def __init__(
        self,
        message: str = "Not Found: Reminder not found.",
        details: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=404,
            error_code=ErrorCode.REMINDER_NOT_FOUND,
            details=details,
        )
