"""
Custom exceptions for the Todo API.

This module defines a hierarchical exception system with:
- Machine-readable error codes for API responses
- HTTP status codes carried on the exception itself
- Structured error data for logging and debugging

Design pattern: Base exception → Specific exceptions
- TodoAPIError: Base for all errors raised by the service layer
- Specific exceptions inherit from base with predefined error codes
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for API responses.

    Naming convention: <DOMAIN>_<NUMBER>
    - TODO_xxx: Todo lookup errors
    - DB_xxx: Datastore errors
    """

    TODO_NOT_FOUND = "TODO_001"

    STORAGE_FAILURE = "DB_001"


class TodoAPIError(Exception):
    """
    Base exception for all Todo API errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code the API layer responds with
        error_code: Machine-readable error identifier
        details: Additional context (dict)
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            dict: Structured error data suitable for JSON responses
        """
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code.value}: {self.message}"


class TodoNotFoundError(TodoAPIError):
    """
    Raised when an update targets a todo id that does not exist.

    Nothing is created or modified when this is raised.

    HTTP Status: 404 Not Found
    """

    def __init__(self, todo_id: int, message: str = "Todo not found"):
        self.todo_id = todo_id
        super().__init__(
            message=message,
            status_code=404,
            error_code=ErrorCode.TODO_NOT_FOUND,
            details={"id": todo_id},
        )


class StorageError(TodoAPIError):
    """
    Raised when the underlying datastore fails (connection loss,
    constraint violation). Not retried.

    HTTP Status: 500 Internal Server Error
    """

    def __init__(self, message: str = "Storage operation failed", details: Any = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code=ErrorCode.STORAGE_FAILURE,
            details=details,
        )
