"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    NOT_A_FILE = "not_a_file"
    FILE_NOT_FOUND = "file_not_found"
    STORE_UNAVAILABLE = "store_unavailable"
    UPSTREAM_FAILED = "upstream_failed"
    INTAKE_FAILED = "intake_failed"
    SYSTEM_ERROR = "system_error"


# Short plain-text messages, shown either as an HTTP body or as a chat reply
ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.NOT_A_FILE: "not a file! send me a file.",
    ErrorCategory.FILE_NOT_FOUND: "file not found",
    ErrorCategory.STORE_UNAVAILABLE: "server error: record store unavailable",
    ErrorCategory.UPSTREAM_FAILED: "server error: upstream fetch failed",
    ErrorCategory.INTAKE_FAILED: "server error!",
    ErrorCategory.SYSTEM_ERROR: "server error",
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions are pure and have no external dependencies.
    They can optionally wrap original errors for context.
    """

    category = ErrorCategory.SYSTEM_ERROR

    def __init__(self, message: str, original_error: Exception = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.original_error = original_error


class ValidationError(DomainError):
    """
    Raised when an inbound chat message does not carry a recognizable file.
    """

    category = ErrorCategory.NOT_A_FILE


class StoreUnavailableError(DomainError):
    """
    Raised when the record store cannot be reached.

    Applies to both the registration (write) and retrieval (read) paths.
    The failed operation leaves no partial record behind.
    """

    category = ErrorCategory.STORE_UNAVAILABLE


class RecordNotFoundError(DomainError):
    """Raised when no record exists for a unique id."""

    category = ErrorCategory.FILE_NOT_FOUND


class MalformedRecordError(RecordNotFoundError):
    """
    Raised when a record exists but lacks a field needed for retrieval.

    Callers treat it exactly like RecordNotFoundError.
    """


class UpstreamFetchError(DomainError):
    """Raised when the origin provider request cannot be completed."""

    category = ErrorCategory.UPSTREAM_FAILED


class IntakeError(DomainError):
    """Raised when the chat platform API call fails during registration."""

    category = ErrorCategory.INTAKE_FAILED


def create_error_response(
    category: ErrorCategory,
    status_code: int,
    detail: Optional[str] = None,
) -> Tuple[str, int, Dict[str, str]]:
    """
    Create a plain-text error response for HTTP endpoints.

    Args:
        category: Error category
        status_code: HTTP status code
        detail: Optional text appended after the category message

    Returns:
        Tuple of (body, status_code, headers)
    """
    body = ERROR_MESSAGES.get(category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR])
    if detail:
        body = f"{body}: {detail}"
    return body, status_code, {"Content-Type": "text/plain; charset=utf-8"}
