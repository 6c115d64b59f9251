"""
Custom exceptions for the Simile Board service.

Services raise these; ``app.core.error_handlers`` turns them into the
standard error envelope.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Business rule errors
    DUPLICATE_LABEL = "DUPLICATE_LABEL"
    NOT_FOUND = "NOT_FOUND"
    PIN_LIMIT_EXCEEDED = "PIN_LIMIT_EXCEEDED"

    # System errors
    STORAGE_ERROR = "STORAGE_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SimileBoardException(Exception):
    """Base exception for the Simile Board service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ValidationError(SimileBoardException):
    """Raised when operation input is malformed."""

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=422
        )


class DuplicateLabelError(SimileBoardException):
    """Raised when a category label is already taken."""

    def __init__(self, label: str):
        super().__init__(
            message="Category with this name already exists.",
            error_code=ErrorCode.DUPLICATE_LABEL,
            details={"label": label},
            status_code=409
        )


class NotFoundError(SimileBoardException):
    """Raised when a referenced category or phrase does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity.capitalize()} not found.",
            error_code=ErrorCode.NOT_FOUND,
            details={"entity": entity, "id": entity_id},
            status_code=404
        )


class PinLimitError(SimileBoardException):
    """Raised when pinning would exceed the per-category pin quota."""

    def __init__(self, category_id: int, limit: int):
        super().__init__(
            message=f"You can only pin {limit} phrases per category.",
            error_code=ErrorCode.PIN_LIMIT_EXCEEDED,
            details={"category_id": category_id, "limit": limit},
            status_code=409
        )


class StorageError(SimileBoardException):
    """
    Raised when the database rejects or fails an operation.
    The message is generic; the cause is logged, never returned.
    """

    def __init__(self, message: str = "Storage operation failed."):
        super().__init__(
            message=message,
            error_code=ErrorCode.STORAGE_ERROR,
            status_code=500
        )
