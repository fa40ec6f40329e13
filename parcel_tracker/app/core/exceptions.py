"""
Custom exceptions for consistent error reporting.

Provides standardized error codes so callers can branch on the error
type instead of matching messages.
"""

from http import HTTPStatus
from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload for presentation layers."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            status_code=HTTPStatus.NOT_FOUND,
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row matches the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class StorageError(AppException):
    """
    Raised when the database fails to execute a statement.

    The underlying driver/SQLAlchemy exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str, details: Dict[str, Any] = None):
        self.operation = operation
        super().__init__(
            message=f"{operation} failed: {message}",
            error_code="ERR_STORAGE_001",
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details={"operation": operation, **(details or {})}
        )
