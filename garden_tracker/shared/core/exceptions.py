# 📄 File: garden_tracker/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the kinds of errors the Garden Tracker can report, so a bad form,
# a database hiccup and a broken plant catalog each get a clear message.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy carrying HTTP status codes, machine-readable
# error codes and structured details, serialized into the API error envelope.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain services, command handlers, repositories, catalog client,
# session gate, garden_tracker.main exception handlers

from typing import Any, Dict, Optional

from fastapi import status


class GardenTrackerException(Exception):
    """
    Base exception class for the Garden Tracker application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# AUTHENTICATION
# =============================================================================

class AuthenticationError(GardenTrackerException):
    """
    Raised when there is no valid session.
    The details carry the login entry point the caller should be sent to.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        login_url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if login_url:
            details["login_url"] = login_url

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(GardenTrackerException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(GardenTrackerException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class PlantNotFoundError(NotFoundError):
    """
    Exception raised when a plant does not exist or belongs to someone else.
    Both cases look the same to the caller.
    """

    def __init__(
        self,
        plant_id: str,
        message: Optional[str] = None
    ):
        if not message:
            message = f"Plant not found: {plant_id}"

        super().__init__(
            message=message,
            resource_type="plant",
            resource_id=str(plant_id),
            details={"plant_id": str(plant_id)}
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalAPIError(GardenTrackerException):
    """
    Exception raised for external API failures.
    Used when the plant catalog (Perenual) is unreachable or answers with an error.
    Catalog failures are transient from the user's point of view, so they are
    flagged retryable unless told otherwise.
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        api_status_code: Optional[int] = None,
        api_response: Optional[Any] = None,
        retryable: bool = True,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        error_code: str = "EXTERNAL_API_ERROR"
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name
        if api_status_code:
            details["api_status_code"] = api_status_code
        if api_response:
            details["api_response"] = api_response
        details["retryable"] = retryable

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, api_name: str, timeout_seconds: int = 10):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={
                "timeout_seconds": timeout_seconds,
                "suggestion": "Retry after some time or check network"
            },
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            error_code="EXTERNAL_API_TIMEOUT"
        )


class ServiceNotConfiguredError(GardenTrackerException):
    """Raised when an optional integration is used without its credentials."""

    def __init__(self, service_name: str, setting: Optional[str] = None):
        details = {"service_name": service_name}
        if setting:
            details["setting"] = setting

        super().__init__(
            message=f"{service_name} API Key not configured.",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="SERVICE_NOT_CONFIGURED"
        )


# =============================================================================
# PERSISTENCE EXCEPTIONS
# =============================================================================

class DatabaseError(GardenTrackerException):
    """
    Exception raised for database operation failures.
    Used for connection issues and session setup problems.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(GardenTrackerException):
    """
    Exception raised for repository/database operation failures.
    Used when a query or write fails at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


# =============================================================================
# HELPERS
# =============================================================================

def is_client_error(exception: Exception) -> bool:
    """Check if exception represents a client error (4xx)."""
    if isinstance(exception, GardenTrackerException):
        return 400 <= exception.status_code < 500
    return False
