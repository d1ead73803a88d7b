"""
Core exceptions for the SkillHive API.

This module defines a hierarchy of custom exceptions used throughout the service.
All exceptions inherit from AppException which provides consistent error handling.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "PROFILE_NOT_FOUND")
        status_code: HTTP status code to return
        details: Additional error details/context
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error": {"code": self.error_code, "message": self.message, "details": self.details}
        }


# Resource Not Found Exceptions
class ResourceNotFoundException(AppException):
    """Base exception for resource not found errors."""

    def __init__(self, resource_type: str, resource_id: str, **kwargs):
        super().__init__(
            message=f"{resource_type} '{resource_id}' not found",
            error_code=f"{resource_type.upper()}_NOT_FOUND",
            status_code=404,
            **kwargs,
        )


class ProfileNotFoundException(ResourceNotFoundException):
    """Raised when a user profile is not found."""

    def __init__(self, user_id: str):
        super().__init__(resource_type="Profile", resource_id=user_id)


class HackathonNotFoundException(ResourceNotFoundException):
    """Raised when a hackathon is not found."""

    def __init__(self, hackathon_id: str):
        super().__init__(resource_type="Hackathon", resource_id=hackathon_id)


# Validation Exceptions
class ValidationException(AppException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=422,
            details=details,
            **kwargs,
        )


# Enrollment Exceptions
class AlreadyEnrolledException(AppException):
    """Raised when the user is already enrolled; informational, not a fault."""

    def __init__(self, user_id: str, hackathon_id: str):
        super().__init__(
            message="You are already enrolled in this hackathon",
            error_code="ALREADY_ENROLLED",
            status_code=409,
            details={"user_id": user_id, "hackathon_id": hackathon_id},
        )


class EnrollmentPendingException(AppException):
    """Raised when an enrollment for the same hackathon is still being written."""

    def __init__(self, hackathon_id: str):
        super().__init__(
            message="Enrollment is already in progress",
            error_code="ENROLLMENT_PENDING",
            status_code=409,
            details={"hackathon_id": hackathon_id},
        )


class HackathonClosedException(AppException):
    """Raised when enrolling in a hackathon that has ended."""

    def __init__(self, hackathon_id: str):
        super().__init__(
            message=f"Hackathon '{hackathon_id}' has ended",
            error_code="HACKATHON_CLOSED",
            status_code=400,
            details={"hackathon_id": hackathon_id},
        )


class EnrollmentFailedException(AppException):
    """Raised when the enrollment write fails for any reason other than a duplicate."""

    def __init__(self, hackathon_id: str):
        super().__init__(
            message="Failed to enroll. Please try again.",
            error_code="ENROLLMENT_FAILED",
            status_code=503,
            details={"hackathon_id": hackathon_id, "retryable": True},
        )


# Server Exceptions
class InternalServerException(AppException):
    """Raised for unexpected internal server errors."""

    def __init__(self, message: str = "An unexpected error occurred", **kwargs):
        super().__init__(
            message=message, error_code="INTERNAL_SERVER_ERROR", status_code=500, **kwargs
        )

