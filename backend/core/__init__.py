"""Core module initialization."""

from backend.core.exceptions import (
    AppException,
    ProfileNotFoundException,
    HackathonNotFoundException,
    ValidationException,
    AlreadyEnrolledException,
    EnrollmentPendingException,
    HackathonClosedException,
    EnrollmentFailedException,
    InternalServerException,
)

__all__ = [
    "AppException",
    "ProfileNotFoundException",
    "HackathonNotFoundException",
    "ValidationException",
    "AlreadyEnrolledException",
    "EnrollmentPendingException",
    "HackathonClosedException",
    "EnrollmentFailedException",
    "InternalServerException",
]
