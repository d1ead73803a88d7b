"""
Error definitions for the SkillHive matching core.

- Error code taxonomy
- Structured error context
- Retryability flag for boundary failures
"""

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Error codes"""

    # Data (D001-D099)
    DATA_NOT_FOUND = "D001"
    DATA_INVALID = "D002"

    # Matching (R001-R099)
    INVALID_PARAMETER = "R002"

    # Data-access boundary (E001-E099)
    FETCH_FAILED = "E001"
    DUPLICATE_ENROLLMENT = "E004"

    # System (S001-S099)
    CONFIGURATION_ERROR = "S001"


class SkillhiveError(Exception):
    """
    Base exception for the matching core.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        retryable: bool = False,
        **context: Any
    ):
        """
        Args:
            code: Error code
            message: Error message
            retryable: Whether the operation may succeed when retried
            **context: Additional error context
        """
        self.code = code
        self.message = message
        self.retryable = retryable
        self.context = context
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a dictionary"""
        return {
            'error_code': self.code.value,
            'message': self.message,
            'retryable': self.retryable,
            'context': self.context
        }


# =============================================================================
# Data errors
# =============================================================================

class DataNotFoundError(SkillhiveError):
    """Record not found"""

    def __init__(self, resource: str, identifier: str, **context: Any):
        super().__init__(
            ErrorCode.DATA_NOT_FOUND,
            f"{resource} not found: {identifier}",
            retryable=False,
            resource=resource,
            identifier=identifier,
            **context
        )


class DataInvalidError(SkillhiveError):
    """Record is malformed"""

    def __init__(self, message: str, **context: Any):
        super().__init__(
            ErrorCode.DATA_INVALID,
            message,
            retryable=False,
            **context
        )


# =============================================================================
# Matching errors
# =============================================================================

class InvalidParameterError(SkillhiveError):
    """Invalid parameter"""

    def __init__(self, parameter: str, value: Any, reason: str):
        super().__init__(
            ErrorCode.INVALID_PARAMETER,
            f"Invalid parameter '{parameter}': {reason}",
            retryable=False,
            parameter=parameter,
            value=str(value),
            reason=reason
        )


# =============================================================================
# Data-access boundary errors
# =============================================================================

class FetchError(SkillhiveError):
    """Loading records from the store failed"""

    def __init__(self, resource: str, message: str, **context: Any):
        super().__init__(
            ErrorCode.FETCH_FAILED,
            f"Failed to fetch {resource}: {message}",
            retryable=True,
            resource=resource,
            **context
        )


class DuplicateEnrollmentError(SkillhiveError):
    """
    Uniqueness violation on (user, hackathon).

    Raised by the store; the repository maps it to
    EnrollmentOutcome.ALREADY_ENROLLED.
    """

    def __init__(self, user_id: str, hackathon_id: str):
        super().__init__(
            ErrorCode.DUPLICATE_ENROLLMENT,
            f"User '{user_id}' is already enrolled in hackathon '{hackathon_id}'",
            retryable=False,
            user_id=user_id,
            hackathon_id=hackathon_id
        )


# =============================================================================
# System errors
# =============================================================================

class ConfigurationError(SkillhiveError):
    """Configuration error"""

    def __init__(self, message: str, **context: Any):
        super().__init__(
            ErrorCode.CONFIGURATION_ERROR,
            message,
            retryable=False,
            **context
        )
