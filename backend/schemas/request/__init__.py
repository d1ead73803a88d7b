"""Request schemas initialization."""

from backend.schemas.request.recommendation import (
    RecommendHackathonsRequest,
    MatchTeammatesRequest,
)
from backend.schemas.request.enrollment import CreateEnrollmentRequest

__all__ = [
    "RecommendHackathonsRequest",
    "MatchTeammatesRequest",
    "CreateEnrollmentRequest",
]
