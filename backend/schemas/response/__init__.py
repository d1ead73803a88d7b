"""Response schemas initialization."""

from backend.schemas.response.common import ErrorDetail, ErrorResponse, HealthResponse
from backend.schemas.response.profile import SkillTag, ProfileResponse
from backend.schemas.response.hackathon import (
    HackathonItem,
    HackathonListItem,
    HackathonListResponse,
    HackathonRecommendation,
    RecommendationsResponse,
)
from backend.schemas.response.teammate import (
    TeammateProfile,
    TeammateMatch,
    TeammateMatchResponse,
)
from backend.schemas.response.enrollment import EnrollmentListResponse, CreateEnrollmentResponse
from backend.schemas.response.dashboard import (
    DashboardProfile,
    EnrolledHackathon,
    DashboardResponse,
)

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Profile
    "SkillTag",
    "ProfileResponse",
    # Hackathon
    "HackathonItem",
    "HackathonListItem",
    "HackathonListResponse",
    "HackathonRecommendation",
    "RecommendationsResponse",
    # Teammate
    "TeammateProfile",
    "TeammateMatch",
    "TeammateMatchResponse",
    # Enrollment
    "EnrollmentListResponse",
    "CreateEnrollmentResponse",
    # Dashboard
    "DashboardProfile",
    "EnrolledHackathon",
    "DashboardResponse",
]
