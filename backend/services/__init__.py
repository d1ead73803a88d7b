"""Services package initialization."""

from backend.services.profile_service import ProfileService, profile_service
from backend.services.hackathon_service import HackathonService, hackathon_service
from backend.services.teammate_service import TeammateService, teammate_service
from backend.services.enrollment_service import EnrollmentService, enrollment_service
from backend.services.dashboard_service import DashboardService, dashboard_service

__all__ = [
    "ProfileService",
    "profile_service",
    "HackathonService",
    "hackathon_service",
    "TeammateService",
    "teammate_service",
    "EnrollmentService",
    "enrollment_service",
    "DashboardService",
    "dashboard_service",
]
