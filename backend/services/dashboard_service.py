"""
Service layer for the user dashboard.
"""

from datetime import date
from typing import Dict, Any, Optional
from skillhive.core.enrollment_tracker import EnrollmentTracker
from skillhive.core.recommender import HackathonRecommender
from skillhive.core.timeline import progress_percent, status_text
from backend.services.hackathon_service import (
    HackathonService,
    hackathon_service,
    recommendation_to_dict,
)
from backend.services.profile_service import profile_to_dict
from backend.core.logging import get_logger

logger = get_logger(__name__)


class DashboardService:
    """Service assembling the dashboard summary."""

    def __init__(self, hackathons: HackathonService = hackathon_service):
        self.hackathons = hackathons

    async def get_dashboard(self, user_id: str, today: Optional[date] = None) -> Dict[str, Any]:
        """
        Build the dashboard for a user.

        Args:
            user_id: The acting user
            today: Reference date for timeline figures (defaults to today)

        Returns:
            Profile, enrolled hackathons with progress, and recommendations

        Raises:
            ProfileNotFoundException: If the user has no profile
        """
        profile = await self.hackathons.profiles.get_current_profile(user_id)
        if profile is None:
            return {
                "user_id": user_id,
                "profile": None,
                "enrolled": [],
                "enrolled_count": 0,
                "recommendations": [],
            }

        hackathons, enrolled_ids = await self.hackathons.fetch_hackathons_and_enrollments(user_id)
        tracker = EnrollmentTracker(enrolled_ids)

        enrolled = []
        for hackathon in hackathons:
            if not tracker.is_enrolled(hackathon.id):
                continue
            item = hackathon.to_dict()
            item["progress_percent"] = round(progress_percent(hackathon, today), 1)
            item["status_text"] = status_text(hackathon, today)
            enrolled.append(item)

        recommender = HackathonRecommender(params=self.hackathons.config.matching)
        recommendations = recommender.recommend(profile.skills, hackathons, tracker.enrolled_ids)

        logger.info(
            "Dashboard built",
            user_id=user_id,
            enrolled=len(enrolled),
            recommendations=len(recommendations),
        )
        return {
            "user_id": user_id,
            "profile": profile_to_dict(profile),
            "enrolled": enrolled,
            "enrolled_count": len(enrolled),
            "recommendations": [recommendation_to_dict(result) for result in recommendations],
        }


# Singleton instance
dashboard_service = DashboardService()
