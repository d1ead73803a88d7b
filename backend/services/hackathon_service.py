"""
Service layer for hackathon listing and recommendations.

Listings and recommendations are computed from fresh snapshots on every
call; nothing is cached between requests.
"""

import asyncio
from typing import Dict, Any, List, Optional
from skillhive.core.config import Config, get_config
from skillhive.core.enrollment_tracker import EnrollmentTracker
from skillhive.core.errors import DataInvalidError
from skillhive.core.filters import annotate_enrollment, filter_hackathons
from skillhive.core.models import Hackathon, HackathonMode, HackathonStatus, MatchResult
from skillhive.core.recommender import HackathonRecommender
from backend.repositories.hackhive_repository import HackhiveRepository, hackhive_repository
from backend.services.profile_service import ProfileService, profile_service
from backend.utils.common import fetch_or_default
from backend.core.exceptions import ValidationException
from backend.core.logging import get_logger

logger = get_logger(__name__)


def recommendation_to_dict(result: MatchResult[Hackathon]) -> Dict[str, Any]:
    return {
        "hackathon": result.item.to_dict(),
        "match_percentage": result.match_percentage,
        "matching_skills": list(result.matching_skills),
    }


class HackathonService:
    """Service for browsing and recommending hackathons."""

    def __init__(
        self,
        repository: HackhiveRepository = hackhive_repository,
        profiles: ProfileService = profile_service,
        config: Optional[Config] = None,
    ):
        self.repository = repository
        self.profiles = profiles
        self.config = config or get_config()

    async def fetch_hackathons_and_enrollments(
        self, user_id: str
    ) -> tuple[List[Hackathon], List[str]]:
        """Fetch all hackathons and the user's enrollments concurrently."""
        return await asyncio.gather(
            fetch_or_default(self.repository.fetch_hackathons(), [], "hackathons"),
            fetch_or_default(self.repository.fetch_enrollments(user_id), [], "enrollments"),
        )

    async def list_hackathons(
        self,
        user_id: Optional[str] = None,
        query: str = "",
        status: Optional[HackathonStatus] = None,
        mode: Optional[HackathonMode] = None,
        skill: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List hackathons with optional filters.

        Args:
            user_id: When given, each item carries the user's enrollment state
            query: Substring of the title or description
            status: Exact status
            mode: Exact mode
            skill: Required skill tag

        Returns:
            Dictionary with the filtered hackathons and their count

        Raises:
            ValidationException: If status or mode is not a known value
        """
        if user_id:
            hackathons, enrolled_ids = await self.fetch_hackathons_and_enrollments(user_id)
        else:
            hackathons = await fetch_or_default(
                self.repository.fetch_hackathons(), [], "hackathons"
            )
            enrolled_ids = []

        try:
            filtered = filter_hackathons(
                hackathons, query=query, status=status, mode=mode, skill=skill
            )
        except DataInvalidError as e:
            raise ValidationException(e.message, field=e.context.get("field")) from e
        tracker = EnrollmentTracker(enrolled_ids)

        items = []
        for hackathon, is_enrolled in annotate_enrollment(filtered, tracker):
            item = hackathon.to_dict()
            item["is_enrolled"] = is_enrolled
            items.append(item)

        logger.info("Hackathons listed", user_id=user_id, total=len(hackathons), returned=len(items))
        return {"hackathons": items, "total": len(items)}

    async def recommend(self, user_id: str) -> Dict[str, Any]:
        """
        Recommend hackathons for a user.

        Raises:
            ProfileNotFoundException: If the user has no profile
        """
        profile = await self.profiles.get_current_profile(user_id)
        if profile is None:
            return {"user_id": user_id, "recommendations": []}

        hackathons, enrolled_ids = await self.fetch_hackathons_and_enrollments(user_id)
        recommender = HackathonRecommender(params=self.config.matching)
        results = recommender.recommend(profile.skills, hackathons, enrolled_ids)

        logger.info(
            "Recommendations generated",
            user_id=user_id,
            candidates=len(hackathons),
            count=len(results),
        )
        return {
            "user_id": user_id,
            "recommendations": [recommendation_to_dict(result) for result in results],
        }


# Singleton instance
hackathon_service = HackathonService()
