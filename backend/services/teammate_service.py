"""
Service layer for teammate matching.
"""

from typing import Dict, Any, Optional
from skillhive.core.errors import DataInvalidError
from skillhive.core.filters import filter_teammates
from skillhive.core.models import EducationLevel, MatchResult, Profile
from skillhive.core.teammate_matcher import TeammateMatcher
from backend.repositories.hackhive_repository import HackhiveRepository, hackhive_repository
from backend.services.profile_service import ProfileService, profile_service
from backend.utils.common import fetch_or_default
from backend.core.exceptions import ValidationException
from backend.core.logging import get_logger

logger = get_logger(__name__)


def teammate_to_dict(result: MatchResult[Profile]) -> Dict[str, Any]:
    return {
        "profile": result.item.to_dict(),
        "match_percentage": result.match_percentage,
        "matching_skills": list(result.matching_skills),
    }


class TeammateService:
    """Service for building a teammate shortlist."""

    def __init__(
        self,
        repository: HackhiveRepository = hackhive_repository,
        profiles: ProfileService = profile_service,
    ):
        self.repository = repository
        self.profiles = profiles
        self.matcher = TeammateMatcher()

    async def match_teammates(
        self,
        user_id: str,
        query: str = "",
        education: Optional[EducationLevel] = None,
    ) -> Dict[str, Any]:
        """
        Rank other users by skill overlap with ``user_id``.

        Args:
            user_id: The acting user
            query: Substring of a candidate's name or skills
            education: Exact education level

        Returns:
            Dictionary with the ranked matches and their count

        Raises:
            ProfileNotFoundException: If the user has no profile
        """
        profile = await self.profiles.get_current_profile(user_id)
        if profile is None:
            return {"user_id": user_id, "matches": [], "total": 0}

        candidates = await fetch_or_default(
            self.repository.fetch_other_profiles(user_id), [], "profiles"
        )
        matches = self.matcher.match(profile.skills, candidates, exclude_user_id=user_id)
        try:
            matches = filter_teammates(matches, query=query, education=education)
        except DataInvalidError as e:
            raise ValidationException(e.message, field="education") from e

        logger.info(
            "Teammates matched", user_id=user_id, candidates=len(candidates), count=len(matches)
        )
        return {
            "user_id": user_id,
            "matches": [teammate_to_dict(match) for match in matches],
            "total": len(matches),
        }


# Singleton instance
teammate_service = TeammateService()
