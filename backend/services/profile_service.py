"""
Service layer for profile operations.
"""

from typing import Dict, Any, Optional
from skillhive.core.errors import SkillhiveError
from skillhive.core.models import Profile
from skillhive.core.skills import skill_label
from backend.repositories.hackhive_repository import HackhiveRepository, hackhive_repository
from backend.core.exceptions import ProfileNotFoundException
from backend.core.logging import get_logger

logger = get_logger(__name__)


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Serialize a profile with display labels for its skills."""
    data = profile.to_dict()
    data["skills"] = [{"value": tag, "label": skill_label(tag)} for tag in profile.skills]
    return data


class ProfileService:
    """Service for loading user profiles."""

    def __init__(self, repository: HackhiveRepository = hackhive_repository):
        self.repository = repository

    async def get_profile(self, user_id: str) -> Dict[str, Any]:
        """
        Get a profile for display.

        Raises:
            ProfileNotFoundException: If the profile does not exist
        """
        profile = await self.repository.fetch_profile(user_id)
        if profile is None:
            raise ProfileNotFoundException(user_id)
        return profile_to_dict(profile)

    async def get_current_profile(self, user_id: str) -> Optional[Profile]:
        """
        Load the acting user's profile for a matching pass.

        Returns:
            The profile, or None when the store could not be read

        Raises:
            ProfileNotFoundException: If the profile does not exist
        """
        try:
            profile = await self.repository.fetch_profile(user_id)
        except SkillhiveError as e:
            logger.warning(
                "Profile fetch failed, using empty result",
                user_id=user_id,
                error_code=e.code.value,
                error=e.message,
            )
            return None
        if profile is None:
            raise ProfileNotFoundException(user_id)
        return profile


# Singleton instance
profile_service = ProfileService()
