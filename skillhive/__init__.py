"""
SkillHive matching engine

Hackathon recommendations and teammate matching from skill overlap.
"""

from typing import Iterable

from skillhive.core.config import Config, get_config
from skillhive.core.enrollment_tracker import EnrollmentOutcome, EnrollmentTracker
from skillhive.core.models import (
    EducationLevel,
    Enrollment,
    Hackathon,
    HackathonMode,
    HackathonStatus,
    MatchResult,
    Profile,
)
from skillhive.core.recommender import HackathonRecommender
from skillhive.core.teammate_matcher import TeammateMatcher

__version__ = "1.0.0"


def recommend(
    profile: Profile,
    hackathons: Iterable[Hackathon],
    enrolled_ids: Iterable[str] = (),
) -> list[MatchResult[Hackathon]]:
    """Recommend hackathons for ``profile`` with default settings."""
    return HackathonRecommender().recommend(profile.skills, hackathons, enrolled_ids)


def match_teammates(
    profile: Profile, candidates: Iterable[Profile]
) -> list[MatchResult[Profile]]:
    """Rank ``candidates`` as teammates for ``profile``."""
    return TeammateMatcher().match(profile.skills, candidates, exclude_user_id=profile.id)


def is_enrolled(tracker: EnrollmentTracker, hackathon_id: str) -> bool:
    return tracker.is_enrolled(hackathon_id)


def mark_enrolled(tracker: EnrollmentTracker, hackathon_id: str) -> None:
    """Record a confirmed enrollment in ``tracker``."""
    tracker.mark_enrolled(hackathon_id)


__all__ = [
    "Config",
    "get_config",
    "EducationLevel",
    "Enrollment",
    "EnrollmentOutcome",
    "EnrollmentTracker",
    "Hackathon",
    "HackathonMode",
    "HackathonRecommender",
    "HackathonStatus",
    "MatchResult",
    "Profile",
    "TeammateMatcher",
    "recommend",
    "match_teammates",
    "is_enrolled",
    "mark_enrolled",
]
