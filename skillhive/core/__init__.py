"""Matching core."""

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

__all__ = [
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
]
