"""
Listing filters for hackathon browsing and the teammate shortlist.
"""

from typing import Iterable, Optional

from skillhive.core.enrollment_tracker import EnrollmentTracker
from skillhive.core.models import (
    EducationLevel,
    Hackathon,
    HackathonMode,
    HackathonStatus,
    MatchResult,
    Profile,
)


def filter_hackathons(
    hackathons: Iterable[Hackathon],
    query: str = "",
    status: Optional[HackathonStatus | str] = None,
    mode: Optional[HackathonMode | str] = None,
    skill: Optional[str] = None,
) -> list[Hackathon]:
    """
    Filter a hackathon listing

    Args:
        hackathons: Listing in fetch order
        query: Case-insensitive substring of title or description
        status: Exact status
        mode: Exact mode
        skill: Tag that must be among the required skills

    Returns:
        Matching hackathons, order preserved
    """
    needle = (query or "").strip().lower()
    wanted_status = HackathonStatus.parse(status) if status else None
    wanted_mode = HackathonMode.parse(mode) if mode else None

    result = []
    for hackathon in hackathons:
        if needle and needle not in hackathon.title.lower() and needle not in hackathon.description.lower():
            continue
        if wanted_status and hackathon.status != wanted_status:
            continue
        if wanted_mode and hackathon.mode != wanted_mode:
            continue
        if skill and skill not in hackathon.skills_required:
            continue
        result.append(hackathon)
    return result


def annotate_enrollment(
    hackathons: Iterable[Hackathon], tracker: EnrollmentTracker
) -> list[tuple[Hackathon, bool]]:
    """Pair each hackathon with the user's enrollment state."""
    return [(hackathon, tracker.is_enrolled(hackathon.id)) for hackathon in hackathons]


def filter_teammates(
    matches: Iterable[MatchResult[Profile]],
    query: str = "",
    education: Optional[EducationLevel | str] = None,
) -> list[MatchResult[Profile]]:
    """
    Filter a teammate shortlist

    Args:
        matches: Ranked matches
        query: Case-insensitive substring of the name or any skill
        education: Exact education level

    Returns:
        Matching entries, ranking preserved
    """
    needle = (query or "").strip().lower()
    wanted_education = EducationLevel.parse(education) if education else None

    result = []
    for match in matches:
        profile = match.item
        if needle and needle not in profile.name.lower() and not any(
            needle in skill.lower() for skill in profile.skills
        ):
            continue
        if wanted_education and profile.education != wanted_education:
            continue
        result.append(match)
    return result
