"""
Record builders shared by the test suites.
"""

from skillhive.core.models import Hackathon, Profile


def make_hackathon(
    hackathon_id,
    skills,
    status="Upcoming",
    start="2026-11-01T09:00:00",
    end="2026-11-03T18:00:00",
    mode="Online",
    title=None,
    description="",
):
    """Build a Hackathon with sensible defaults."""
    return Hackathon(
        id=hackathon_id,
        title=title or f"Hackathon {hackathon_id}",
        description=description,
        skills_required=tuple(skills),
        start_date=start,
        end_date=end,
        mode=mode,
        status=status,
    )


def make_profile(user_id, skills, name=None, education="Undergraduate"):
    """Build a Profile with sensible defaults."""
    return Profile(
        id=user_id,
        name=name or f"User {user_id}",
        education=education,
        skills=tuple(skills),
    )
