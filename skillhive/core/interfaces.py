"""
Interfaces

The matching core never talks to storage itself. Callers hand it snapshots
fetched through an object satisfying DataAccessProtocol.
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

from skillhive.core.enrollment_tracker import EnrollmentOutcome
from skillhive.core.models import Hackathon, HackathonStatus, Profile


@runtime_checkable
class DataAccessProtocol(Protocol):
    """External data-access collaborator"""

    async def fetch_profile(self, user_id: str) -> Optional[Profile]:
        """Load one profile, or None if it does not exist"""
        ...

    async def fetch_hackathons(
        self, status_filter: Optional[Sequence[HackathonStatus]] = None
    ) -> list[Hackathon]:
        """Load hackathons ordered by start date"""
        ...

    async def fetch_enrollments(self, user_id: str) -> list[str]:
        """Load the hackathon IDs a user is enrolled in"""
        ...

    async def fetch_other_profiles(self, exclude_user_id: str) -> list[Profile]:
        """Load every profile except one"""
        ...

    async def create_enrollment(self, user_id: str, hackathon_id: str) -> EnrollmentOutcome:
        """Insert an enrollment and report the outcome"""
        ...
