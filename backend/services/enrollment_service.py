"""
Service layer for enrollment operations.

Each user gets an EnrollmentTracker while an enrollment is in progress. It is
synced from the store before every write, so a request that races an
in-flight write for the same hackathon sees it as pending. The tracker is
dropped once no write for the user is in flight.
"""

from typing import Dict, Any, List
from skillhive.core.enrollment_tracker import EnrollmentOutcome, EnrollmentTracker
from backend.repositories.hackhive_repository import HackhiveRepository, hackhive_repository
from backend.utils.common import fetch_or_default
from backend.core.exceptions import (
    AlreadyEnrolledException,
    EnrollmentFailedException,
    EnrollmentPendingException,
    HackathonClosedException,
    HackathonNotFoundException,
    ProfileNotFoundException,
)
from backend.core.logging import get_logger

logger = get_logger(__name__)


class EnrollmentService:
    """Service for enrolling users in hackathons."""

    def __init__(self, repository: HackhiveRepository = hackhive_repository):
        self.repository = repository
        self._trackers: Dict[str, EnrollmentTracker] = {}

    def tracker_for(self, user_id: str) -> EnrollmentTracker:
        if user_id not in self._trackers:
            self._trackers[user_id] = EnrollmentTracker()
        return self._trackers[user_id]

    @property
    def tracked_users(self) -> List[str]:
        """Users with a tracker, i.e. an enrollment in progress."""
        return list(self._trackers)

    def _release(self, user_id: str, tracker: EnrollmentTracker) -> None:
        if not tracker.pending_ids and self._trackers.get(user_id) is tracker:
            del self._trackers[user_id]

    def reset(self) -> None:
        """Forget every tracker."""
        self._trackers.clear()

    async def get_enrollments(self, user_id: str) -> List[str]:
        """Hackathon IDs the user is enrolled in; empty when the store fails."""
        return await fetch_or_default(
            self.repository.fetch_enrollments(user_id), [], "enrollments"
        )

    async def enroll(self, user_id: str, hackathon_id: str) -> Dict[str, Any]:
        """
        Enroll a user in a hackathon.

        Args:
            user_id: The acting user
            hackathon_id: Hackathon to join

        Returns:
            Dictionary describing the new enrollment

        Raises:
            ProfileNotFoundException: If the user has no profile
            HackathonNotFoundException: If the hackathon does not exist
            HackathonClosedException: If the hackathon is completed
            AlreadyEnrolledException: If the user is already enrolled
            EnrollmentPendingException: If a write for the pair is in flight
            EnrollmentFailedException: If the store rejected the write
        """
        if await self.repository.fetch_profile(user_id) is None:
            raise ProfileNotFoundException(user_id)

        hackathon = await self.repository.fetch_hackathon(hackathon_id)
        if hackathon is None:
            raise HackathonNotFoundException(hackathon_id)
        if not hackathon.is_open:
            raise HackathonClosedException(hackathon_id)

        enrolled = await self.get_enrollments(user_id)
        tracker = self.tracker_for(user_id)
        tracker.sync(enrolled)

        async def write(target_id: str) -> EnrollmentOutcome:
            return await self.repository.create_enrollment(user_id, target_id)

        try:
            outcome = await tracker.record_enrollment(hackathon_id, write)
        finally:
            self._release(user_id, tracker)
        logger.info(
            "Enrollment attempted",
            user_id=user_id,
            hackathon_id=hackathon_id,
            outcome=outcome.value,
        )

        if outcome == EnrollmentOutcome.ALREADY_ENROLLED:
            raise AlreadyEnrolledException(user_id, hackathon_id)
        if outcome == EnrollmentOutcome.PENDING:
            raise EnrollmentPendingException(hackathon_id)
        if outcome == EnrollmentOutcome.FAILED:
            raise EnrollmentFailedException(hackathon_id)

        return {
            "user_id": user_id,
            "hackathon_id": hackathon_id,
            "outcome": outcome.value,
            "enrolled_ids": sorted(tracker.enrolled_ids),
        }


# Singleton instance
enrollment_service = EnrollmentService()
