"""
Repository layer for profiles, hackathons and enrollments.

Implements the data-access boundary of the matching core over the DataStore
singleton. Store connection failures on reads surface as FetchError, which is
retried.
"""

from typing import Any, Callable, List, Optional, Sequence, TypeVar

from skillhive.core.config import DEFAULT_CONFIG, RetryParams
from skillhive.core.enrollment_tracker import EnrollmentOutcome
from skillhive.core.errors import DuplicateEnrollmentError, FetchError, SkillhiveError
from skillhive.core.models import Hackathon, HackathonStatus, Profile
from skillhive.core.retry import with_retry
from backend.core.logging import get_logger
from backend.utils.data_store import DataStore, data_store

logger = get_logger(__name__)

T = TypeVar("T")


class HackhiveRepository:
    """Repository for SkillHive records."""

    def __init__(self, store: DataStore = data_store, retry: RetryParams = DEFAULT_CONFIG.retry):
        self._store = store
        retrying = with_retry(
            max_attempts=retry.max_attempts,
            min_wait_seconds=retry.min_wait_seconds,
            max_wait_seconds=retry.max_wait_seconds,
        )
        self.fetch_profile = retrying(self._fetch_profile)
        self.fetch_hackathon = retrying(self._fetch_hackathon)
        self.fetch_hackathons = retrying(self._fetch_hackathons)
        self.fetch_enrollments = retrying(self._fetch_enrollments)
        self.fetch_other_profiles = retrying(self._fetch_other_profiles)

    def _read(self, resource: str, load: Callable[..., T], *args: Any) -> T:
        try:
            return load(*args)
        except OSError as e:
            raise FetchError(resource, str(e), error_type=type(e).__name__) from e

    # Profile operations
    async def _fetch_profile(self, user_id: str) -> Optional[Profile]:
        """
        Load one profile.

        Args:
            user_id: Profile identifier

        Returns:
            Profile or None if not found
        """
        row = self._read("profile", self._store.get_profile, user_id)
        return Profile.from_dict(row) if row else None

    async def _fetch_other_profiles(self, exclude_user_id: str) -> List[Profile]:
        """Every profile except ``exclude_user_id``, in insertion order."""
        rows = self._read("profiles", self._store.list_profiles, exclude_user_id)
        return [Profile.from_dict(row) for row in rows]

    # Hackathon operations
    async def _fetch_hackathon(self, hackathon_id: str) -> Optional[Hackathon]:
        row = self._read("hackathon", self._store.get_hackathon, hackathon_id)
        return Hackathon.from_dict(row) if row else None

    async def _fetch_hackathons(
        self, status_filter: Optional[Sequence[HackathonStatus]] = None
    ) -> List[Hackathon]:
        """
        Load hackathons ordered by start date ascending.

        Args:
            status_filter: Only return hackathons with one of these statuses
        """
        statuses = (
            [HackathonStatus.parse(status).value for status in status_filter]
            if status_filter is not None
            else None
        )
        rows = self._read("hackathons", self._store.list_hackathons, statuses)
        return [Hackathon.from_dict(row) for row in rows]

    # Enrollment operations
    async def _fetch_enrollments(self, user_id: str) -> List[str]:
        return self._read("enrollments", self._store.list_enrollments, user_id)

    async def create_enrollment(self, user_id: str, hackathon_id: str) -> EnrollmentOutcome:
        """
        Insert an enrollment.

        Writes are not retried; a failure is reported as FAILED so the caller
        can offer a manual retry.

        Returns:
            SUCCESS, ALREADY_ENROLLED for a duplicate pair, FAILED otherwise
        """
        try:
            self._store.insert_enrollment(user_id, hackathon_id)
        except DuplicateEnrollmentError:
            logger.info("Duplicate enrollment", user_id=user_id, hackathon_id=hackathon_id)
            return EnrollmentOutcome.ALREADY_ENROLLED
        except SkillhiveError as e:
            logger.warning(
                "Enrollment insert failed",
                user_id=user_id,
                hackathon_id=hackathon_id,
                error_code=e.code.value,
                error=e.message,
            )
            return EnrollmentOutcome.FAILED
        except OSError as e:
            logger.warning(
                "Enrollment insert failed",
                user_id=user_id,
                hackathon_id=hackathon_id,
                error=str(e),
            )
            return EnrollmentOutcome.FAILED

        logger.info("Enrollment created", user_id=user_id, hackathon_id=hackathon_id)
        return EnrollmentOutcome.SUCCESS


# Singleton instance
hackhive_repository = HackhiveRepository()
