"""
Enrollment tracking

Keeps the set of hackathon IDs a user has joined. Writes are two-phase: a
tentative entry is opened before the store call and reconciled with the
store's answer, so the local set only ever holds confirmed enrollments.
"""

from enum import Enum
from typing import Awaitable, Callable, Iterable

from skillhive.core.logging_config import LoggerMixin


class EnrollmentOutcome(str, Enum):
    """Result of an enrollment write"""
    SUCCESS = "success"
    ALREADY_ENROLLED = "already_enrolled"
    FAILED = "failed"
    PENDING = "pending"


EnrollmentWriter = Callable[[str], Awaitable[EnrollmentOutcome]]


class EnrollmentTracker(LoggerMixin):
    """Enrolled hackathon IDs for one user"""

    def __init__(self, enrolled_ids: Iterable[str] = ()):
        self._confirmed: set[str] = set(enrolled_ids)
        self._pending: set[str] = set()

    @property
    def enrolled_ids(self) -> frozenset[str]:
        return frozenset(self._confirmed)

    @property
    def pending_ids(self) -> frozenset[str]:
        return frozenset(self._pending)

    def __len__(self) -> int:
        return len(self._confirmed)

    def is_enrolled(self, hackathon_id: str) -> bool:
        return hackathon_id in self._confirmed

    def is_pending(self, hackathon_id: str) -> bool:
        return hackathon_id in self._pending

    def mark_enrolled(self, hackathon_id: str) -> None:
        """Record a confirmed enrollment without a store round trip."""
        self._pending.discard(hackathon_id)
        self._confirmed.add(hackathon_id)

    def sync(self, enrolled_ids: Iterable[str]) -> None:
        """Replace confirmed state with a fresh fetch; pending writes survive."""
        self._confirmed = set(enrolled_ids)

    def begin(self, hackathon_id: str) -> EnrollmentOutcome | None:
        """
        Open the tentative phase for a write.

        Returns:
            None if the write may proceed, otherwise the outcome to report
            without writing (ALREADY_ENROLLED or PENDING)
        """
        if hackathon_id in self._confirmed:
            return EnrollmentOutcome.ALREADY_ENROLLED
        if hackathon_id in self._pending:
            return EnrollmentOutcome.PENDING
        self._pending.add(hackathon_id)
        return None

    def reconcile(self, hackathon_id: str, outcome: EnrollmentOutcome) -> EnrollmentOutcome:
        """
        Close the tentative phase with the store's answer.

        Only SUCCESS changes the confirmed set.
        """
        self._pending.discard(hackathon_id)
        if outcome == EnrollmentOutcome.SUCCESS:
            self._confirmed.add(hackathon_id)
        return outcome

    async def record_enrollment(
        self, hackathon_id: str, writer: EnrollmentWriter
    ) -> EnrollmentOutcome:
        """
        Enroll through ``writer`` and update local state.

        Args:
            hackathon_id: Hackathon to join
            writer: Coroutine function performing the store write

        Returns:
            SUCCESS, ALREADY_ENROLLED, FAILED or PENDING
        """
        early = self.begin(hackathon_id)
        if early is not None:
            self.logger.info(
                "enrollment_skipped", hackathon_id=hackathon_id, outcome=early.value
            )
            return early

        try:
            outcome = await writer(hackathon_id)
        except Exception as e:
            self.logger.warning(
                "enrollment_write_failed", hackathon_id=hackathon_id, error=str(e)
            )
            outcome = EnrollmentOutcome.FAILED

        self.reconcile(hackathon_id, outcome)
        self.logger.info("enrollment_recorded", hackathon_id=hackathon_id, outcome=outcome.value)
        return outcome
