"""
In-memory record store for the backend API.

Stands in for the external persistent store:
- Profiles and hackathons, keyed by ID, in insertion order
- Enrollments, unique per (user, hackathon)
"""

from typing import Dict, Any, Optional, List, Sequence
import time
from threading import Lock

from skillhive.core.errors import DataNotFoundError, DuplicateEnrollmentError
from skillhive.core.models import parse_timestamp


class DataStore:
    """
    Singleton holding profiles, hackathons and enrollments.
    Thread-safe implementation to prevent race conditions.
    """

    _instance = None
    _lock = Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._profiles: Dict[str, Dict[str, Any]] = {}
        self._hackathons: Dict[str, Dict[str, Any]] = {}
        self._enrollments: Dict[tuple[str, str], float] = {}
        self._data_lock = Lock()
        self._initialized = True

    # Profiles
    def add_profile(self, row: Dict[str, Any]) -> None:
        """Insert or replace a profile row."""
        with self._data_lock:
            self._profiles[str(row["id"])] = dict(row)

    def get_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._data_lock:
            row = self._profiles.get(user_id)
            return dict(row) if row else None

    def list_profiles(self, exclude_user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._data_lock:
            return [
                dict(row) for pid, row in self._profiles.items() if pid != exclude_user_id
            ]

    # Hackathons
    def add_hackathon(self, row: Dict[str, Any]) -> None:
        """Insert or replace a hackathon row."""
        with self._data_lock:
            self._hackathons[str(row["id"])] = dict(row)

    def get_hackathon(self, hackathon_id: str) -> Optional[Dict[str, Any]]:
        with self._data_lock:
            row = self._hackathons.get(hackathon_id)
            return dict(row) if row else None

    def list_hackathons(self, statuses: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
        """
        Hackathon rows ordered by start date ascending.

        Args:
            statuses: Only return rows whose status is in this list
        """
        with self._data_lock:
            rows = [
                dict(row)
                for row in self._hackathons.values()
                if statuses is None or row.get("status") in statuses
            ]
        return sorted(rows, key=lambda row: parse_timestamp(row["start_date"]))

    # Enrollments
    def insert_enrollment(self, user_id: str, hackathon_id: str) -> None:
        """
        Insert an enrollment.

        Raises:
            DataNotFoundError: If the user or hackathon does not exist
            DuplicateEnrollmentError: If the pair is already enrolled
        """
        with self._data_lock:
            if user_id not in self._profiles:
                raise DataNotFoundError("Profile", user_id)
            if hackathon_id not in self._hackathons:
                raise DataNotFoundError("Hackathon", hackathon_id)
            key = (user_id, hackathon_id)
            if key in self._enrollments:
                raise DuplicateEnrollmentError(user_id, hackathon_id)
            self._enrollments[key] = time.time()

    def list_enrollments(self, user_id: str) -> List[str]:
        """Hackathon IDs for a user, oldest enrollment first."""
        with self._data_lock:
            return [hid for (uid, hid) in self._enrollments if uid == user_id]

    def clear(self) -> None:
        """Drop every record."""
        with self._data_lock:
            self._profiles.clear()
            self._hackathons.clear()
            self._enrollments.clear()

    # Statistics
    def get_stats(self) -> Dict[str, Any]:
        with self._data_lock:
            return {
                "profiles": len(self._profiles),
                "hackathons": len(self._hackathons),
                "enrollments": len(self._enrollments),
            }


# Global singleton instance
data_store = DataStore()
