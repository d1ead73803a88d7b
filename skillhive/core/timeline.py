"""
Progress and status text for enrolled hackathons, in whole days.
"""

from datetime import date
from typing import Optional

from skillhive.core.models import Hackathon


def _today(today: Optional[date]) -> date:
    return today or date.today()


def progress_percent(hackathon: Hackathon, today: Optional[date] = None) -> float:
    """
    Share of the event that has elapsed, clamped to [0, 100].

    A same-day event counts as one day long.
    """
    start = hackathon.start_date.date()
    end = hackathon.end_date.date()
    total_days = (end - start).days or 1
    elapsed = (_today(today) - start).days
    return max(0.0, min(100.0, elapsed / total_days * 100))


def status_text(hackathon: Hackathon, today: Optional[date] = None) -> str:
    """'Starts in N days', 'N days left' or 'Completed', computed from dates."""
    current = _today(today)
    start = hackathon.start_date.date()
    end = hackathon.end_date.date()
    if start > current:
        return f"Starts in {(start - current).days} days"
    if end < current:
        return "Completed"
    return f"{(end - current).days} days left"
