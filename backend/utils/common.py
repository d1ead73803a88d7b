"""
Common utilities for the backend API.
"""
from pathlib import Path
from typing import Any, Awaitable, Dict, List, TypeVar

import pandas as pd

from skillhive.core.errors import DataInvalidError, SkillhiveError
from skillhive.core.models import Hackathon, Profile
from backend.core.logging import get_logger
from backend.utils.data_store import DataStore, data_store

logger = get_logger(__name__)

T = TypeVar("T")

# Every cell is read as text; records coerce their own fields
SEED_FILES = {
    "profiles": "profiles.csv",
    "hackathons": "hackathons.csv",
    "enrollments": "enrollments.csv",
}


async def fetch_or_default(fetch: Awaitable[T], default: T, resource: str) -> T:
    """
    Await a store fetch, falling back to ``default`` when the store fails.

    Args:
        fetch: Pending fetch coroutine
        default: Value to use when the fetch raises
        resource: Name used in the log entry

    Returns:
        The fetched value, or ``default``
    """
    try:
        return await fetch
    except SkillhiveError as e:
        logger.warning(
            "Fetch failed, using empty result",
            resource=resource,
            error_code=e.code.value,
            error=e.message,
        )
        return default


def split_skills(cell: Any) -> List[str]:
    """Split a comma-separated CSV cell into tags."""
    if cell is None or (isinstance(cell, float) and pd.isna(cell)):
        return []
    return [tag.strip() for tag in str(cell).split(",") if tag.strip()]


def _clean_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {key: (None if pd.isna(value) else value) for key, value in row.items()}


def load_csv_files(seed_dir: Path) -> Dict[str, pd.DataFrame]:
    """
    Load the seed CSV files that exist in ``seed_dir``.

    Args:
        seed_dir: Directory containing profiles.csv, hackathons.csv and
            optionally enrollments.csv

    Returns:
        Dictionary of DataFrames keyed by file kind

    Raises:
        FileNotFoundError: If the directory or a required file is missing
    """
    seed_dir = Path(seed_dir)
    if not seed_dir.exists():
        raise FileNotFoundError(f"Seed directory not found: {seed_dir}")

    data = {}
    for key, filename in SEED_FILES.items():
        filepath = seed_dir / filename
        if not filepath.exists():
            if key == "enrollments":
                continue
            raise FileNotFoundError(f"File not found: {filename}")
        data[key] = pd.read_csv(filepath, dtype=str, keep_default_na=False, na_values=[""])

    return data


def load_seed_directory(seed_dir: Path, store: DataStore = data_store) -> Dict[str, int]:
    """
    Validate seed CSV rows and insert them into the store.

    Rows that fail validation are skipped and logged.

    Returns:
        Counts of loaded and skipped rows
    """
    data = load_csv_files(seed_dir)
    counts = {"profiles": 0, "hackathons": 0, "enrollments": 0, "skipped": 0}

    for row in data["profiles"].to_dict(orient="records"):
        row = _clean_row(row)
        row["skills"] = split_skills(row.get("skills"))
        try:
            profile = Profile.from_dict(row)
        except (DataInvalidError, KeyError) as e:
            logger.warning("Skipping invalid profile row", row_id=row.get("id"), error=str(e))
            counts["skipped"] += 1
            continue
        store.add_profile(profile.to_dict())
        counts["profiles"] += 1

    for row in data["hackathons"].to_dict(orient="records"):
        row = _clean_row(row)
        row["skills_required"] = split_skills(row.get("skills_required"))
        try:
            hackathon = Hackathon.from_dict(row)
        except (DataInvalidError, KeyError, ValueError) as e:
            logger.warning("Skipping invalid hackathon row", row_id=row.get("id"), error=str(e))
            counts["skipped"] += 1
            continue
        store.add_hackathon(hackathon.to_dict())
        counts["hackathons"] += 1

    if "enrollments" in data:
        for row in data["enrollments"].to_dict(orient="records"):
            try:
                store.insert_enrollment(str(row["user_id"]), str(row["hackathon_id"]))
            except SkillhiveError as e:
                logger.warning("Skipping enrollment row", error=e.message)
                counts["skipped"] += 1
                continue
            counts["enrollments"] += 1

    logger.info("Seed data loaded", seed_dir=str(seed_dir), **counts)
    return counts
