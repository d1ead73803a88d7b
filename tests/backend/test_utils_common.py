"""
Unit tests for backend/utils/common.py
"""
import pandas as pd
import pytest

from skillhive.core.errors import FetchError
from backend.utils.common import (
    fetch_or_default,
    load_csv_files,
    load_seed_directory,
    split_skills,
)
from backend.utils.data_store import data_store


@pytest.mark.parametrize(
    "cell,expected",
    [
        ("python,react", ["python", "react"]),
        (" python , go ,", ["python", "go"]),
        ("", []),
        (None, []),
        (float("nan"), []),
    ],
)
def test_split_skills(cell, expected):
    assert split_skills(cell) == expected


class TestFetchOrDefault:

    @pytest.mark.asyncio
    async def test_returns_value(self):
        async def fetch():
            return ["h1"]

        assert await fetch_or_default(fetch(), [], "hackathons") == ["h1"]

    @pytest.mark.asyncio
    async def test_returns_default_on_store_error(self):
        async def fetch():
            raise FetchError("hackathons", "timeout")

        assert await fetch_or_default(fetch(), [], "hackathons") == []

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        async def fetch():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await fetch_or_default(fetch(), [], "hackathons")


class TestLoadCsvFiles:

    def test_loads_all(self, sample_csv_files):
        data = load_csv_files(sample_csv_files)
        assert set(data) == {"profiles", "hackathons", "enrollments"}
        assert list(data["profiles"]["id"]) == ["001", "002", "003"]

    def test_enrollments_optional(self, sample_csv_files):
        (sample_csv_files / "enrollments.csv").unlink()
        assert "enrollments" not in load_csv_files(sample_csv_files)

    def test_missing_required_file(self, sample_csv_files):
        (sample_csv_files / "hackathons.csv").unlink()
        with pytest.raises(FileNotFoundError, match="hackathons.csv"):
            load_csv_files(sample_csv_files)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_csv_files(tmp_path / "nope")


class TestLoadSeedDirectory:

    def test_loads_valid_rows_and_skips_invalid(self, sample_csv_files):
        counts = load_seed_directory(sample_csv_files)

        assert counts == {"profiles": 2, "hackathons": 2, "enrollments": 1, "skipped": 4}
        assert data_store.get_profile("001")["skills"] == ["python", "react"]
        assert data_store.get_hackathon("h1")["skills_required"] == ["python", "machine-learning"]
        assert data_store.get_hackathon("h1")["max_team_size"] == 4
        assert data_store.get_hackathon("h2")["description"] == ""
        assert data_store.list_enrollments("001") == ["h1"]
        assert data_store.get_profile("003") is None
        assert data_store.get_hackathon("h3") is None

    def test_ids_keep_leading_zeros(self, sample_csv_files):
        data = load_csv_files(sample_csv_files)
        assert list(data["enrollments"]["user_id"]) == ["001", "001", "002"]

    def test_mixed_timezone_offsets_load(self, sample_csv_files):
        pd.DataFrame({
            "id": ["h1", "h2"],
            "title": ["AI Sprint", "Late Night"],
            "skills_required": ["python", "go"],
            "start_date": ["2026-11-01T09:00:00", "2026-11-01T04:00:00"],
            "end_date": ["2026-11-03T18:00:00Z", "2026-11-01T09:00:00+05:30"],
            "mode": ["Online", "Online"],
            "status": ["Upcoming", "Upcoming"],
        }).to_csv(sample_csv_files / "hackathons.csv", index=False)

        counts = load_seed_directory(sample_csv_files)

        assert counts["hackathons"] == 1
        assert data_store.get_hackathon("h1") is not None
        assert data_store.get_hackathon("h2") is None

    def test_numeric_text_cells_stored_as_strings(self, sample_csv_files):
        pd.DataFrame({
            "id": ["h1"],
            "title": ["AI Sprint"],
            "skills_required": ["python"],
            "start_date": ["2026-11-01T09:00:00"],
            "end_date": ["2026-11-03T18:00:00"],
            "mode": ["Online"],
            "status": ["Upcoming"],
            "prize_pool": [5000],
            "organizer": [2026],
        }).to_csv(sample_csv_files / "hackathons.csv", index=False)

        load_seed_directory(sample_csv_files)

        row = data_store.get_hackathon("h1")
        assert row["prize_pool"] == "5000"
        assert row["organizer"] == "2026"
