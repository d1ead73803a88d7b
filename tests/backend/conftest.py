"""
Shared fixtures for backend API tests.
"""
import pytest
import pandas as pd
from fastapi.testclient import TestClient

from backend.main import app
from backend.services.enrollment_service import enrollment_service
from backend.utils.data_store import data_store


PROFILES = [
    {"id": "u1", "name": "Asha", "education": "Undergraduate", "skills": ["python", "react"], "email": "asha@example.com"},
    {"id": "u2", "name": "Ben", "education": "Postgraduate", "skills": ["python"], "email": None},
    {"id": "u3", "name": "Chen", "education": "PhD", "skills": ["java", "rust"], "email": None},
    {"id": "u4", "name": "Dana", "education": "Diploma", "skills": ["react", "go", "python", "ui-ux"], "email": None},
]

HACKATHONS = [
    {
        "id": "h1",
        "title": "Legacy Hack",
        "description": "Already over",
        "skills_required": ["python"],
        "start_date": "2026-09-01T09:00:00",
        "end_date": "2026-09-02T18:00:00",
        "mode": "Offline",
        "status": "Completed",
        "location": "Pune",
    },
    {
        "id": "h2",
        "title": "Web Jam",
        "description": "Frontend weekend",
        "skills_required": ["react", "typescript"],
        "start_date": "2026-10-18T09:00:00",
        "end_date": "2026-10-22T18:00:00",
        "mode": "Online",
        "status": "Ongoing",
    },
    {
        "id": "h3",
        "title": "AI Sprint",
        "description": "Machine learning challenge",
        "skills_required": ["python", "go"],
        "start_date": "2026-11-01T09:00:00",
        "end_date": "2026-11-03T18:00:00",
        "mode": "Hybrid",
        "status": "Upcoming",
        "prize_pool": "$5,000",
        "max_team_size": 4,
    },
    {
        "id": "h4",
        "title": "Open Theme",
        "description": "Anything goes",
        "skills_required": [],
        "start_date": "2026-11-10T09:00:00",
        "end_date": "2026-11-11T18:00:00",
        "mode": "Online",
        "status": "Upcoming",
    },
]


@pytest.fixture(autouse=True)
def reset_state():
    """Every test starts from an empty store and no trackers."""
    data_store.clear()
    enrollment_service.reset()
    yield
    data_store.clear()
    enrollment_service.reset()


@pytest.fixture
def seeded_store():
    """Store loaded with the sample profiles and hackathons."""
    for row in PROFILES:
        data_store.add_profile(row)
    for row in HACKATHONS:
        data_store.add_hackathon(row)
    return data_store


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_csv_files(tmp_path):
    """Create sample seed CSV files for testing."""
    profiles = pd.DataFrame({
        "id": ["001", "002", "003"],
        "name": ["Asha", "Ben", "Broken"],
        "education": ["Undergraduate", "PhD", "Kindergarten"],
        "skills": ["python,react", "go", "python"],
        "email": ["asha@example.com", None, None],
    })
    hackathons = pd.DataFrame({
        "id": ["h1", "h2", "h3"],
        "title": ["AI Sprint", "Web Jam", "Backwards"],
        "description": ["ML", "", "Ends before it starts"],
        "skills_required": ["python, machine-learning", "react", "go"],
        "start_date": ["2026-11-01T09:00:00", "2026-10-18T09:00:00", "2026-11-05T09:00:00"],
        "end_date": ["2026-11-03T18:00:00", "2026-10-22T18:00:00", "2026-11-01T09:00:00"],
        "mode": ["Online", "Hybrid", "Online"],
        "status": ["Upcoming", "Ongoing", "Upcoming"],
        "max_team_size": [4, None, 2],
    })
    enrollments = pd.DataFrame({
        "user_id": ["001", "001", "002"],
        "hackathon_id": ["h1", "h1", "missing"],
    })

    seed_dir = tmp_path / "seed"
    seed_dir.mkdir()
    profiles.to_csv(seed_dir / "profiles.csv", index=False)
    hackathons.to_csv(seed_dir / "hackathons.csv", index=False)
    enrollments.to_csv(seed_dir / "enrollments.csv", index=False)
    return seed_dir
