"""
Shared fixtures for the matching core tests.
"""

from datetime import datetime

import pytest

from tests.factories import make_hackathon, make_profile


@pytest.fixture
def hackathon_factory():
    return make_hackathon


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def sample_hackathons():
    """A listing in fetch (start date) order covering every status."""
    return [
        make_hackathon("h1", ["python", "go"], start="2026-10-01", end="2026-10-02", status="Completed"),
        make_hackathon("h2", ["react", "typescript"], start="2026-10-20", end="2026-10-22", status="Ongoing"),
        make_hackathon("h3", ["python", "machine-learning"], start="2026-11-01", end="2026-11-03"),
        make_hackathon("h4", ["rust"], start="2026-11-05", end="2026-11-06"),
        make_hackathon("h5", [], start="2026-11-10", end="2026-11-11"),
        make_hackathon("h6", ["python"], start="2026-11-12", end="2026-11-13", mode="Hybrid"),
    ]


@pytest.fixture
def sample_profiles():
    return [
        make_profile("u1", ["python", "react", "go"], name="Asha"),
        make_profile("u2", ["python"], name="Ben", education="Postgraduate"),
        make_profile("u3", ["java", "rust"], name="Chen"),
        make_profile("u4", [], name="Dana"),
        make_profile("u5", ["react", "python", "flutter", "cloud"], name="Eli", education="PhD"),
    ]


@pytest.fixture
def fixed_today():
    return datetime(2026, 11, 2).date()
