"""
Tests for the hackathon listing endpoint.
"""
import pandas as pd

from backend.utils.common import load_seed_directory


class TestListHackathons:

    def test_lists_by_start_date(self, client, seeded_store):
        response = client.get("/api/hackathons")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [h["id"] for h in data["hackathons"]] == ["h1", "h2", "h3", "h4"]
        assert all(h["is_enrolled"] is False for h in data["hackathons"])

    def test_marks_enrollment_for_user(self, client, seeded_store):
        seeded_store.insert_enrollment("u1", "h3")

        response = client.get("/api/hackathons", params={"user_id": "u1"})

        flags = {h["id"]: h["is_enrolled"] for h in response.json()["hackathons"]}
        assert flags == {"h1": False, "h2": False, "h3": True, "h4": False}

    def test_filters(self, client, seeded_store):
        response = client.get("/api/hackathons", params={"status": "Upcoming", "skill": "python"})
        assert [h["id"] for h in response.json()["hackathons"]] == ["h3"]

        response = client.get("/api/hackathons", params={"q": "frontend"})
        assert [h["id"] for h in response.json()["hackathons"]] == ["h2"]

        response = client.get("/api/hackathons", params={"mode": "Hybrid"})
        assert [h["id"] for h in response.json()["hackathons"]] == ["h3"]

    def test_unknown_status_is_422(self, client, seeded_store):
        response = client.get("/api/hackathons", params={"status": "Cancelled"})
        assert response.status_code == 422

    def test_empty_store(self, client):
        response = client.get("/api/hackathons")
        assert response.status_code == 200
        assert response.json() == {"success": True, "hackathons": [], "total": 0}


class TestSeededFromCsv:

    def test_numeric_prize_pool_is_served_as_text(self, client, sample_csv_files):
        pd.DataFrame({
            "id": ["h1", "h5"],
            "title": ["AI Sprint", "Data Cup"],
            "skills_required": ["python", "python"],
            "start_date": ["2026-11-01T09:00:00", "2026-11-10T09:00:00"],
            "end_date": ["2026-11-03T18:00:00Z", "2026-11-12T18:00:00Z"],
            "mode": ["Online", "Offline"],
            "status": ["Upcoming", "Upcoming"],
            "prize_pool": [5000, 7500],
        }).to_csv(sample_csv_files / "hackathons.csv", index=False)
        load_seed_directory(sample_csv_files)

        response = client.get("/api/hackathons")
        assert response.status_code == 200
        prizes = [h["prize_pool"] for h in response.json()["hackathons"]]
        assert prizes == ["5000", "7500"]

        response = client.post("/api/recommend", json={"user_id": "001"})
        assert response.status_code == 200
        recommendations = response.json()["recommendations"]
        assert [r["hackathon"]["prize_pool"] for r in recommendations] == ["7500"]

        response = client.get("/api/dashboard/001")
        assert response.status_code == 200
        assert response.json()["enrolled"][0]["prize_pool"] == "5000"
