"""Tests for the JSON API."""

import pytest
from fastapi.testclient import TestClient

from cadence_lift.web import create_app


@pytest.fixture
def client(temp_data_dir):
    """API client against a fresh database."""
    with TestClient(create_app()) as client:
        yield client


def _create_profile(client, **overrides):
    body = {"name": "Robin", "goal": "strength", "available_equipment": ["dumbbell"]}
    body.update(overrides)
    response = client.post("/profiles", json=body)
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProfiles:
    """Tests for /profiles."""

    def test_create_and_get(self, client):
        created = _create_profile(client)
        assert created["id"] is not None
        assert created["goal"] == "strength"
        assert created["available_equipment"] == ["dumbbell"]

        response = client.get(f"/profiles/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Robin"

    def test_empty_equipment_means_bodyweight(self, client):
        created = _create_profile(client, available_equipment=[])
        assert created["available_equipment"] == ["bodyweight"]

    def test_list(self, client):
        _create_profile(client)
        _create_profile(client, name="Kim")
        names = [p["name"] for p in client.get("/profiles").json()]
        assert names == ["Robin", "Kim"]

    def test_out_of_range_rejected(self, client):
        response = client.post("/profiles", json={"name": "Robin", "training_days_per_week": 9})
        assert response.status_code == 422

    def test_patch(self, client):
        created = _create_profile(client)
        response = client.patch(
            f"/profiles/{created['id']}",
            json={"training_days_per_week": 5, "limitations": ["knee_pain"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["training_days_per_week"] == 5
        assert body["limitations"] == ["knee_pain"]
        assert body["goal"] == "strength"

    def test_missing_profile(self, client):
        response = client.get("/profiles/999")
        assert response.status_code == 404
        assert response.json()["error"] == "ProfileNotFound"

    def test_schedule(self, client):
        created = _create_profile(client, training_days_per_week=2)
        days = client.get(f"/profiles/{created['id']}/schedule").json()
        assert len(days) == 7
        assert sum(day["is_training_day"] for day in days) == 2


class TestExercises:
    def test_catalog_seeded(self, client):
        exercises = client.get("/exercises").json()
        assert any(ex["slug"] == "push-up" for ex in exercises)

    def test_filter_by_movement(self, client):
        exercises = client.get("/exercises", params={"movement_pattern": "core"}).json()
        assert exercises
        assert all(ex["movement_pattern"] == "core" for ex in exercises)


class TestSessions:
    """Tests for /sessions."""

    def test_generate_for_profile(self, client):
        profile = _create_profile(client)
        response = client.post(
            "/sessions/generate", json={"profile_id": profile["id"], "duration_min": 20}
        )
        assert response.status_code == 201
        session = response.json()
        assert session["profile_id"] == profile["id"]
        assert session["block_week"] == 1
        assert len(session["items"]) == 4

        fetched = client.get(f"/sessions/{session['id']}").json()
        assert fetched["items"] == session["items"]

    def test_generate_defaults_to_family_profile(self, client):
        response = client.post("/sessions/generate", json={})
        assert response.status_code == 201
        profiles = client.get("/profiles").json()
        assert [p["name"] for p in profiles] == ["Family"]
        assert response.json()["profile_id"] == profiles[0]["id"]

    def test_generate_saves_equipment_and_limitations(self, client):
        profile = _create_profile(client, available_equipment=[])
        response = client.post(
            "/sessions/generate",
            json={
                "profile_id": profile["id"],
                "available_equipment": ["dumbbell", "bench"],
                "limitations": ["knee_pain"],
            },
        )
        assert response.status_code == 201

        stored = client.get(f"/profiles/{profile['id']}").json()
        assert stored["available_equipment"] == ["dumbbell", "bench"]
        assert stored["limitations"] == ["knee_pain"]
        assert stored["goal"] == "strength"

    def test_generate_unknown_profile(self, client):
        response = client.post("/sessions/generate", json={"profile_id": 42})
        assert response.status_code == 404

    def test_generate_without_eligible_exercises(self, client):
        profile = _create_profile(
            client,
            available_equipment=[],
            excluded_exercises=[ex["slug"] for ex in client.get("/exercises").json()],
        )
        response = client.post("/sessions/generate", json={"profile_id": profile["id"]})
        assert response.status_code == 400
        assert response.json()["error"] == "NoEligibleExercises"

    def test_feedback(self, client):
        session = client.post("/sessions/generate", json={}).json()
        slug = session["items"][0]["exercise_slug"]
        response = client.post(
            f"/sessions/{session['id']}/feedback",
            json={
                "feedback": [
                    {
                        "exercise_slug": slug,
                        "avg_rpe": 7.5,
                        "completed_sets": 3,
                        "completed_reps": 30,
                        "difficulty": "just_right",
                    }
                ]
            },
        )
        assert response.status_code == 201
        assert response.json()["feedback"][0]["exercise_slug"] == slug

    def test_feedback_out_of_range(self, client):
        session = client.post("/sessions/generate", json={}).json()
        response = client.post(
            f"/sessions/{session['id']}/feedback",
            json={
                "feedback": [
                    {
                        "exercise_slug": "push-up",
                        "avg_rpe": 12,
                        "completed_sets": 3,
                        "completed_reps": 30,
                        "difficulty": "just_right",
                    }
                ]
            },
        )
        assert response.status_code == 422
        assert client.get(f"/sessions/{session['id']}").json()["feedback"] == []

    def test_feedback_unknown_session(self, client):
        response = client.post(
            "/sessions/77/feedback",
            json={
                "feedback": [
                    {
                        "exercise_slug": "push-up",
                        "avg_rpe": 7,
                        "completed_sets": 3,
                        "completed_reps": 30,
                        "difficulty": "too_easy",
                    }
                ]
            },
        )
        assert response.status_code == 404
        assert response.json()["error"] == "SessionNotFound"
