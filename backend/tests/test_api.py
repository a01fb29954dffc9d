import uuid

import pytest

from app.services.readiness_scoring import QUESTIONS


def _register(client, **fields):
    response = client.post("/api/v1/profiles", json=fields)
    assert response.status_code == 201
    return response.json()["id"]


def _take_quiz(client, user_id, value=5):
    answers = {str(q.id): value for q in QUESTIONS}
    return client.post("/api/v1/quiz", json={"answers": answers}, headers={"X-User-Id": user_id})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_question_bank(client):
    body = client.get("/api/v1/quiz/questions").json()
    assert len(body["questions"]) == 40
    assert [o["value"] for o in body["options"]] == [1, 2, 3, 4, 5]


def test_register_and_read_profile(client):
    user_id = _register(client, display_name="Alice", city="Austin")

    body = client.get(f"/api/v1/profiles/{user_id}").json()
    assert body["display_name"] == "Alice"
    assert body["has_completed_quiz"] is False
    assert body["readiness_score"] is None


def test_duplicate_registration_conflicts(client):
    user_id = str(uuid.uuid4())
    _register(client, id=user_id)
    response = client.post("/api/v1/profiles", json={"id": user_id})
    assert response.status_code == 409


def test_unknown_profile_is_404(client):
    assert client.get(f"/api/v1/profiles/{uuid.uuid4()}").status_code == 404


def test_quiz_submission_is_scored_and_persisted(client):
    user_id = _register(client)

    response = _take_quiz(client, user_id, value=1)
    assert response.status_code == 200
    body = response.json()
    assert body["readiness_score"] == 2
    assert body["readiness_label"] == "Uncertain"
    assert body["dimension_scores"]["boundaries"] == 2
    assert len(body["insights"]["strengths"]) == 2

    profile = client.get(f"/api/v1/profiles/{user_id}").json()
    assert profile["has_completed_quiz"] is True
    assert profile["readiness_score"] == 2
    assert profile["dimension_scores"]["emotional"] == 2


def test_quiz_rejects_unknown_question(client):
    user_id = _register(client)
    response = client.post(
        "/api/v1/quiz",
        json={"answers": {"41": 3}},
        headers={"X-User-Id": user_id},
    )
    assert response.status_code == 422


def test_identity_is_required(client):
    assert client.get("/api/v1/matches").status_code == 401
    assert client.get("/api/v1/matches", headers={"X-User-Id": str(uuid.uuid4())}).status_code == 401


def test_swiping_requires_completed_quiz(client):
    alice = _register(client)
    bob = _register(client)
    response = client.post(f"/api/v1/swipes/{bob}/right", headers={"X-User-Id": alice})
    assert response.status_code == 409


def test_mutual_likes_form_one_match(client):
    alice = _register(client, display_name="Alice")
    bob = _register(client, display_name="Bob")
    _take_quiz(client, alice)
    _take_quiz(client, bob)

    candidates = client.get("/api/v1/candidates", headers={"X-User-Id": alice}).json()
    assert bob in [c["id"] for c in candidates]

    first = client.post(f"/api/v1/swipes/{bob}/right", headers={"X-User-Id": alice}).json()
    assert first == {"matched": False, "is_new": False, "match": None}

    second = client.post(f"/api/v1/swipes/{alice}/right", headers={"X-User-Id": bob}).json()
    assert second["matched"] is True
    assert second["is_new"] is True
    assert {second["match"]["user_a_id"], second["match"]["user_b_id"]} == {alice, bob}

    matches = client.get("/api/v1/matches", headers={"X-User-Id": alice}).json()
    assert len(matches) == 1
    assert matches[0]["id"] == second["match"]["id"]
    assert matches[0]["other_user"]["display_name"] == "Bob"

    # Liked profiles drop out of the candidate feed
    candidates = client.get("/api/v1/candidates", headers={"X-User-Id": alice}).json()
    assert bob not in [c["id"] for c in candidates]


def test_swipe_left_and_invalid_targets(client):
    alice = _register(client)
    bob = _register(client)
    _take_quiz(client, alice)

    left = client.post(f"/api/v1/swipes/{bob}/left", headers={"X-User-Id": alice}).json()
    assert left == {"matched": False, "is_new": False, "match": None}

    assert client.post(f"/api/v1/swipes/{alice}/right", headers={"X-User-Id": alice}).status_code == 400
    assert client.post(f"/api/v1/swipes/{uuid.uuid4()}/right", headers={"X-User-Id": alice}).status_code == 404


@pytest.mark.parametrize("response", [True, "4", 5.0])
def test_quiz_rejects_non_integer_responses(client, response):
    user_id = _register(client)
    result = client.post(
        "/api/v1/quiz",
        json={"answers": {"1": response}},
        headers={"X-User-Id": user_id},
    )
    assert result.status_code == 422

    profile = client.get(f"/api/v1/profiles/{user_id}").json()
    assert profile["has_completed_quiz"] is False
