"""API tests for learner set endpoints and identity handling."""
import pytest
from fastapi.testclient import TestClient

from tests.conftest import auth_headers

API = "/api/v1"


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "healthy"}


def test_requests_without_identity_are_unauthenticated(client: TestClient):
    response = client.get(f"{API}/sets")

    assert response.status_code == 401
    assert response.json()["type"] == "AuthenticationError"


@pytest.mark.parametrize("header_value", ["not-a-number", "9999"])
def test_unknown_identity_is_unauthenticated(client: TestClient, header_value):
    response = client.get(f"{API}/sets", headers={"X-User-Id": header_value})

    assert response.status_code == 401


def test_register_and_me(client: TestClient):
    response = client.post(f"{API}/auth/register", json={"email": "New@Example.com", "name": "New"})
    assert response.status_code == 201
    user = response.json()["user"]
    assert user["email"] == "new@example.com"
    assert user["is_admin"] is False

    me = client.get(f"{API}/auth/me", headers={"X-User-Id": str(user["id"])})
    assert me.status_code == 200
    assert me.json()["name"] == "New"

    duplicate = client.post(f"{API}/auth/register", json={"email": "new@example.com"})
    assert duplicate.status_code == 409


def test_is_admin_never_fails(client: TestClient, admin_user, learner):
    assert client.get(f"{API}/auth/is-admin").json() is False
    assert client.get(f"{API}/auth/is-admin", headers=auth_headers(learner)).json() is False
    assert client.get(f"{API}/auth/is-admin", headers=auth_headers(admin_user)).json() is True


def test_dashboard_lists_only_assigned_sets(client: TestClient, learner, other_learner, card_set, assignment):
    response = client.get(f"{API}/sets", headers=auth_headers(learner))

    assert response.status_code == 200
    sets = response.json()["sets"]
    assert len(sets) == 1
    assert sets[0] == {
        "id": card_set.id,
        "name": "Capitals",
        "description": "European capitals",
        "total_cards": 5,
        "reviewed_cards": 0,
        "correct_cards": 0,
        "incorrect_cards": 0,
        "mastered_cards": 0,
        "progress": 0.0,
    }

    assert client.get(f"{API}/sets", headers=auth_headers(other_learner)).json()["sets"] == []


def test_unassigned_set_access_is_denied(client: TestClient, other_learner, card_set, cards, assignment):
    headers = auth_headers(other_learner)

    for response in (
        client.get(f"{API}/sets/{card_set.id}", headers=headers),
        client.get(f"{API}/sets/{card_set.id}/cards", headers=headers),
        client.post(f"{API}/sets/{card_set.id}/attempts", json={"card_id": cards[0].id, "correct": True}, headers=headers),
        client.post(f"{API}/sets/{card_set.id}/reset", headers=headers),
        client.post(f"{API}/sets/{card_set.id}/review-sessions", headers=headers),
    ):
        assert response.status_code == 403
        assert response.json()["type"] == "AccessDeniedError"


def test_get_set(client: TestClient, learner, card_set, assignment):
    response = client.get(f"{API}/sets/{card_set.id}", headers=auth_headers(learner))

    assert response.status_code == 200
    assert response.json()["name"] == "Capitals"


def test_end_to_end_mastery_through_the_api(client: TestClient, learner, card_set, cards, assignment):
    headers = auth_headers(learner)
    card_x = cards[1]

    for correct in (True, True, False):
        response = client.post(
            f"{API}/sets/{card_set.id}/attempts",
            json={"card_id": card_x.id, "correct": correct},
            headers=headers,
        )
        assert response.status_code == 201

    card_list = client.get(f"{API}/sets/{card_set.id}/cards", headers=headers).json()["cards"]
    assert [c["order"] for c in card_list] == [0, 1, 2, 3, 4]
    x = next(c for c in card_list if c["id"] == card_x.id)
    assert x["correct_count"] == 2
    assert x["incorrect_count"] == 1
    assert x["is_mastered"] is True
    assert x["has_been_reviewed"] is True
    assert x["last_result"] is False

    untouched = next(c for c in card_list if c["id"] == cards[0].id)
    assert untouched["has_been_reviewed"] is False
    assert untouched["last_result"] is None

    summary = client.get(f"{API}/sets", headers=headers).json()["sets"][0]
    assert summary["reviewed_cards"] == 1
    assert summary["correct_cards"] == 2
    assert summary["incorrect_cards"] == 1
    assert summary["mastered_cards"] == 1
    assert summary["progress"] == pytest.approx(20.0)


def test_attempt_for_unknown_card_is_not_found(client: TestClient, learner, card_set, assignment):
    response = client.post(
        f"{API}/sets/{card_set.id}/attempts",
        json={"card_id": 424242, "correct": True},
        headers=auth_headers(learner),
    )

    assert response.status_code == 404


def test_reset_progress(client: TestClient, learner, card_set, cards, assignment):
    headers = auth_headers(learner)
    for card in cards[:3]:
        client.post(f"{API}/sets/{card_set.id}/attempts", json={"card_id": card.id, "correct": True}, headers=headers)

    response = client.post(f"{API}/sets/{card_set.id}/reset", headers=headers)

    assert response.status_code == 200
    assert response.json()["attempts_deleted"] == 3
    summary = client.get(f"{API}/sets", headers=headers).json()["sets"][0]
    assert summary["reviewed_cards"] == 0
    assert summary["mastered_cards"] == 0
    card_list = client.get(f"{API}/sets/{card_set.id}/cards", headers=headers).json()["cards"]
    assert not any(c["is_mastered"] or c["has_been_reviewed"] for c in card_list)
