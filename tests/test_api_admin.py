"""API tests for admin endpoints."""
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from flashdrill.models import Flashcard
from tests.conftest import auth_headers

API = "/api/v1"


def test_admin_endpoints_reject_non_admins(client: TestClient, learner, card_set):
    headers = auth_headers(learner)

    responses = [
        client.get(f"{API}/admin/sets", headers=headers),
        client.get(f"{API}/admin/users", headers=headers),
        client.post(f"{API}/admin/sets", json={"name": "x", "description": "", "cards": [{"question": "q", "answer": "a"}]}, headers=headers),
        client.put(f"{API}/admin/sets/{card_set.id}", json={"name": "x", "description": ""}, headers=headers),
        client.post(f"{API}/admin/assignments", json={"user_id": learner.id, "set_id": card_set.id}, headers=headers),
        client.delete(f"{API}/admin/assignments", params={"user_id": learner.id, "set_id": card_set.id}, headers=headers),
        client.get(f"{API}/admin/sets/{card_set.id}/assignments", headers=headers),
    ]

    for response in responses:
        assert response.status_code == 403
        assert response.json()["type"] == "AuthorizationError"


def test_admin_endpoints_require_identity(client: TestClient):
    assert client.get(f"{API}/admin/sets").status_code == 401


def test_create_set_orders_cards_by_position(client: TestClient, session: Session, admin_user):
    payload = {
        "name": "  Verbs ",
        "description": "Irregular verbs",
        "cards": [
            {"question": "go", "answer": "went", "hint": "past"},
            {"question": "see", "answer": "saw"},
            {"question": "be", "answer": "was"},
        ],
    }

    response = client.post(f"{API}/admin/sets", json=payload, headers=auth_headers(admin_user))

    assert response.status_code == 201
    body = response.json()
    assert body["card_count"] == 3
    assert body["set"]["name"] == "Verbs"
    assert body["set"]["created_by"] == admin_user.id

    created = session.exec(
        select(Flashcard).where(Flashcard.set_id == body["set"]["id"]).order_by(Flashcard.order)
    ).all()
    assert [(c.question, c.order, c.hint) for c in created] == [("go", 0, "past"), ("see", 1, None), ("be", 2, None)]


def test_create_set_without_cards_is_rejected(client: TestClient, admin_user):
    response = client.post(
        f"{API}/admin/sets",
        json={"name": "Empty", "description": "", "cards": []},
        headers=auth_headers(admin_user),
    )

    assert response.status_code == 400
    assert response.json()["type"] == "ValidationError"


def test_upload_csv_creates_set(client: TestClient, admin_user):
    csv_text = 'Question,Answer,Hint\nCapital of France?,Paris,"City of light"\n"2, 3 or 4?",4,\n'

    response = client.post(
        f"{API}/admin/sets/upload",
        data={"name": "Mixed", "description": "From CSV"},
        files={"file": ("cards.csv", csv_text.encode("utf-8"), "text/csv")},
        headers=auth_headers(admin_user),
    )

    assert response.status_code == 201
    assert response.json()["card_count"] == 2


def test_upload_csv_without_rows_is_rejected(client: TestClient, admin_user):
    response = client.post(
        f"{API}/admin/sets/upload",
        data={"name": "Broken", "description": ""},
        files={"file": ("cards.csv", b"Question,Answer\n", "text/csv")},
        headers=auth_headers(admin_user),
    )

    assert response.status_code == 400
    assert "No valid flashcards" in response.json()["detail"]


def test_update_set(client: TestClient, admin_user, card_set):
    response = client.put(
        f"{API}/admin/sets/{card_set.id}",
        json={"name": "Capitals of Europe", "description": "Updated"},
        headers=auth_headers(admin_user),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Capitals of Europe"
    assert response.json()["description"] == "Updated"

    missing = client.put(f"{API}/admin/sets/9999", json={"name": "x", "description": ""}, headers=auth_headers(admin_user))
    assert missing.status_code == 404


def test_assignment_lifecycle(client: TestClient, admin_user, learner, card_set):
    headers = auth_headers(admin_user)
    body = {"user_id": learner.id, "set_id": card_set.id}

    assert client.post(f"{API}/admin/assignments", json=body, headers=headers).status_code == 201
    duplicate = client.post(f"{API}/admin/assignments", json=body, headers=headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["type"] == "ConflictError"

    assignments = client.get(f"{API}/admin/sets/{card_set.id}/assignments", headers=headers).json()["assignments"]
    assert assignments == [{"user_id": learner.id, "email": "learner@example.com", "name": "Learner"}]

    # The learner can now see the set
    assert len(client.get(f"{API}/sets", headers=auth_headers(learner)).json()["sets"]) == 1

    removed = client.delete(f"{API}/admin/assignments", params=body, headers=headers)
    assert removed.json() == {"removed": True}
    again = client.delete(f"{API}/admin/assignments", params=body, headers=headers)
    assert again.status_code == 200
    assert again.json() == {"removed": False}

    assert client.get(f"{API}/sets/{card_set.id}", headers=auth_headers(learner)).status_code == 403


def test_assign_unknown_user_or_set(client: TestClient, admin_user, learner, card_set):
    headers = auth_headers(admin_user)

    assert client.post(f"{API}/admin/assignments", json={"user_id": 9999, "set_id": card_set.id}, headers=headers).status_code == 404
    assert client.post(f"{API}/admin/assignments", json={"user_id": learner.id, "set_id": 9999}, headers=headers).status_code == 404


def test_list_sets_and_users(client: TestClient, admin_user, learner, card_set, assignment):
    headers = auth_headers(admin_user)

    sets = client.get(f"{API}/admin/sets", headers=headers).json()["sets"]
    assert len(sets) == 1
    assert sets[0]["card_count"] == 5
    assert sets[0]["assigned_users"] == 1

    users = client.get(f"{API}/admin/users", headers=headers).json()["users"]
    assert {u["email"] for u in users} == {"admin@example.com", "learner@example.com"}
