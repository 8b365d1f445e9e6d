"""
API tests for user endpoints.

Uses FastAPI TestClient against an app wired to an in-memory store.
"""

from conftest import ALICE


class TestUserEndpoints:
    """Tests for POST /users, GET /users/{email}, GET /users."""

    def test_create_user(self, client, store):
        """POST /users inserts the body and returns the acknowledgement."""
        payload = {"email": ALICE, "name": "Alice", "image": "https://img.example.com/a.png"}
        r = client.post("/users", json=payload)
        assert r.status_code == 200
        data = r.json()
        assert data["acknowledged"] is True
        assert len(data["insertedId"]) == 24
        stored = store.users.find_one({"email": ALICE})
        assert stored["name"] == "Alice"

    def test_create_user_keeps_extra_fields(self, client, store):
        r = client.post("/users", json={"email": ALICE, "role": "member"})
        assert r.status_code == 200
        assert store.users.find_one({"email": ALICE})["role"] == "member"

    def test_create_user_twice_is_idempotent(self, client, store):
        """A second POST with the same email inserts nothing."""
        client.post("/users", json={"email": ALICE, "name": "Alice"})
        r = client.post("/users", json={"email": ALICE, "name": "Someone else"})
        assert r.status_code == 200
        assert "already exists" in r.json()["message"]
        assert store.users.count_documents({"email": ALICE}) == 1
        assert store.users.find_one({"email": ALICE})["name"] == "Alice"

    def test_create_user_requires_email(self, client, store):
        r = client.post("/users", json={"name": "No Email"})
        assert r.status_code == 400
        assert r.json() == {"message": "Email is required"}
        assert store.users.count_documents({}) == 0

    def test_get_user_profile(self, client, alice_headers):
        """GET /users/{email} returns only image and name for the caller."""
        client.post("/users", json={"email": ALICE, "name": "Alice", "image": "a.png"})
        r = client.get(f"/users/{ALICE}", headers=alice_headers)
        assert r.status_code == 200
        assert r.json() == {"image": "a.png", "name": "Alice"}

    def test_get_user_requires_token(self, client):
        r = client.get(f"/users/{ALICE}")
        assert r.status_code == 401
        assert r.json() == {"message": "unauthorized access"}

    def test_get_user_rejects_unknown_token(self, client):
        r = client.get(f"/users/{ALICE}", headers={"Authorization": "Bearer forged"})
        assert r.status_code == 401

    def test_get_other_user_forbidden(self, client, bob_headers):
        client.post("/users", json={"email": ALICE, "name": "Alice"})
        r = client.get(f"/users/{ALICE}", headers=bob_headers)
        assert r.status_code == 403

    def test_get_user_not_found(self, client, alice_headers):
        r = client.get(f"/users/{ALICE}", headers=alice_headers)
        assert r.status_code == 404
        assert r.json()["message"] == "User not found"

    def test_list_users(self, client):
        client.post("/users", json={"email": ALICE})
        client.post("/users", json={"email": "carol@example.com"})
        r = client.get("/users")
        assert r.status_code == 200
        emails = sorted(u["email"] for u in r.json())
        assert emails == [ALICE, "carol@example.com"]
        assert all("_id" in u for u in r.json())
