"""
API tests for review endpoints.
"""

from datetime import datetime, timedelta

from bson import ObjectId

from conftest import ALICE, BOB


class TestReviewEndpoints:
    """Tests for GET /reviews/{movieId} and POST /reviews."""

    def test_submit_review(self, client, store, alice_headers):
        movie_id = str(ObjectId())
        payload = {"movieId": movie_id, "userEmail": ALICE, "comment": "Loved it", "rating": "4"}
        r = client.post("/reviews", json=payload, headers=alice_headers)
        assert r.status_code == 200
        data = r.json()
        assert data["acknowledged"] is True
        stored = store.reviews.find_one({"_id": ObjectId(data["insertedId"])})
        assert stored["movieId"] == ObjectId(movie_id)
        assert stored["rating"] == 4.0
        assert stored["userEmail"] == ALICE
        assert isinstance(stored["createdAt"], datetime)

    def test_submit_review_email_mismatch(self, client, store, bob_headers):
        payload = {"movieId": str(ObjectId()), "userEmail": ALICE, "comment": "Spoof", "rating": 1}
        r = client.post("/reviews", json=payload, headers=bob_headers)
        assert r.status_code == 403
        assert r.json() == {"message": "Unauthorized: Email mismatch"}
        assert store.reviews.count_documents({}) == 0

    def test_submit_review_missing_field(self, client, alice_headers):
        payload = {"movieId": str(ObjectId()), "userEmail": ALICE, "rating": 5}
        r = client.post("/reviews", json=payload, headers=alice_headers)
        assert r.status_code == 400
        assert r.json() == {"message": "All fields are required"}

    def test_submit_review_invalid_movie_id(self, client, alice_headers):
        payload = {"movieId": "abc", "userEmail": ALICE, "comment": "Nice", "rating": 5}
        r = client.post("/reviews", json=payload, headers=alice_headers)
        assert r.status_code == 400
        assert r.json() == {"message": "Invalid movie ID format"}

    def test_submit_review_requires_token(self, client):
        payload = {"movieId": str(ObjectId()), "userEmail": ALICE, "comment": "Nice", "rating": 5}
        assert client.post("/reviews", json=payload).status_code == 401

    def test_get_reviews_newest_first(self, client, store):
        movie_id = ObjectId()
        now = datetime(2025, 1, 1, 12, 0, 0)
        store.reviews.insert_many([
            {"movieId": movie_id, "userEmail": ALICE, "comment": "old", "rating": 3.0,
             "createdAt": now - timedelta(days=2)},
            {"movieId": movie_id, "userEmail": BOB, "comment": "new", "rating": 5.0,
             "createdAt": now},
            {"movieId": ObjectId(), "userEmail": BOB, "comment": "other movie", "rating": 1.0,
             "createdAt": now},
        ])
        r = client.get(f"/reviews/{movie_id}")
        assert r.status_code == 200
        reviews = r.json()
        assert [rv["comment"] for rv in reviews] == ["new", "old"]
        assert reviews[0]["movieId"] == str(movie_id)

    def test_get_reviews_empty(self, client):
        r = client.get(f"/reviews/{ObjectId()}")
        assert r.status_code == 200
        assert r.json() == []

    def test_get_reviews_invalid_id(self, client):
        r = client.get("/reviews/not-an-id")
        assert r.status_code == 400
        assert r.json() == {"message": "Invalid movie ID format"}
