"""
API tests for liveness and health endpoints.
"""


def test_root_is_plain_text(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Movie Master Pro Server is running"
    assert r.headers["content-type"].startswith("text/plain")


def test_health_reports_counts(client, store):
    store.users.insert_one({"email": "alice@example.com"})
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert data["users"] == 1
    assert data["movies"] == 0


def test_indexes_created_on_startup(client, store):
    assert "uniq_movies_movie_id" in store.movies.index_information()
    assert "uniq_watchlists_movie_user" in store.watchlists.index_information()
