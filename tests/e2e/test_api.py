"""End-to-end tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from threads.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def create_user(client: TestClient, external_id: str, username: str) -> dict:
    response = client.put(
        f"/users/{external_id}",
        json={"username": username, "name": username.title(), "path": "/onboarding"},
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["consistency_mode"] == "best_effort"


class TestThreadEndpoints:
    """End-to-end tests for thread endpoints."""

    def test_post_reply_read_and_delete(self, client):
        """Full thread lifecycle over HTTP."""
        # Arrange
        alice = create_user(client, "ext-alice", "Alice")
        bob = create_user(client, "ext-bob", "bob")

        # Act - post and reply
        created = client.post(
            "/threads", json={"text": "Hello world", "author_id": alice["user_id"]}
        )
        assert created.status_code == 201
        thread_id = created.json()["thread_id"]

        reply = client.post(
            f"/threads/{thread_id}/comments",
            json={
                "text": "Hi Alice",
                "author_id": bob["user_id"],
                "path": f"/thread/{thread_id}",
            },
        )
        assert reply.status_code == 201

        # Assert - feed and detail
        feed = client.get("/threads").json()
        assert [p["id"] for p in feed["posts"]] == [thread_id]
        assert feed["has_next"] is False
        assert feed["posts"][0]["children"][0]["text"] == "Hi Alice"

        detail = client.get(f"/threads/{thread_id}")
        assert detail.status_code == 200
        assert detail.json()["thread"]["author"]["external_id"] == "ext-alice"

        activity = client.get(f"/activity/{alice['user_id']}").json()
        assert [r["text"] for r in activity["replies"]] == ["Hi Alice"]

        # Act - delete
        deleted = client.delete(f"/threads/{thread_id}", params={"path": "/"})

        # Assert
        assert deleted.status_code == 200
        assert deleted.json()["deleted"] == 2
        assert client.get(f"/threads/{thread_id}").status_code == 404
        assert client.get("/users/ext-bob/threads").json()["threads"] == []

    def test_comment_on_missing_thread_is_404(self, client):
        alice = create_user(client, "ext-alice", "alice")

        response = client.post(
            f"/threads/{uuid4()}/comments",
            json={"text": "Hi", "author_id": alice["user_id"], "path": "/"},
        )

        assert response.status_code == 404

    def test_delete_missing_thread_is_404(self, client):
        assert client.delete(f"/threads/{uuid4()}").status_code == 404

    def test_unknown_author_is_503(self, client):
        """Store rejects threads whose author does not exist."""
        response = client.post(
            "/threads", json={"text": "Hello", "author_id": str(uuid4())}
        )

        assert response.status_code == 503
        assert response.json()["detail"].startswith("failed creating thread")

    def test_empty_text_is_422(self, client):
        alice = create_user(client, "ext-alice", "alice")

        response = client.post("/threads", json={"text": "", "author_id": alice["user_id"]})

        assert response.status_code == 422

    def test_feed_rejects_page_zero(self, client):
        assert client.get("/threads", params={"page": 0}).status_code == 422


class TestUserEndpoints:
    """End-to-end tests for user endpoints."""

    def test_upsert_is_idempotent(self, client):
        first = create_user(client, "ext-alice", "Alice")
        second = create_user(client, "ext-alice", "Alice")

        assert first == second
        assert first["username"] == "alice"

    def test_get_profile(self, client):
        create_user(client, "ext-alice", "alice")

        response = client.get("/users/ext-alice")

        assert response.status_code == 200
        assert response.json()["onboarded"] is True

    def test_get_missing_profile_is_404(self, client):
        assert client.get("/users/ghost").status_code == 404
        assert client.get("/users/ghost/threads").status_code == 404

    def test_search_excludes_requester(self, client):
        create_user(client, "ext-alice", "alice")
        create_user(client, "ext-bob", "bob")
        create_user(client, "ext-carol", "carol")

        response = client.get(
            "/users", params={"requesting_user_id": "ext-alice", "search": "o"}
        )

        assert response.status_code == 200
        assert sorted(u["username"] for u in response.json()["users"]) == [
            "bob",
            "carol",
        ]

    def test_taken_username_is_503(self, client):
        create_user(client, "ext-alice", "alice")

        response = client.put(
            "/users/ext-other",
            json={"username": "ALICE", "name": "Other", "path": "/onboarding"},
        )

        assert response.status_code == 503
