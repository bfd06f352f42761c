"""
Tests for the Flask JSON API.
"""

import pytest

from socialnet.api import create_app


@pytest.fixture
def client(guarded_graph):
    """Test client serving the reference network."""
    app = create_app(guarded_graph)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def empty_client():
    """Test client serving an empty network."""
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


class TestNetwork:
    """Test network-level routes."""

    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}

    def test_network_snapshot(self, client):
        """Snapshot includes stats and sorted adjacency."""
        body = client.get("/network").get_json()
        assert body["stats"] == {"users": 8, "friendships": 8, "isolated_users": 1}
        assert body["adjacency"]["Alice"] == ["Bob", "Charlie"]
        assert body["adjacency"]["Grace"] == []

    def test_empty_network(self, empty_client):
        body = empty_client.get("/network").get_json()
        assert body["adjacency"] == {}


class TestMutation:
    """Test POST routes."""

    def test_add_user(self, empty_client):
        """New user is created, repeat is a no-op."""
        resp = empty_client.post("/users", json={"label": "Alice"})
        assert resp.status_code == 201
        assert resp.get_json() == {"label": "Alice", "created": True}

        resp = empty_client.post("/users", json={"label": "Alice"})
        assert resp.get_json()["created"] is False

    def test_add_user_missing_label(self, empty_client):
        resp = empty_client.post("/users", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "bad_request"

    def test_add_user_non_object_body(self, empty_client):
        resp = empty_client.post("/users", json=["Alice"])
        assert resp.status_code == 400

    def test_add_friendship(self, client):
        """Friendship is visible from both sides afterwards."""
        resp = client.post("/friendships", json={"a": "Grace", "b": "Heidi"})
        assert resp.status_code == 201
        assert resp.get_json()["created"] is True
        assert client.get("/users/Heidi/friends").get_json()["friends"] == ["Frank", "Grace"]

    def test_add_friendship_unknown_user(self, client):
        resp = client.post("/friendships", json={"a": "Nobody", "b": "Zed"})
        assert resp.status_code == 404
        body = resp.get_json()
        assert body["error"] == "unknown_user"
        assert body["labels"] == ["Nobody", "Zed"]

    def test_add_self_friendship(self, client):
        resp = client.post("/friendships", json={"a": "Alice", "b": "Alice"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "self_friendship"


class TestQueries:
    """Test query routes."""

    def test_friends(self, client):
        body = client.get("/users/Charlie/friends").get_json()
        assert body == {"label": "Charlie", "friends": ["Alice", "David", "Eve"]}

    def test_friends_unknown(self, client):
        resp = client.get("/users/Nobody/friends")
        assert resp.status_code == 404
        assert resp.get_json()["labels"] == ["Nobody"]

    def test_mutual(self, client):
        body = client.get("/users/Alice/mutual/David").get_json()
        assert body["mutual_friends"] == ["Bob", "Charlie"]

    def test_suggestions(self, client):
        body = client.get("/users/Alice/suggestions").get_json()
        assert body["suggestions"] == [
            {"label": "David", "score": 2},
            {"label": "Eve", "score": 1},
        ]

    def test_suggestions_limit(self, client):
        body = client.get("/users/Alice/suggestions?limit=1").get_json()
        assert body["suggestions"] == [{"label": "David", "score": 2}]

    @pytest.mark.parametrize("limit", ["abc", "-1"])
    def test_suggestions_bad_limit(self, client, limit):
        resp = client.get(f"/users/Alice/suggestions?limit={limit}")
        assert resp.status_code == 400


class TestPaths:
    """Test /paths."""

    def test_bfs_default(self, client):
        body = client.get("/paths?start=Bob&end=Heidi").get_json()
        assert body["algorithm"] == "bfs"
        assert body["found"] is True
        assert body["distance"] == 4
        assert body["path"] == ["Bob", "David", "Eve", "Frank", "Heidi"]

    def test_dijkstra(self, client):
        body = client.get("/paths?start=Alice&end=Heidi&algorithm=dijkstra").get_json()
        assert body["distance"] == 4
        assert body["path"] == ["Alice", "Charlie", "Eve", "Frank", "Heidi"]

    def test_no_path(self, client):
        """Disconnected users are a 200 with found=false."""
        resp = client.get("/paths?start=Alice&end=Grace")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["found"] is False
        assert body["distance"] == -1
        assert body["path"] == []

    def test_unknown_user(self, client):
        resp = client.get("/paths?start=Alice&end=Nobody")
        assert resp.status_code == 404

    def test_unknown_algorithm(self, client):
        resp = client.get("/paths?start=Alice&end=Bob&algorithm=astar")
        assert resp.status_code == 400

    def test_missing_params(self, client):
        resp = client.get("/paths?start=Alice")
        assert resp.status_code == 400
