"""
Flask JSON API over a shared social graph.

Routes:
- GET  /health
- GET  /network
- POST /users                         {"label": ...}
- POST /friendships                   {"a": ..., "b": ...}
- GET  /users/<label>/friends
- GET  /users/<a>/mutual/<b>
- GET  /users/<label>/suggestions?limit=N
- GET  /paths?start=&end=&algorithm=bfs|dijkstra
"""

from __future__ import annotations

import logging

from flask import Flask, current_app, jsonify, request

from socialnet.config import DEFAULT_SUGGESTION_LIMIT, PATH_ALGORITHMS
from socialnet.network import GuardedGraph, SelfFriendshipError, UnknownUser

logger = logging.getLogger(__name__)


class InvalidRequest(ValueError):
    """Malformed request body or query string."""


def _graph() -> GuardedGraph:
    return current_app.config["GRAPH"]


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return payload


def _require_str(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidRequest(f"'{key}' must be a non-empty string")
    return value


def create_app(graph: GuardedGraph | None = None) -> Flask:
    """
    Build the Flask app.

    Args:
        graph: Shared graph to serve (a new empty one if None)
    """
    app = Flask(__name__)
    app.config["GRAPH"] = graph if graph is not None else GuardedGraph()

    # ====================
    # Error Handlers
    # ====================

    @app.errorhandler(UnknownUser)
    def handle_unknown_user(e: UnknownUser):
        return jsonify({"error": "unknown_user", "labels": list(e.labels), "message": str(e)}), 404

    @app.errorhandler(SelfFriendshipError)
    def handle_self_friendship(e: SelfFriendshipError):
        return jsonify({"error": "self_friendship", "message": str(e)}), 400

    @app.errorhandler(InvalidRequest)
    def handle_bad_request(e: InvalidRequest):
        return jsonify({"error": "bad_request", "message": str(e)}), 400

    # ====================
    # Network
    # ====================

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/network")
    def network():
        """Whole graph snapshot plus counts."""
        graph = _graph()
        return jsonify({"stats": graph.stats(), "adjacency": graph.adjacency()})

    @app.route("/users", methods=["POST"])
    def add_user():
        payload = _json_body()
        label = _require_str(payload, "label")
        created = _graph().add_user(label)
        if created:
            logger.info(f"User '{label}' added")
        return jsonify({"label": label, "created": created}), 201

    @app.route("/friendships", methods=["POST"])
    def add_friendship():
        payload = _json_body()
        a = _require_str(payload, "a")
        b = _require_str(payload, "b")
        created = _graph().add_friendship(a, b)
        if created:
            logger.info(f"Friendship added between '{a}' and '{b}'")
        return jsonify({"a": a, "b": b, "created": created}), 201

    # ====================
    # Queries
    # ====================

    @app.route("/users/<label>/friends")
    def friends(label: str):
        return jsonify({"label": label, "friends": sorted(_graph().get_friends(label))})

    @app.route("/users/<a>/mutual/<b>")
    def mutual(a: str, b: str):
        return jsonify({"a": a, "b": b, "mutual_friends": sorted(_graph().mutual_friends(a, b))})

    @app.route("/users/<label>/suggestions")
    def suggestions(label: str):
        """Friend-of-friend suggestions, best first."""
        limit = DEFAULT_SUGGESTION_LIMIT
        raw_limit = request.args.get("limit")
        if raw_limit is not None:
            try:
                limit = int(raw_limit)
            except ValueError:
                raise InvalidRequest("'limit' must be an integer") from None
            if limit < 0:
                raise InvalidRequest("'limit' must be >= 0")

        ranked = _graph().suggest_friends(label, limit=limit)
        return jsonify({
            "label": label,
            "suggestions": [{"label": name, "score": score} for name, score in ranked],
        })

    @app.route("/paths")
    def paths():
        """Shortest path between ?start= and ?end=."""
        start = _require_str(request.args, "start")
        end = _require_str(request.args, "end")
        algorithm = request.args.get("algorithm", "bfs")
        if algorithm not in PATH_ALGORITHMS:
            raise InvalidRequest(f"Unknown algorithm '{algorithm}'. Available: {', '.join(PATH_ALGORITHMS)}")

        graph = _graph()
        if algorithm == "dijkstra":
            result = graph.shortest_path_dijkstra(start, end)
        else:
            result = graph.shortest_path_bfs(start, end)

        return jsonify({
            "start": start,
            "end": end,
            "algorithm": algorithm,
            "found": result.found,
            "distance": result.distance,
            "path": result.path,
        })

    return app
