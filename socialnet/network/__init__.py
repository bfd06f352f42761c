"""
Social network module.

Provides the friendship graph and the queries that run on it:
- SocialGraph: Adjacency structure with add/lookup operations
- mutual_friends / suggest_friends: Friend-of-friend queries
- shortest_path_bfs / shortest_path_dijkstra: Connection paths
- GuardedGraph: Reader/writer locked wrapper for shared use

Usage:
    from socialnet.network import SocialGraph, shortest_path_bfs

    graph = SocialGraph()
    graph.add_user("Alice")
    graph.add_user("Bob")
    graph.add_friendship("Alice", "Bob")
    shortest_path_bfs(graph, "Alice", "Bob")
"""

from socialnet.network.errors import SelfFriendshipError, UnknownUser
from socialnet.network.graph import SocialGraph
from socialnet.network.guarded import GuardedGraph, ReadWriteLock
from socialnet.network.paths import (
    NO_PATH,
    PathResult,
    shortest_path_bfs,
    shortest_path_dijkstra,
)
from socialnet.network.queries import mutual_friends, suggest_friends
from socialnet.network.sample import build_sample_network

__all__ = [
    "SocialGraph",
    "GuardedGraph",
    "ReadWriteLock",
    "UnknownUser",
    "SelfFriendshipError",
    "PathResult",
    "NO_PATH",
    "mutual_friends",
    "suggest_friends",
    "shortest_path_bfs",
    "shortest_path_dijkstra",
    "build_sample_network",
]
