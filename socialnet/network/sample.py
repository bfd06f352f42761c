"""
Reference network used by the demo, the API server and the tests.

    Alice - Bob       Charlie - Eve     Frank - Heidi
    Alice - Charlie   David - Eve
    Bob - David       Eve - Frank
    Charlie - David
    Grace: no friends
"""

from __future__ import annotations

from socialnet.network.graph import SocialGraph

SAMPLE_USERS = [
    "Alice",
    "Bob",
    "Charlie",
    "David",
    "Eve",
    "Frank",
    "Grace",
    "Heidi",
]

SAMPLE_FRIENDSHIPS = [
    ("Alice", "Bob"),
    ("Alice", "Charlie"),
    ("Bob", "David"),
    ("Charlie", "David"),
    ("Charlie", "Eve"),
    ("David", "Eve"),
    ("Eve", "Frank"),
    ("Frank", "Heidi"),
]


def build_sample_network(graph: SocialGraph | None = None) -> SocialGraph:
    """Seed `graph` (or a new one) with the reference users and friendships."""
    if graph is None:
        graph = SocialGraph()
    for label in SAMPLE_USERS:
        graph.add_user(label)
    for a, b in SAMPLE_FRIENDSHIPS:
        graph.add_friendship(a, b)
    return graph
