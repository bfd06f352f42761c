"""
SocialGraph: an undirected friendship graph keyed by user label.

Usage:
    from socialnet.network.graph import SocialGraph

    graph = SocialGraph()
    graph.add_user("Alice")
    graph.add_user("Bob")
    graph.add_friendship("Alice", "Bob")
    graph.get_friends("Alice")   # {"Bob"}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from socialnet.config import DEFAULT_EDGE_WEIGHT
from socialnet.network.errors import SelfFriendshipError, UnknownUser

logger = logging.getLogger(__name__)


class SocialGraph:
    """
    Adjacency-set graph of users and friendships.

    Users are case-sensitive string labels. Friendships are undirected and
    always stored on both sides, so `b in friends(a)` iff `a in friends(b)`.
    A user exists once added, even with no friends. Nothing is ever removed.

    Attributes:
        _adj: Dict mapping each user label to the set of its friends
    """

    def __init__(self) -> None:
        self._adj: dict[str, set[str]] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_user(self, label: str) -> bool:
        """
        Add a user with no friends.

        Returns:
            True if the user was created, False if it already existed
        """
        if label in self._adj:
            return False
        self._adj[label] = set()
        logger.debug(f"User '{label}' added")
        return True

    def add_friendship(self, a: str, b: str) -> bool:
        """
        Connect two existing users.

        Args:
            a: First user label
            b: Second user label

        Returns:
            True if a new friendship was created, False if they were already friends

        Raises:
            UnknownUser: If either user does not exist (graph is left untouched)
            SelfFriendshipError: If a and b are the same user
        """
        UnknownUser.check(self, a, b)
        if a == b:
            raise SelfFriendshipError(a)

        if b in self._adj[a]:
            return False

        self._adj[a].add(b)
        self._adj[b].add(a)
        logger.debug(f"Friendship added between '{a}' and '{b}'")
        return True

    # =========================================================================
    # Lookup
    # =========================================================================

    def has_user(self, label: str) -> bool:
        """Check if user exists in the graph."""
        return label in self._adj

    def get_friends(self, label: str) -> set[str]:
        """
        Get the direct friends of a user.

        Returns a copy; an isolated user gives an empty set.

        Raises:
            UnknownUser: If the user does not exist
        """
        UnknownUser.check(self, label)
        return set(self._adj[label])

    def neighbors(self, label: str) -> list[str]:
        """Friends of a user in canonical (lexicographic) order."""
        UnknownUser.check(self, label)
        return sorted(self._adj[label])

    def edge_weight(self, a: str, b: str) -> int:
        """Cost of traversing the friendship a-b. Every friendship costs the same."""
        return DEFAULT_EDGE_WEIGHT

    def users(self) -> list[str]:
        """All user labels, sorted."""
        return sorted(self._adj)

    def friendship_count(self) -> int:
        """Number of undirected friendships."""
        return sum(len(friends) for friends in self._adj.values()) // 2

    # =========================================================================
    # Snapshot
    # =========================================================================

    def adjacency(self) -> dict[str, list[str]]:
        """Sorted snapshot of the whole graph: user -> sorted friend list."""
        return {label: sorted(self._adj[label]) for label in sorted(self._adj)}

    def stats(self) -> dict:
        """Get statistics about the graph."""
        return {
            "users": len(self._adj),
            "friendships": self.friendship_count(),
            "isolated_users": sum(1 for friends in self._adj.values() if not friends),
        }

    def __contains__(self, label: object) -> bool:
        return label in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self.users())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(users={len(self)}, friendships={self.friendship_count()})"
