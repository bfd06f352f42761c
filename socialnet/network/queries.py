"""
Friend queries: mutual friends and friend-of-friend suggestions.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from socialnet.network.errors import UnknownUser

if TYPE_CHECKING:
    from socialnet.network.graph import SocialGraph

logger = logging.getLogger(__name__)


def mutual_friends(graph: SocialGraph, a: str, b: str) -> set[str]:
    """
    Find users who are friends with both a and b.

    Raises:
        UnknownUser: If either user does not exist
    """
    UnknownUser.check(graph, a, b)
    return graph.get_friends(a) & graph.get_friends(b)


def suggest_friends(
    graph: SocialGraph, label: str, limit: int | None = None
) -> list[tuple[str, int]]:
    """
    Suggest friends-of-friends ranked by number of shared connections.

    A candidate's score is how many of the user's friends also know them.
    The user and their existing friends are never suggested.

    Args:
        graph: Graph to query
        label: User to suggest friends for
        limit: Keep only the top N suggestions (None = all, must be >= 0)

    Returns:
        List of (label, score) tuples, sorted by score descending then label ascending

    Raises:
        UnknownUser: If the user does not exist
        ValueError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    direct = graph.get_friends(label)

    counts: Counter[str] = Counter()
    for friend in direct:
        for candidate in graph.get_friends(friend):
            if candidate == label or candidate in direct:
                continue
            counts[candidate] += 1

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    logger.debug(f"{len(ranked)} suggestion(s) for '{label}'")

    if limit is not None:
        ranked = ranked[:limit]
    return ranked
