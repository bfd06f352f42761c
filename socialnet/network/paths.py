"""
Shortest connection paths between two users.

Two algorithms:
- shortest_path_bfs: Level-order search, optimal when every friendship costs 1
- shortest_path_dijkstra: Priority-queue relaxation, optimal for any
  non-negative edge weight

Both expand neighbors in lexicographic order and stop as soon as the target
is reached, so ties between equal-length paths resolve the same way each run.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from socialnet.config import NO_PATH_DISTANCE
from socialnet.network.errors import UnknownUser

if TYPE_CHECKING:
    from socialnet.network.graph import SocialGraph

logger = logging.getLogger(__name__)

WeightFn = Callable[[str, str], float]


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a path query.

    Attributes:
        distance: Total path cost, or NO_PATH_DISTANCE if unreachable
        path: Users from start to end inclusive (empty if unreachable)
    """

    distance: int | float
    path: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether the two users are connected."""
        return self.distance != NO_PATH_DISTANCE

    @property
    def hops(self) -> int:
        """Number of friendships crossed (0 if unreachable)."""
        return max(len(self.path) - 1, 0)


# Comparison value for disconnected users; searches return a fresh copy
NO_PATH = PathResult(NO_PATH_DISTANCE, [])


def _walk_parents(parent: dict[str, str | None], end: str, limit: int) -> list[str]:
    """
    Rebuild a path by following parent pointers back from end.

    Stops at the first node without a parent, or after `limit` nodes if
    the parent data contains a cycle.
    """
    path = []
    current: str | None = end
    while current is not None and len(path) < limit:
        path.append(current)
        current = parent.get(current)
    path.reverse()
    return path


def shortest_path_bfs(graph: SocialGraph, start: str, end: str) -> PathResult:
    """
    Find the shortest path by breadth-first search.

    Returns:
        PathResult with hop count and path, or NO_PATH if not connected

    Raises:
        UnknownUser: If start or end does not exist
    """
    UnknownUser.check(graph, start, end)

    if start == end:
        return PathResult(0, [start])

    dist = {label: NO_PATH_DISTANCE for label in graph.users()}
    parent: dict[str, str | None] = {start: None}
    dist[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()

        for neighbor in graph.neighbors(current):
            if dist[neighbor] != NO_PATH_DISTANCE:
                continue

            dist[neighbor] = dist[current] + 1
            parent[neighbor] = current

            if neighbor == end:
                path = _walk_parents(parent, end, len(graph))
                logger.debug(f"BFS: {start} -> {end} in {dist[end]} hop(s)")
                return PathResult(dist[end], path)

            queue.append(neighbor)

    logger.debug(f"BFS: No path found between '{start}' and '{end}'")
    return PathResult(NO_PATH_DISTANCE, [])


def shortest_path_dijkstra(
    graph: SocialGraph,
    start: str,
    end: str,
    weight: WeightFn | None = None,
) -> PathResult:
    """
    Find the cheapest path with Dijkstra's algorithm.

    Stale heap entries are skipped rather than removed (lazy deletion).
    Heap entries are (distance, label), so equal distances pop in label order.

    Args:
        graph: Graph to search
        start: Starting user
        end: Target user
        weight: Edge cost function (u, v) -> cost, defaults to graph.edge_weight

    Returns:
        PathResult with total cost and path, or NO_PATH if not connected

    Raises:
        UnknownUser: If start or end does not exist
        ValueError: If an edge has negative weight
    """
    UnknownUser.check(graph, start, end)

    if start == end:
        return PathResult(0, [start])

    if weight is None:
        weight = graph.edge_weight

    dist = {label: math.inf for label in graph.users()}
    parent: dict[str, str | None] = {start: None}
    dist[start] = 0
    heap = [(0, start)]

    while heap:
        d, u = heapq.heappop(heap)

        if d > dist[u]:
            continue

        if u == end:
            path = _walk_parents(parent, end, len(graph))
            logger.debug(f"Dijkstra: {start} -> {end} cost {d}")
            return PathResult(d, path)

        for v in graph.neighbors(u):
            w = weight(u, v)
            if w < 0:
                raise ValueError(f"Negative weight {w} on friendship '{u}'-'{v}'")

            candidate = d + w
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(heap, (candidate, v))

    logger.debug(f"Dijkstra: No path found between '{start}' and '{end}'")
    return PathResult(NO_PATH_DISTANCE, [])
