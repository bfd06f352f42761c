"""
Thread-safe access to a shared SocialGraph.

SocialGraph itself is unsynchronised. When several threads share one graph
(e.g. the Flask API), wrap it in GuardedGraph: mutations hold the write
lock exclusively, queries share the read lock, so a traversal never sees
a friendship that is only stored on one side.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from socialnet.network.graph import SocialGraph
from socialnet.network.paths import PathResult, WeightFn, shortest_path_bfs, shortest_path_dijkstra
from socialnet.network.queries import mutual_friends, suggest_friends

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many readers or one writer.

    Once a writer is waiting, new readers block until it has finished,
    so a steady stream of queries cannot starve mutations.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class GuardedGraph:
    """
    SocialGraph wrapper that serialises mutations against queries.

    Exposes the same operations as the core API; every call takes the
    appropriate side of a ReadWriteLock for its whole duration.
    """

    def __init__(self, graph: SocialGraph | None = None) -> None:
        self._graph = graph if graph is not None else SocialGraph()
        self._lock = ReadWriteLock()

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    # Writes

    def add_user(self, label: str) -> bool:
        with self._lock.write():
            return self._graph.add_user(label)

    def add_friendship(self, a: str, b: str) -> bool:
        with self._lock.write():
            return self._graph.add_friendship(a, b)

    # Reads

    def has_user(self, label: str) -> bool:
        with self._lock.read():
            return self._graph.has_user(label)

    def get_friends(self, label: str) -> set[str]:
        with self._lock.read():
            return self._graph.get_friends(label)

    def mutual_friends(self, a: str, b: str) -> set[str]:
        with self._lock.read():
            return mutual_friends(self._graph, a, b)

    def suggest_friends(self, label: str, limit: int | None = None) -> list[tuple[str, int]]:
        with self._lock.read():
            return suggest_friends(self._graph, label, limit=limit)

    def shortest_path_bfs(self, start: str, end: str) -> PathResult:
        with self._lock.read():
            return shortest_path_bfs(self._graph, start, end)

    def shortest_path_dijkstra(
        self, start: str, end: str, weight: WeightFn | None = None
    ) -> PathResult:
        with self._lock.read():
            return shortest_path_dijkstra(self._graph, start, end, weight=weight)

    def adjacency(self) -> dict[str, list[str]]:
        with self._lock.read():
            return self._graph.adjacency()

    def stats(self) -> dict:
        with self._lock.read():
            return self._graph.stats()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._graph)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._graph!r})"
