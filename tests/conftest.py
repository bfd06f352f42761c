"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from socialnet.network import GuardedGraph, SocialGraph, build_sample_network


@pytest.fixture
def empty_graph() -> SocialGraph:
    """Return a graph with no users."""
    return SocialGraph()


@pytest.fixture
def sample_graph() -> SocialGraph:
    """
    Return the reference network.

    Alice-Bob, Alice-Charlie, Bob-David, Charlie-David, Charlie-Eve,
    David-Eve, Eve-Frank, Frank-Heidi; Grace isolated.
    """
    return build_sample_network()


@pytest.fixture
def guarded_graph(sample_graph: SocialGraph) -> GuardedGraph:
    """Return the reference network behind a read/write lock."""
    return GuardedGraph(sample_graph)
