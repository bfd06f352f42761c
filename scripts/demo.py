#!/usr/bin/env python3
"""
Social Network demo - seed the reference network and run every query.

Usage:
    python scripts/demo.py
    python scripts/demo.py --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from socialnet.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from socialnet.network import (  # noqa: E402
    PathResult,
    SocialGraph,
    UnknownUser,
    build_sample_network,
    mutual_friends,
    shortest_path_bfs,
    shortest_path_dijkstra,
    suggest_friends,
)


def format_set(labels) -> str:
    """Format labels as {'A', 'B'} in sorted order."""
    return "{" + ", ".join(f"'{label}'" for label in sorted(labels)) + "}"


def describe_network(graph: SocialGraph) -> list[str]:
    """One line per user listing their friends."""
    adjacency = graph.adjacency()
    if not adjacency:
        return ["The network is empty."]
    return [
        f"'{label}' is friends with: {format_set(friends)}"
        for label, friends in adjacency.items()
    ]


def print_path(algorithm: str, start: str, end: str, result: PathResult) -> None:
    print(f"Shortest path ({algorithm}) from '{start}' to '{end}':")
    if result.found:
        print(f"  Distance: {result.distance} connections")
        print("  Path: " + " -> ".join(f"'{label}'" for label in result.path))
    else:
        print(f"  No path found between '{start}' and '{end}'.")


def run_path(algorithm: str, graph: SocialGraph, start: str, end: str) -> None:
    search = shortest_path_dijkstra if algorithm == "Dijkstra" else shortest_path_bfs
    try:
        result = search(graph, start, end)
    except UnknownUser as e:
        print(f"Shortest path ({algorithm}) from '{start}' to '{end}':")
        print(f"  Error: {e}")
        return
    print_path(algorithm, start, end, result)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the social network demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    print("--- Social Network Simulation ---")
    graph = build_sample_network()

    print("\n--- Social Network Graph ---")
    for line in describe_network(graph):
        print(line)

    print("\n--- Testing: Get Friends ---")
    for label in ("Charlie", "Grace"):
        print(f"'{label}'s friends: {format_set(graph.get_friends(label))}")

    print("\n--- Testing: Mutual Friends ---")
    for a, b in (("Alice", "David"), ("Bob", "Eve"), ("Alice", "Nobody")):
        try:
            mutual = mutual_friends(graph, a, b)
        except UnknownUser as e:
            print(f"Error: {e}")
            continue
        print(f"Mutual friends between '{a}' and '{b}': {format_set(mutual)}")

    print("\n--- Testing: Suggest Friends ---")
    for label in ("Alice", "Bob", "Frank"):
        print(f"Friend suggestions for '{label}':")
        suggestions = suggest_friends(graph, label)
        if not suggestions:
            print("  None.")
        for name, score in suggestions:
            print(f"  - '{name}' (via {score} connection(s))")

    print("\n--- Testing: Shortest Path (BFS) ---")
    for start, end in (("Alice", "Eve"), ("Bob", "Heidi"), ("Alice", "Grace"), ("Alice", "Nobody")):
        run_path("BFS", graph, start, end)

    print("\n--- Testing: Shortest Path (Dijkstra) ---")
    for start, end in (("Alice", "Heidi"), ("Grace", "Alice"), ("Bob", "Nobody")):
        run_path("Dijkstra", graph, start, end)

    print("\n--- Testing Complete ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
