"""
Social Network Graph.

An in-memory friendship graph that answers relationship queries:
direct friends, mutual friends, friend-of-friend suggestions and
shortest connection paths (BFS and Dijkstra).
"""

__version__ = "0.1.0"
