"""
Configuration constants for the social network graph.

All settings and tunable parameters are defined here.
Runtime overrides are read from environment variables.
"""

import os

# =============================================================================
# Graph Configuration
# =============================================================================

# Every friendship costs one hop
DEFAULT_EDGE_WEIGHT = 1

# Distance reported when two users are not connected
NO_PATH_DISTANCE = -1

# =============================================================================
# Suggestion Configuration
# =============================================================================

# Max suggestions returned by the API when no ?limit= is given (None = all)
DEFAULT_SUGGESTION_LIMIT = None

# =============================================================================
# API Configuration
# =============================================================================

API_HOST = os.environ.get("HOST", "127.0.0.1")
# Parsed by scripts/serve.py so a bad PORT never breaks importing the core
API_PORT = os.environ.get("PORT", "7860")

# Path algorithms selectable via /paths?algorithm=
PATH_ALGORITHMS = ("bfs", "dijkstra")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
