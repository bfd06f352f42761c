#!/usr/bin/env python3
"""
Serve the social network JSON API.

Usage:
    python scripts/serve.py
    python scripts/serve.py --port 8000 --empty
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

from socialnet import config  # noqa: E402
from socialnet.api import create_app  # noqa: E402
from socialnet.network import GuardedGraph, SocialGraph, build_sample_network  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Serve the social network API")
    parser.add_argument(
        "--host",
        type=str,
        default=config.API_HOST,
        help=f"Interface to bind (default: {config.API_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.API_PORT,
        help=f"Port to listen on (default: {config.API_PORT})",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start with an empty network instead of the sample one",
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

    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(level=log_level, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)

    graph = SocialGraph() if args.empty else build_sample_network()
    logger.info(f"Serving {graph!r}")

    app = create_app(GuardedGraph(graph))
    print("\n=== Social Network API ===")
    print(f"Open http://{args.host}:{args.port}/network in your browser\n")

    # threaded=True: concurrent requests share the graph through its read/write lock
    app.run(host=args.host, port=args.port, debug=False, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
