"""
autoindex - Run Index

CLI entry point for rendering one index outside the MCP server.
"""

import argparse
import asyncio
import json
import logging

from autoindex.config import get_settings
from autoindex.tools.render_index import build_index


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Render a wiki site index")
    parser.add_argument(
        "path",
        type=str,
        help="Page location, e.g. /en/docs",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Levels to include (default: from env)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of HTML",
    )

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log.level))

    result = asyncio.run(build_index(args.path, args.depth, settings))

    if args.json:
        print(json.dumps(result, indent=2))
    elif "error" in result:
        print(result["error"])
        raise SystemExit(1)
    else:
        print(result["html"])


if __name__ == "__main__":
    main()
