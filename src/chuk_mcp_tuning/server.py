#!/usr/bin/env python3
"""
Entry point for the CHUK Tuning MCP Server.

Serves the tuning tools over stdio or http. Project tuning definitions
are read from ./tunings unless --tunings-dir points elsewhere:

    chuk-mcp-tuning --transport http --port 8010 --tunings-dir ~/tunings
    chuk-mcp-tuning --list-tunings
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Tuning MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tunings-dir",
        type=Path,
        default=None,
        help="Directory of project tuning definitions (default: ./tunings)",
    )
    parser.add_argument(
        "--list-tunings",
        action="store_true",
        help="Print the available tunings and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Parse options, configure the tuning catalog and run the server."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so the server is built with logging configured
    from chuk_mcp_tuning.async_server import mcp, tuning_loader, use_tunings_dir

    if args.tunings_dir is not None:
        use_tunings_dir(args.tunings_dir.expanduser())

    if args.list_tunings:
        for tuning in tuning_loader.list_tunings():
            references = ", ".join(tuning.references)
            print(f"{tuning.name:<28} {tuning.family.value:<12} {references}")
        return

    if args.transport == "stdio":
        logger.info("Starting CHUK Tuning MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tuning MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
