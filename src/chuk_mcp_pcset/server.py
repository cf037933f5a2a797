#!/usr/bin/env python3
"""
Command-line entry point for the pitch-class set MCP server.

Runs the server over stdio (default) or HTTP. Named set classes are read
from the packaged library plus a project directory, ./set_classes unless
--set-classes points elsewhere.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-pcset",
        description="Pitch-class set analysis over MCP",
    )
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
        "--set-classes",
        type=Path,
        default=None,
        metavar="DIR",
        help="Project set-class directory (default: ./set_classes)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse options, configure the catalogue and run the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Tools register on import; the level above must already be set
    from chuk_mcp_pcset.async_server import catalog, mcp

    if args.set_classes is not None:
        catalog.set_project_path(args.set_classes.expanduser())
    logger.info(f"Project set classes: {catalog.project_path}")

    if args.transport == "stdio":
        logger.info("Serving pitch-class set tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Serving pitch-class set tools over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
