#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging

from chuk_mcp_pitch.constants import DEFAULT_HTTP_PORT, DEFAULT_TRANSPORT

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Pitch MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=DEFAULT_TRANSPORT,
        help=f"Transport mode (default: {DEFAULT_TRANSPORT})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_pitch.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Pitch MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Pitch MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
