#!/usr/bin/env python3
"""
FastMCP server for Rust crate documentation.

This server provides tools to:
1. Search crates on crates.io
2. Read a crate's overview from docs.rs
3. Read the documentation of a single item (module, struct, trait, fn, ...)
4. Search the items of a crate by name and kind

Usage:
    python docsrs_server.py [stdio|sse|http]
"""

import sys

from fastmcp import FastMCP

from docsrs.config import Settings
from docsrs.logger import setup_logging
from docsrs_tools.crate_tools import register_crate_tools
from docsrs_tools.docs_tools import register_docs_tools

HOST = "127.0.0.1"
PORT = 8604


def create_server(settings: Settings, logger) -> FastMCP:
    """Build the FastMCP server with every tool registered."""
    mcp = FastMCP("docs-rs 🦀")
    register_crate_tools(mcp, settings, logger)
    register_docs_tools(mcp, settings, logger)
    return mcp


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    settings = Settings()
    logger = setup_logging(settings)
    mcp = create_server(settings, logger)

    logger.info(
        "docs.rs MCP server starting up",
        extra={'extra_data': {'docs_base_url': settings.docs_base_url, 'proxy': bool(settings.proxy)}}
    )

    transport = argv[0].lower() if argv else "stdio"

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{HOST}:{PORT}")
        mcp.run(transport="sse", host=HOST, port=PORT)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{HOST}:{PORT}/mcp")
        mcp.run(transport="http", host=HOST, port=PORT, path="/mcp")
    else:
        if transport != "stdio":
            # stdout belongs to the protocol
            print("Usage: python docsrs_server.py [stdio|sse|http]", file=sys.stderr)
        logger.info("Running with STDIO transport")
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
