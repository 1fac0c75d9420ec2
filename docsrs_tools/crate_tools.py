#!/usr/bin/env python3
"""
MCP tools for crates.io registry operations.

This module provides MCP tool wrappers around the core registry functionality.
"""

from fastmcp import FastMCP, Context

from docsrs.config import Settings
from docsrs.core import search_crates_impl

from .common import run_tool


def register_crate_tools(mcp: FastMCP, settings: Settings, logger):
    """Register crates.io related MCP tools."""

    @mcp.tool
    async def docs_rs_search_crates(query: str, ctx: Context, per_page: int = 10, sort: str = "relevance") -> str:
        """
        Search for Rust crates by keywords on crates.io.

        Args:
            query: Search keywords for finding relevant crates. Keywords should be in English.
            per_page: Number of results per page (default: 10, max: 100)
            sort: Sort order: 'relevance', 'downloads', 'recent-downloads', 'recent-updates', 'new' (default: relevance)

        Returns:
            Markdown list of matching crates
        """
        return await run_tool(
            "docs_rs_search_crates",
            search_crates_impl(query, settings, logger, ctx, per_page=per_page, sort=sort),
            logger,
        )
