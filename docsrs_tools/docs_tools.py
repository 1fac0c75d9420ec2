#!/usr/bin/env python3
"""
MCP tools for reading documentation from docs.rs.

This module provides MCP tool wrappers around the core documentation functionality.
"""

from typing import Optional

from fastmcp import FastMCP, Context

from docsrs.config import Settings
from docsrs.core import get_item_impl, get_readme_impl, search_in_crate_impl

from .common import run_tool


def register_docs_tools(mcp: FastMCP, settings: Settings, logger):
    """Register documentation related MCP tools."""

    @mcp.tool
    async def docs_rs_readme(crate_name: str, ctx: Context, version: str = "latest") -> str:
        """
        Get README/overview content of the specified crate.

        Args:
            crate_name: Name of the crate to get README for
            version: Specific version (optional, defaults to latest)

        Returns:
            The crate overview as markdown
        """
        return await run_tool(
            "docs_rs_readme",
            get_readme_impl(crate_name, settings, logger, ctx, version=version),
            logger,
        )

    @mcp.tool
    async def docs_rs_get_item(crate_name: str, item_type: str, item_path: str, ctx: Context,
                               version: str = "latest") -> str:
        """
        Get documentation content of a specific item (module, struct, trait, enum, function, etc.) within a crate.

        Args:
            crate_name: Name of the crate
            item_type: Type of item: 'module' for modules, 'struct', 'trait', 'enum', 'type', 'fn', etc.
            item_path: The full path of the item, including the module name (e.g. wasmtime::component::Component)
            version: Specific version (optional, defaults to latest)

        Returns:
            The item documentation as markdown, with its docs.rs URL
        """
        return await run_tool(
            "docs_rs_get_item",
            get_item_impl(crate_name, item_type, item_path, settings, logger, ctx, version=version),
            logger,
        )

    @mcp.tool
    async def docs_rs_search_in_crate(crate_name: str, query: str, ctx: Context, version: str = "latest",
                                      item_type: Optional[str] = None) -> str:
        """
        Search for traits, structs, methods, etc. from the crate's all.html page.
        To get a module, use docs_rs_get_item instead.

        Args:
            crate_name: Name of the crate to search
            query: Search keyword (trait name, struct name, function name, etc.)
            version: Specific version (optional, defaults to latest)
            item_type: Filter by item type (struct | trait | function | enum | type | constant | static | macro)

        Returns:
            Markdown list of matching items with links
        """
        return await run_tool(
            "docs_rs_search_in_crate",
            search_in_crate_impl(crate_name, query, settings, logger, ctx, version=version, item_type=item_type),
            logger,
        )
