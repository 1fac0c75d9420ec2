#!/usr/bin/env python3
"""
Core business logic for the docs.rs MCP server.

This module contains the implementation of every tool. These functions
have no MCP registration code, making them reusable and testable. Each
one opens its own HTTP session and shares nothing with other calls.
"""

from typing import List, Optional

from bs4 import BeautifulSoup
from fastmcp import Context

from .classifier import ItemClassifier
from .config import Settings
from .errors import DocsRsError
from .extractor import ITEM, OVERVIEW, extract_content
from .markdown import html_to_markdown
from .models import LATEST, CrateSummary, DocumentFragment, ItemRecord, ResolutionRequest
from .registry import resolve_version, search_crates
from .scraper import DocsRsClient
from .urls import CandidateUrls, crate_docs_base


def format_crate_results(query: str, crates: List[CrateSummary]) -> str:
    sections = [
        f"## {crate.name} ({crate.version})\n\n"
        f"**Description:** {crate.description}\n\n"
        f"**Downloads:** {crate.downloads:,}\n\n"
        f"**Documentation:** {crate.documentation or 'N/A'}\n\n---\n"
        for crate in crates
    ]
    body = "\n".join(sections) if sections else "No crates found."
    return f"# Crate Search Results for \"{query}\"\n\n{body}"


def format_item_results(search_term: str, crate_name: str, items: List[ItemRecord]) -> str:
    header = f"# Search Results for \"{search_term}\" in {crate_name}\n\nFound {len(items)} items\n\n"
    if not items:
        return header + "No matching items found."
    return header + "\n".join(
        f"## {item.name} ({item.kind.value})\n\n"
        f"**Description:** {item.kind.value}\n\n"
        f"**Link:** [View Documentation]({item.link})\n\n---\n"
        for item in items
    )


async def _fail(error: DocsRsError, context: str, message: str, logger, ctx: Optional[Context], extra: dict):
    if ctx:
        await ctx.error(f"{context}: {error}")
    logger.error(message, exc_info=True, extra={'extra_data': extra})
    return error.with_context(context)


async def search_crates_impl(query: str, settings: Settings, logger, ctx: Optional[Context] = None,
                             per_page: int = 10, sort: str = "relevance") -> str:
    """
    Core implementation for searching crates on crates.io.

    Args:
        query: Search keywords
        settings: Server settings
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback
        per_page: Number of results (capped at 100)
        sort: One of relevance, downloads, recent-downloads, recent-updates, new

    Returns:
        Markdown list of matching crates
    """
    if ctx:
        await ctx.info(f"Searching crates.io for \"{query}\"")
    try:
        async with DocsRsClient(settings, logger) as client:
            crates = await search_crates(client, query, per_page, sort)
    except DocsRsError as e:
        raise await _fail(e, "Failed to search crates", "Crate search failed", logger, ctx,
                          {'query': query, 'per_page': per_page, 'sort': sort}) from e

    return format_crate_results(query, crates)


async def get_readme_impl(crate_name: str, settings: Settings, logger, ctx: Optional[Context] = None,
                          version: Optional[str] = LATEST) -> str:
    """
    Core implementation for fetching the overview page of a crate.

    Returns:
        Markdown overview, or a placeholder naming the fetched URL if the page had no content

    Raises:
        VersionResolutionError, DocumentNotFoundError, TransportError
    """
    try:
        request = ResolutionRequest(crate_name=crate_name.strip(), version=version)
        async with DocsRsClient(settings, logger) as client:
            resolved = await resolve_version(client, request.crate_name, request.version)
            if ctx:
                await ctx.info(f"Fetching overview for {request.crate_name} {resolved}")
            url, html = await client.fetch_first(
                CandidateUrls.overview(request.crate_name, resolved), request.crate_name, resolved, ctx
            )
    except DocsRsError as e:
        raise await _fail(e, f"Failed to get README for {crate_name}", "Overview fetch failed", logger, ctx,
                          {'crate': crate_name, 'version': version}) from e

    fragment = DocumentFragment(extract_content(html, OVERVIEW), url)
    title = f"# {request.crate_name} Documentation\n\n"
    if not fragment.html:
        logger.warning("No overview content found", extra={'extra_data': {'crate': request.crate_name, 'url': url}})
        return f"{title}No documentation content found at {fragment.source_url}"

    return title + html_to_markdown(fragment.html)


async def get_item_impl(crate_name: str, item_type: str, item_path: str, settings: Settings, logger,
                        ctx: Optional[Context] = None, version: Optional[str] = LATEST) -> str:
    """
    Core implementation for fetching the documentation of one item.

    Args:
        crate_name: Name of the crate
        item_type: rustdoc page kind, e.g. "struct", "fn", or "module"
        item_path: Full item path, e.g. "wasmtime::component::Component"
        settings: Server settings
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback
        version: Version or "latest"

    Returns:
        Markdown documentation with its source URL
    """
    try:
        request = ResolutionRequest(
            crate_name=crate_name.strip(), version=version, item_path=item_path, item_kind=(item_type or "").strip()
        )
        async with DocsRsClient(settings, logger) as client:
            resolved = await resolve_version(client, request.crate_name, request.version)
            if ctx:
                await ctx.info(f"Fetching {request.item_kind} {request.item_path} from {request.crate_name} {resolved}")
            candidates = CandidateUrls.item(request.crate_name, resolved, request.item_kind, request.item_path)
            url, html = await client.fetch_first(candidates, request.crate_name, resolved, ctx)
    except DocsRsError as e:
        raise await _fail(e, f"Failed to get item documentation for {item_path}", "Item fetch failed", logger, ctx,
                          {'crate': crate_name, 'item_type': item_type, 'item_path': item_path, 'version': version}) from e

    fragment = DocumentFragment(extract_content(html, ITEM), url)
    title = f"# {item_path} ({item_type})\n\n"
    if not fragment.html:
        logger.warning("No item content found", extra={'extra_data': {'item_path': item_path, 'url': url}})
        return f"{title}No documentation content found at {fragment.source_url}"

    return f"{title}**Documentation URL:** {fragment.source_url}\n\n{html_to_markdown(fragment.html)}"


async def search_in_crate_impl(crate_name: str, query: str, settings: Settings, logger,
                               ctx: Optional[Context] = None, version: Optional[str] = LATEST,
                               item_type: Optional[str] = None) -> str:
    """
    Core implementation for searching items on a crate's all-items page.

    Returns:
        Markdown list of matching items with links to their pages
    """
    try:
        request = ResolutionRequest(crate_name=crate_name.strip(), version=version, query=query, kind_filter=item_type)
        async with DocsRsClient(settings, logger) as client:
            resolved = await resolve_version(client, request.crate_name, request.version)
            if ctx:
                await ctx.info(f"Scanning all items of {request.crate_name} {resolved}")
            _, html = await client.fetch_first(
                CandidateUrls.all_items(request.crate_name, resolved), request.crate_name, resolved, ctx
            )
    except DocsRsError as e:
        raise await _fail(e, f"Failed to search items in {crate_name}", "Item search failed", logger, ctx,
                          {'crate': crate_name, 'query': query, 'item_type': item_type, 'version': version}) from e

    soup = BeautifulSoup(html, 'html.parser')
    base_url = crate_docs_base(settings.docs_base_url, request.crate_name, resolved)
    items = ItemClassifier.scan(soup, base_url, request.query, request.kind_filter)

    logger.info(
        "Searched crate items",
        extra={'extra_data': {'crate': request.crate_name, 'version': resolved, 'query': query, 'matches': len(items)}}
    )
    return format_item_results(query or "all items", request.crate_name, items)
