#!/usr/bin/env python3
"""
crates.io registry access: version resolution and crate search.
"""

from typing import List, Optional
from urllib.parse import quote

from .errors import InvalidArgumentError, TransportError, VersionResolutionError
from .models import LATEST, CrateSummary
from .scraper import DocsRsClient

SORT_OPTIONS = ("relevance", "downloads", "recent-downloads", "recent-updates", "new")
MAX_PER_PAGE = 100


async def resolve_version(client: DocsRsClient, crate_name: str, version: Optional[str] = None) -> str:
    """
    Turn a version token into a concrete version string.

    An explicit version is trusted and returned as is. ``None``, an empty
    string or ``"latest"`` are looked up on crates.io.

    Raises:
        VersionResolutionError: if the lookup fails or returns no version
    """
    if version and version != LATEST:
        return version

    url = f"{client.settings.registry_base_url}/crates/{quote(crate_name, safe='')}"
    try:
        data = await client.get_json(url)
    except TransportError as e:
        raise VersionResolutionError(
            f"Could not look up the latest version of {crate_name}: {e}", crate_name
        ) from e

    crate = data.get("crate") if isinstance(data, dict) else None
    resolved = None
    if isinstance(crate, dict):
        resolved = crate.get("newest_version") or crate.get("max_version")
    if not resolved:
        raise VersionResolutionError(f"crates.io returned no version for {crate_name}", crate_name)

    client.logger.info(
        "Resolved latest version",
        extra={'extra_data': {'crate': crate_name, 'version': resolved}}
    )
    return resolved


async def search_crates(client: DocsRsClient, query: str, per_page: int = 10,
                        sort: str = "relevance") -> List[CrateSummary]:
    """
    Run one crates.io search and return a single page of hits.

    ``per_page`` is capped at 100; lower values are passed through unchanged.
    """
    if sort not in SORT_OPTIONS:
        raise InvalidArgumentError(f"Unknown sort {sort!r}, expected one of: {', '.join(SORT_OPTIONS)}")

    params = {
        'q': query,
        'per_page': min(int(per_page), MAX_PER_PAGE),
        'sort': sort,
    }
    data = await client.get_json(f"{client.settings.registry_base_url}/crates", params=params)
    hits = (data.get("crates") if isinstance(data, dict) else None) or []

    client.logger.info(
        "Searched crates.io",
        extra={'extra_data': {'query': query, 'per_page': params['per_page'], 'sort': sort, 'hits': len(hits)}}
    )
    return [CrateSummary.from_registry(hit) for hit in hits]
