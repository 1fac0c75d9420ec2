"""Tests for crates.io version resolution and search."""

import aiohttp
import pytest

from docsrs.errors import InvalidArgumentError, TransportError, VersionResolutionError
from docsrs.models import NO_DESCRIPTION
from docsrs.registry import resolve_version, search_crates
from docsrs.scraper import DocsRsClient

CRATE_URL = "https://crates.io/api/v1/crates/tokio"
SEARCH_URL = "https://crates.io/api/v1/crates"


@pytest.mark.asyncio
@pytest.mark.parametrize("version", ["1.38.0", "0.1.0-alpha"])
async def test_explicit_version_skips_network(fake_http, settings, logger, version):
    async with DocsRsClient(settings, logger) as client:
        assert await resolve_version(client, "tokio", version) == version
    assert fake_http.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("version", [None, "", "latest"])
async def test_latest_is_looked_up(fake_http, settings, logger, version):
    fake_http.add(CRATE_URL, body={"crate": {"name": "tokio", "newest_version": "1.38.0", "max_version": "1.38.0"}})

    async with DocsRsClient(settings, logger) as client:
        assert await resolve_version(client, "tokio", version) == "1.38.0"
    assert fake_http.urls == [CRATE_URL]


@pytest.mark.asyncio
async def test_max_version_fallback(fake_http, settings, logger):
    fake_http.add(CRATE_URL, body={"crate": {"max_version": "1.0.0"}})

    async with DocsRsClient(settings, logger) as client:
        assert await resolve_version(client, "tokio") == "1.0.0"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"crate": {}}, {"crate": {"newest_version": None}}, []])
async def test_missing_version_field(fake_http, settings, logger, body):
    fake_http.add(CRATE_URL, body=body)

    async with DocsRsClient(settings, logger) as client:
        with pytest.raises(VersionResolutionError) as excinfo:
            await resolve_version(client, "tokio", "latest")

    assert excinfo.value.crate_name == "tokio"
    assert "tokio" in str(excinfo.value)


@pytest.mark.asyncio
async def test_registry_failure_is_chained(fake_http, settings, logger):
    fake_http.add(CRATE_URL, error=aiohttp.ClientConnectionError("dns"))

    async with DocsRsClient(settings, logger) as client:
        with pytest.raises(VersionResolutionError) as excinfo:
            await resolve_version(client, "tokio")

    assert isinstance(excinfo.value.__cause__, TransportError)


@pytest.mark.asyncio
async def test_search_maps_hits(fake_http, settings, logger):
    fake_http.add(SEARCH_URL, body={"crates": [
        {"name": "tokio", "description": "Async runtime", "downloads": 1234567,
         "newest_version": "1.38.0", "documentation": "https://docs.rs/tokio"},
        {"name": "smol", "description": None, "downloads": 10, "newest_version": "2.0.0", "documentation": None},
    ]})

    async with DocsRsClient(settings, logger) as client:
        crates = await search_crates(client, "async runtime")

    assert [crate.name for crate in crates] == ["tokio", "smol"]
    assert crates[1].description == NO_DESCRIPTION
    assert fake_http.requests[0]['params'] == {'q': "async runtime", 'per_page': 10, 'sort': "relevance"}


@pytest.mark.asyncio
async def test_search_clamps_page_size(fake_http, settings, logger):
    fake_http.add(SEARCH_URL, body={"crates": []})

    async with DocsRsClient(settings, logger) as client:
        assert await search_crates(client, "async runtime", per_page=150) == []

    assert fake_http.requests[0]['params']['per_page'] == 100


@pytest.mark.asyncio
async def test_search_rejects_unknown_sort(fake_http, settings, logger):
    async with DocsRsClient(settings, logger) as client:
        with pytest.raises(InvalidArgumentError):
            await search_crates(client, "serde", sort="stars")
    assert fake_http.requests == []
