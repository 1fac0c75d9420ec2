"""Pytest configuration and fixtures."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from docsrs.config import Settings


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, url, status=200, body="", error=None, final_url=None):
        self.url = final_url or url
        self.status = status
        self._body = body
        self._error = error

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False

    async def text(self, encoding=None, errors="strict"):
        # bytes bodies are decoded like aiohttp does for charset=utf-8
        if isinstance(self._body, bytes):
            return self._body.decode(encoding or "utf-8", errors)
        return self._body

    async def json(self):
        if isinstance(self._body, (str, bytes)):
            return json.loads(await self.text())
        return self._body


class FakeSession:
    """
    Serves canned responses by URL and records every request.

    Unknown URLs answer 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []
        self.closed = False

    def add(self, url, body="", status=200, error=None, final_url=None):
        self.routes[url] = dict(body=body, status=status, error=error, final_url=final_url)

    def get(self, url, params=None, proxy=None):
        self.requests.append({'url': url, 'params': params, 'proxy': proxy})
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(url, status=404)
        return FakeResponse(url, **route)

    @property
    def urls(self):
        return [request['url'] for request in self.requests]

    async def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the host's proxy and DOCS_RS_MCP_* variables out of Settings()."""
    for name in list(os.environ):
        if name.upper().startswith("DOCS_RS_MCP_") or name.upper() in ("HTTPS_PROXY", "HTTP_PROXY"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def logger():
    return logging.getLogger("docsrs-tests")


@pytest.fixture
def fake_http():
    """Patch aiohttp.ClientSession inside docsrs.scraper with a FakeSession."""
    session = FakeSession()
    with patch("docsrs.scraper.aiohttp.ClientSession", return_value=session):
        yield session


@pytest.fixture
def crate_html():
    """Modern rustdoc crate landing page."""
    return """
<html><body class="rustdoc mod crate">
<main><section id="main-content" class="content">
<div class="main-heading"><h1>Crate <a class="mod" href="#">serde</a>
<button id="copy-path" title="Copy item path to clipboard">Copy item path</button></h1></div>
<details class="toggle top-doc" open><summary class="hideme"><span>Expand description</span></summary>
<div class="docblock"><h2 id="serde"><a class="doc-anchor" href="#serde">§</a>Serde</h2>
<p>Serde is a framework for <em>ser</em>ializing and <em>de</em>serializing Rust data structures.</p>
<div class="example-wrap"><pre class="rust rust-example-rendered"><code>let x = 5;</code></pre></div>
</div></details>
<h2 id="modules" class="section-header">Modules</h2>
<ul class="item-table"><li><div class="item-name"><a class="mod" href="de/index.html">de</a></div></li></ul>
</section></main>
</body></html>
"""


@pytest.fixture
def all_items_html():
    """rustdoc all.html page with duplicates and non-item links."""
    return """
<html><body class="rustdoc">
<section id="main-content">
<h1>List of all items</h1>
<h3 id="structs">Structs</h3>
<ul class="all-items">
<li><a href="collections/struct.HashMap.html">collections::HashMap</a></li>
<li><a href="collections/hash_map/struct.HashMap.html">collections::HashMap</a></li>
<li><a href="struct.Runtime.html">Runtime</a></li>
</ul>
<h3 id="traits">Traits</h3>
<ul class="all-items"><li><a href="io/trait.AsyncRead.html">io::AsyncRead</a></li></ul>
<h3 id="functions">Functions</h3>
<ul class="all-items"><li><a href="fn.spawn.html">spawn</a></li></ul>
<h3 id="macros">Macros</h3>
<ul class="all-items"><li><a href="https://docs.rs/tokio/1.0.0/tokio/macro.select.html">select</a></li></ul>
<a href="#structs">Structs</a>
<a href="">empty href</a>
<a href="struct.Blank.html">   </a>
</section>
<nav><a href="struct.Outside.html">Outside</a></nav>
</body></html>
"""
