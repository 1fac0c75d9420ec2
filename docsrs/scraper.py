#!/usr/bin/env python3
"""
HTTP access to docs.rs and crates.io.

Provides the session wrapper used by every operation and the candidate
fallback loop that locates a document whose URL layout is not stable.
"""

import asyncio
import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

import aiohttp
from fastmcp import Context

from .config import Settings
from .errors import DocumentNotFoundError, TransportError
from .urls import docs_url

# Statuses that mean "this layout does not exist", try the next candidate
SOFT_MISS_STATUSES = frozenset({404, 501})


class AttemptOutcome(enum.Enum):
    SUCCESS = "success"
    SOFT_MISS = "soft_miss"
    FATAL = "fatal"


@dataclass
class FetchAttempt:
    """Result of requesting a single candidate URL."""

    outcome: AttemptOutcome
    url: str
    body: str = ""
    status: Optional[int] = None
    error: Optional[BaseException] = None

    def describe(self) -> str:
        if self.status is not None:
            return f"HTTP {self.status} for {self.url}"
        return f"{type(self.error).__name__}: {self.error} for {self.url}"


class DocsRsClient:
    """Client for fetching pages from docs.rs and metadata from crates.io."""

    def __init__(self, settings: Settings, logger):
        self.settings = settings
        self.logger = logger
        self.session = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout),
            headers={
                'User-Agent': self.settings.user_agent
            }
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def fetch_page(self, url: str) -> FetchAttempt:
        """GET a single page and classify the result. Never raises for HTTP or network errors."""
        try:
            async with self.session.get(url, proxy=self.settings.proxy) as response:
                if response.status in SOFT_MISS_STATUSES:
                    return FetchAttempt(AttemptOutcome.SOFT_MISS, url, status=response.status)
                if response.status >= 400:
                    return FetchAttempt(AttemptOutcome.FATAL, url, status=response.status)
                # Undecodable bytes become U+FFFD
                body = await response.text(errors="replace")
                return FetchAttempt(AttemptOutcome.SUCCESS, str(response.url), body=body, status=response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return FetchAttempt(AttemptOutcome.FATAL, url, error=e)

    async def fetch_first(self, candidates: Sequence[str], crate_name: str, version: str,
                          ctx: Optional[Context] = None) -> Tuple[str, str]:
        """
        Try candidate paths in order and return the first page that exists.

        Args:
            candidates: Paths relative to the docs host, in priority order
            crate_name: Crate being resolved, for error messages
            version: Resolved version, for error messages
            ctx: Optional FastMCP context

        Returns:
            Tuple of (absolute URL after redirects, HTML body)

        Raises:
            TransportError: on the first failure that is not a 404/501
            DocumentNotFoundError: if every candidate was a 404/501
        """
        tried = []
        for path in candidates:
            url = docs_url(self.settings.docs_base_url, path)
            attempt = await self.fetch_page(url)

            if attempt.outcome is AttemptOutcome.SUCCESS:
                self.logger.info(
                    "Resolved documentation page",
                    extra={'extra_data': {'crate': crate_name, 'version': version, 'url': attempt.url, 'attempts': len(tried) + 1}}
                )
                return attempt.url, attempt.body

            if attempt.outcome is AttemptOutcome.FATAL:
                self.logger.error(
                    "Fatal error fetching documentation page",
                    extra={'extra_data': {'crate': crate_name, 'version': version, 'url': url, 'status': attempt.status}}
                )
                raise TransportError(
                    f"Failed to fetch {url}: {attempt.describe()}", url=url, status=attempt.status
                ) from attempt.error

            tried.append(url)
            if ctx:
                await ctx.info(f"Not found, trying next layout: {url}")
            self.logger.info(
                "Candidate not found",
                extra={'extra_data': {'crate': crate_name, 'version': version, 'url': url, 'status': attempt.status}}
            )

        raise DocumentNotFoundError.for_candidates(crate_name, version, tried)

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a JSON document.

        Raises:
            TransportError: on network errors, non-2xx statuses or an undecodable body
        """
        try:
            async with self.session.get(url, params=params, proxy=self.settings.proxy) as response:
                if response.status >= 400:
                    raise TransportError(f"HTTP {response.status} for {url}", url=url, status=response.status)
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(f"Request to {url} failed: {type(e).__name__}: {e}", url=url) from e
