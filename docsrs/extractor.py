#!/usr/bin/env python3
"""
Extraction of the documentation fragment from a rustdoc page.

rustdoc's markup differs between releases, so each mode is an ordered list
of named strategies. A strategy takes the parsed page and returns the inner
HTML it found, or None. The first non-empty result wins.
"""

from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup

Strategy = Callable[[BeautifulSoup], Optional[str]]

MAIN_CONTENT = "#main-content"
MAIN_DOCBLOCK = "#main-content .docblock"
LEGACY_DOCBLOCK = ".rustdoc .docblock"
LEGACY_ITEM_DECL = ".rustdoc .item-decl"
LEGACY_ALT_ITEM_DECL = ".rustdoc-main .item-decl"

OVERVIEW = "overview"
ITEM = "item"


def inner_html(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Inner HTML of the first element matching ``selector``, or None if there is none."""
    element = soup.select_one(selector)
    if element is None:
        return None
    return element.decode_contents()


def _select(selector: str) -> Strategy:
    return lambda soup: inner_html(soup, selector)


def legacy_item(soup: BeautifulSoup) -> Optional[str]:
    """Declaration followed by the description block, for pages without ``#main-content``."""
    if soup.select_one(MAIN_CONTENT) is not None:
        return None
    parts = []
    declaration = inner_html(soup, LEGACY_ITEM_DECL)
    if declaration is not None:
        parts.append(declaration)

    description = inner_html(soup, LEGACY_DOCBLOCK)
    if description is None:
        description = inner_html(soup, LEGACY_ALT_ITEM_DECL)
    if description is not None:
        parts.append(description)

    return "".join(parts) if parts else None


OVERVIEW_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("main-docblock", _select(MAIN_DOCBLOCK)),
    ("main-content", _select(MAIN_CONTENT)),
    ("legacy-docblock", _select(LEGACY_DOCBLOCK)),
    ("legacy-item-decl", _select(LEGACY_ALT_ITEM_DECL)),
]

ITEM_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("main-content", _select(MAIN_CONTENT)),
    ("legacy-item", legacy_item),
]

STRATEGIES = {
    OVERVIEW: OVERVIEW_STRATEGIES,
    ITEM: ITEM_STRATEGIES,
}


def run_strategies(soup: BeautifulSoup, strategies: List[Tuple[str, Strategy]]) -> Tuple[Optional[str], str]:
    """Return (strategy name, html) for the first strategy with non-empty output, or (None, "")."""
    for name, strategy in strategies:
        html = strategy(soup)
        if html and html.strip():
            return name, html
    return None, ""


def extract_content(html: str, mode: str) -> str:
    """
    Extract the documentation fragment from a page.

    Args:
        html: Raw page HTML
        mode: "overview" for a crate's landing page, "item" for an item page

    Returns:
        Inner HTML of the selected fragment, or "" when nothing was found
    """
    if mode not in STRATEGIES:
        raise ValueError(f"Unknown extraction mode: {mode!r}")
    soup = BeautifulSoup(html, 'html.parser')
    _, fragment = run_strategies(soup, STRATEGIES[mode])
    return fragment
