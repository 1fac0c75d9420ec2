#!/usr/bin/env python3
"""
Item classification and filtering for a crate's all-items page.
"""

from typing import Iterable, List, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .models import ItemKind, ItemRecord

# Checked in order, first marker found in the href wins
KIND_MARKERS = (
    ("struct.", ItemKind.STRUCT),
    ("trait.", ItemKind.TRAIT),
    ("fn.", ItemKind.FUNCTION),
    ("enum.", ItemKind.ENUM),
    ("type.", ItemKind.TYPE),
    ("const.", ItemKind.CONSTANT),
    ("static.", ItemKind.STATIC),
    ("macro.", ItemKind.MACRO),
)


class ItemClassifier:
    """Turns the links of an all-items page into typed records."""

    @staticmethod
    def classify(href: str) -> ItemKind:
        for marker, kind in KIND_MARKERS:
            if marker in href:
                return kind
        return ItemKind.UNRECOGNIZED

    @staticmethod
    def matches(name: str, kind: ItemKind, query: Optional[str] = None, kind_filter: Optional[str] = None) -> bool:
        """
        Whether an item passes the search filters.

        The query must be a case-insensitive substring of the name. The kind
        filter matches either the exact kind or, case-insensitively, part of
        the name. Unrecognized items never match.
        """
        if kind is ItemKind.UNRECOGNIZED:
            return False
        lowered = name.lower()
        if query and query.lower() not in lowered:
            return False
        if kind_filter and kind_filter != kind.value and kind_filter.lower() not in lowered:
            return False
        return True

    @staticmethod
    def absolutize(href: str, base_url: str) -> str:
        if urlparse(href).scheme in ("http", "https"):
            return href
        return urljoin(base_url, href)

    @classmethod
    def scan(cls, soup: BeautifulSoup, base_url: str, query: Optional[str] = None,
             kind_filter: Optional[str] = None) -> List[ItemRecord]:
        """
        Collect matching items from every link under ``#main-content``.

        Args:
            soup: Parsed all-items page
            base_url: Directory relative links are resolved against
            query: Optional name substring
            kind_filter: Optional kind or name substring

        Returns:
            Matching records, deduplicated by (name, kind), in page order
        """
        records = []
        for link in soup.select("#main-content a"):
            name = link.get_text().strip()
            href = (link.get('href') or '').strip()
            if not name or not href:
                continue

            kind = cls.classify(href)
            if not cls.matches(name, kind, query, kind_filter):
                continue
            records.append(ItemRecord(name=name, kind=kind, link=cls.absolutize(href, base_url)))

        return dedupe(records)


def dedupe(records: Iterable[ItemRecord]) -> List[ItemRecord]:
    """Keep the first record for each (name, kind) pair."""
    seen = set()
    unique = []
    for record in records:
        if record.identity in seen:
            continue
        seen.add(record.identity)
        unique.append(record)
    return unique
