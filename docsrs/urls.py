#!/usr/bin/env python3
"""
Candidate URL generation for docs.rs pages.

rustdoc has changed its output layout several times, so each logical target
maps to an ordered list of paths. The order reflects how often each layout
is seen on docs.rs and must not be changed.
"""

from typing import List

from .models import ItemKind, split_item_path


class CandidateUrls:
    """Builds candidate paths relative to the docs host root."""

    @staticmethod
    def overview(crate_name: str, version: str) -> List[str]:
        return [
            f"{crate_name}/{version}/{crate_name}/index.html",
            f"{crate_name}/{version}/{crate_name}/",
            f"{crate_name}/{version}/",
        ]

    @staticmethod
    def item(crate_name: str, version: str, item_kind: str, item_path: str) -> List[str]:
        """
        Candidate paths for a single item page.

        Modules live at ``a/b/index.html``; everything else at
        ``a/b/{kind}.{Name}.html`` where ``a::b`` is the enclosing module path.
        A bare item name is looked up in the crate root.
        """
        segments = split_item_path(item_path)

        if item_kind == ItemKind.MODULE.value:
            return [f"{crate_name}/{version}/{'/'.join(segments)}/index.html"]

        item_name = segments[-1]
        module_path = "/".join(segments[:-1]) or crate_name
        return [f"{crate_name}/{version}/{module_path}/{item_kind}.{item_name}.html"]

    @staticmethod
    def all_items(crate_name: str, version: str) -> List[str]:
        return [
            f"{crate_name}/{version}/{crate_name}/all.html",
            f"{crate_name}/{version}/{crate_name}/",
        ]


def docs_url(docs_base_url: str, path: str) -> str:
    """Join a candidate path onto the docs host."""
    return f"{docs_base_url.rstrip('/')}/{path.lstrip('/')}"


def crate_docs_base(docs_base_url: str, crate_name: str, version: str) -> str:
    """Directory that relative links on a crate's pages resolve against."""
    return docs_url(docs_base_url, f"{crate_name}/{version}/{crate_name}/")
