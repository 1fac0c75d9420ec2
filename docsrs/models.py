#!/usr/bin/env python3
"""
Data types shared across the resolution pipeline.

Every value here lives only for the duration of a single tool call.
"""

import enum
from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidArgumentError

LATEST = "latest"
PATH_SEPARATOR = "::"
NO_DESCRIPTION = "No description available"


class ItemKind(str, enum.Enum):
    STRUCT = "struct"
    TRAIT = "trait"
    FUNCTION = "function"
    ENUM = "enum"
    TYPE = "type"
    CONSTANT = "constant"
    STATIC = "static"
    MACRO = "macro"
    MODULE = "module"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class CrateSummary:
    """One crates.io search hit."""

    name: str
    description: str
    downloads: int
    version: str
    documentation: Optional[str] = None

    @classmethod
    def from_registry(cls, data: dict) -> "CrateSummary":
        return cls(
            name=data["name"],
            description=data.get("description") or NO_DESCRIPTION,
            downloads=int(data.get("downloads") or 0),
            version=data.get("newest_version") or data.get("max_version") or "",
            documentation=data.get("documentation") or None,
        )


@dataclass(frozen=True)
class ItemRecord:
    """An item found on a crate's all-items page."""

    name: str
    kind: ItemKind
    link: str

    @property
    def identity(self):
        return (self.name, self.kind)


@dataclass(frozen=True)
class DocumentFragment:
    html: str
    source_url: str


def split_item_path(item_path: str) -> List[str]:
    """
    Split a ``::`` delimited item path into its segments.

    Raises:
        InvalidArgumentError: if the path is empty or has an empty segment
    """
    if not item_path or not item_path.strip():
        raise InvalidArgumentError("Item path must not be empty")
    segments = [segment.strip() for segment in item_path.strip().split(PATH_SEPARATOR)]
    if any(not segment for segment in segments):
        raise InvalidArgumentError(f"Item path has an empty segment: {item_path!r}")
    return segments


@dataclass(frozen=True)
class ResolutionRequest:
    """
    Parameters of a single resolution call.

    Either ``item_path`` and ``item_kind`` (item lookup) or ``query`` and an
    optional ``kind_filter`` (search) are set.
    """

    crate_name: str
    version: Optional[str] = None
    item_path: Optional[str] = None
    item_kind: Optional[str] = None
    query: Optional[str] = None
    kind_filter: Optional[str] = None

    def __post_init__(self):
        if not self.crate_name or not self.crate_name.strip():
            raise InvalidArgumentError("Crate name must not be empty")
        if self.item_path is not None:
            split_item_path(self.item_path)
            if not self.item_kind or not self.item_kind.strip():
                raise InvalidArgumentError("Item type must not be empty")

    @property
    def segments(self) -> List[str]:
        return split_item_path(self.item_path or "")

    @property
    def item_name(self) -> str:
        return self.segments[-1]

    @property
    def module_segments(self) -> List[str]:
        return self.segments[:-1]

    @property
    def wants_latest(self) -> bool:
        return not self.version or self.version == LATEST
