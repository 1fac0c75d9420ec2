"""Tests for the data model."""

import pytest

from docsrs.errors import InvalidArgumentError
from docsrs.models import NO_DESCRIPTION, CrateSummary, ResolutionRequest, split_item_path


def test_crate_summary_from_registry():
    summary = CrateSummary.from_registry({
        "name": "tokio",
        "description": "An event-driven, non-blocking I/O platform",
        "downloads": 250000000,
        "newest_version": "1.38.0",
        "documentation": "https://docs.rs/tokio",
    })
    assert summary.name == "tokio"
    assert summary.version == "1.38.0"
    assert summary.downloads == 250000000
    assert summary.documentation == "https://docs.rs/tokio"


@pytest.mark.parametrize("description", [None, ""])
def test_missing_description_uses_placeholder(description):
    summary = CrateSummary.from_registry({"name": "x", "description": description, "downloads": 0, "newest_version": "0.1.0"})
    assert summary.description == NO_DESCRIPTION
    assert summary.documentation is None


def test_split_item_path():
    assert split_item_path("wasmtime::component::Component") == ["wasmtime", "component", "Component"]
    assert split_item_path("Component") == ["Component"]


def test_request_item_name_and_module():
    request = ResolutionRequest("wasmtime", item_path="wasmtime::component::Component", item_kind="struct")
    assert request.item_name == "Component"
    assert request.module_segments == ["wasmtime", "component"]
    assert request.wants_latest


def test_request_with_explicit_version():
    assert not ResolutionRequest("serde", version="1.0.0").wants_latest
    assert ResolutionRequest("serde", version="latest").wants_latest


@pytest.mark.parametrize("kwargs", [
    {"crate_name": ""},
    {"crate_name": "  "},
    {"crate_name": "tokio", "item_path": "", "item_kind": "struct"},
    {"crate_name": "tokio", "item_path": "tokio::Runtime", "item_kind": " "},
])
def test_invalid_requests(kwargs):
    with pytest.raises(InvalidArgumentError):
        ResolutionRequest(**kwargs)
