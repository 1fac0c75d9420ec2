"""
MCP tools for the docs.rs server.

This package contains MCP tool wrappers organized by functionality:
- crate_tools: crates.io search
- docs_tools: docs.rs overview, item and in-crate search
- common: error conversion shared by all tools
"""
