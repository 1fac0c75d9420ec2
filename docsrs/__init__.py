"""
Core modules for the docs.rs MCP server.

This package contains the core business logic modules:
- config: Settings read once from the environment
- logger: Logging infrastructure
- errors: Exception types
- models: Data types
- registry: crates.io version lookup and crate search
- urls: Candidate docs.rs URLs
- scraper: HTTP client and candidate fallback
- extractor: Documentation fragment extraction
- markdown: HTML to markdown conversion
- classifier: All-items page classification and filtering
- core: Main business logic functions
"""
