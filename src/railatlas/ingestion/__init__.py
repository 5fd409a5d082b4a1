"""Ingestion layer.

This package contains the loader collaborator that reads source tables
(local files or HTTP) and the tolerant parsers that turn raw cells into
typed records.
"""

__all__: list[str] = []
