"""Assemble parsed documents into linked, paginated, published page sets.

This package exposes the CLI entry point used by ``uv run docweave`` and the
library surface for publishing a document programmatically.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``publish_document``: Load a YAML document and publish it to a directory.

Examples
--------
>>> from docweave import main
>>> main()  # doctest: +SKIP
>>> from pathlib import Path
>>> from docweave import publish_document
>>> publish_document(Path("docs/document.yaml"), Path("public"))  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .publish import publish_document

__all__ = ["app", "main", "publish_document"]
