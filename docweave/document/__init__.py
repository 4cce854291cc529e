"""Load and model the parsed document consumed by the docweave pipeline.

This subpackage turns a YAML description of a section tree, a definition
table, and optional explicit labels into the dataclasses the walker and
generators consume. The primary entry point is :func:`load_document`.

Examples
--------
>>> from pathlib import Path
>>> from docweave.document import load_document
>>> doc = load_document(Path("docs/document.yaml"))  # doctest: +SKIP
>>> sorted(doc.definitions)[:1]  # doctest: +SKIP
['foo']
"""

from .loader import DEFINITION_LABEL_PREFIX, load_document
from .models import (
    DefinitionRef,
    DefinitionTable,
    Document,
    DocumentError,
    ItemRef,
    Label,
    LabelTable,
    Section,
    SectionRef,
)

__all__ = [
    "DEFINITION_LABEL_PREFIX",
    "DefinitionRef",
    "DefinitionTable",
    "Document",
    "DocumentError",
    "ItemRef",
    "Label",
    "LabelTable",
    "Section",
    "SectionRef",
    "load_document",
]
