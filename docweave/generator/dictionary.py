"""Render the definition table into an anchored glossary document."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docweave._constants import DICTIONARY_FILENAME
from docweave.generator.output import PublishError, write_output
from docweave.references import anchor_id

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docweave.document.models import DefinitionTable
    from docweave.references import CrossReferenceResolver

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


class DictionaryBuilder:
    """Sort definitions case-insensitively and render one block per entry."""

    def __init__(
        self,
        render: cabc.Callable[[str], str],
        resolver: CrossReferenceResolver,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        render : Callable[[str], str]
            Markdown-to-HTML conversion applied to each resolved definition.
        resolver : CrossReferenceResolver
            Resolver applied to definition text before rendering.
        templates_dir : Path, optional
            Directory containing ``dictionary_entry.html``; defaults to the
            package templates.
        """
        self.render = render
        self.resolver = resolver
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("dictionary_entry.html")

    def render_document(self, definitions: DefinitionTable) -> str:
        """Return the glossary HTML for ``definitions``.

        Raises
        ------
        PublishError
            If rendering any definition fails.
        """
        blocks = [
            self.template.render(
                anchor=anchor_id(name),
                name=name,
                html=self._render_entry(name, definitions[name]),
            )
            for name in sorted_names(definitions)
        ]
        return BLOCK_SEPARATOR.join(blocks)

    def write(self, definitions: DefinitionTable, root: Path) -> Path:
        """Render ``definitions`` and persist the glossary under ``root``."""
        html = self.render_document(definitions)
        path = write_output(root / DICTIONARY_FILENAME, html)
        logger.info("Wrote dictionary with %d entries to %s", len(definitions), path)
        return path

    def _render_entry(self, name: str, value: str) -> str:
        try:
            return self.render(self.resolver.resolve(value))
        except Exception as exc:
            msg = f"Failed to render dictionary entry '{name}': {exc}"
            raise PublishError(msg, Path(DICTIONARY_FILENAME)) from exc


def sorted_names(definitions: DefinitionTable) -> list[str]:
    """Return definition names ordered case-insensitively, ties by raw name."""
    return sorted(definitions, key=lambda name: (name.casefold(), name))


__all__ = ["DictionaryBuilder", "sorted_names"]
