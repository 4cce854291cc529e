r"""Resolve inline cross-reference markers against a label table.

Two marker forms are recognised in raw section and definition text:

* ``~~~id~~~`` requests a rendered anchor (``<a href="...">text</a>``).
* ``~~id~~`` requests the bare target URL only.

Link markers are substituted in a first global pass and URL markers in a
second; neither pass is recursive. Unknown ids are logged and replaced by the
id itself so a dangling reference never aborts a build.

Example
-------
>>> from docweave.document import DefinitionRef
>>> resolver = CrossReferenceResolver({"def:foo": DefinitionRef("foo")})
>>> resolver.resolve("See ~~~def:foo~~~")
'See <a href="dictionary.html#foo">foo</a>'
>>> resolver.resolve("[x](~~def:foo~~)")
'[x](dictionary.html#foo)'
"""

from __future__ import annotations

import logging
import re
import typing as typ
from html import escape

from docweave._constants import DICTIONARY_FILENAME, LINK_EXTENSION
from docweave.document.models import DefinitionRef, ItemRef, SectionRef

if typ.TYPE_CHECKING:
    from docweave.document.models import Label, LabelTable, Section

logger = logging.getLogger(__name__)

LINK_MARKER_PATTERN = re.compile(r"~~~([^~\n]+)~~~")
URL_MARKER_PATTERN = re.compile(r"~~([^~\n]+)~~")


def anchor_id(name: str) -> str:
    """Return the HTML id used for a dictionary entry named ``name``."""
    return name.lower().replace(" ", "-")


def section_url(section: Section, link_base: str = "") -> str:
    """Return the page URL for a labelled ``section``."""
    if not section.label:
        msg = f"Section '{section.identifier}' has no label and no URL."
        raise ValueError(msg)
    return f"{link_base}{section.label.lower()}{LINK_EXTENSION}"


def definition_url(name: str) -> str:
    """Return the dictionary URL for the entry ``name``."""
    return f"{DICTIONARY_FILENAME}#{anchor_id(name)}"


def render_anchor(href: str, text: str) -> str:
    """Return an HTML anchor with escaped ``href`` and ``text``."""
    return f'<a href="{escape(href, quote=True)}">{escape(text, quote=False)}</a>'


class CrossReferenceResolver:
    """Substitute link and URL markers using a read-only label table."""

    def __init__(self, labels: LabelTable, link_base: str = "") -> None:
        """Initialize the resolver.

        Parameters
        ----------
        labels : LabelTable
            Mapping of reference id to label.
        link_base : str, optional
            Prefix prepended to section page URLs. Defaults to ``""`` so all
            generated links stay relative.
        """
        self.labels = labels
        self.link_base = link_base

    def resolve(self, text: str) -> str:
        """Return ``text`` with every link marker, then every URL marker, replaced."""
        linked = LINK_MARKER_PATTERN.sub(self._replace_link, text)
        return URL_MARKER_PATTERN.sub(self._replace_url, linked)

    def section_url(self, section: Section) -> str:
        """Return the URL of ``section`` using this resolver's link base."""
        return section_url(section, self.link_base)

    def section_link(self, section: Section) -> str:
        """Return an anchor pointing at ``section`` with its title as text."""
        return render_anchor(self.section_url(section), section.title)

    def url_for(self, label: Label) -> str:
        """Return the bare target for ``label``."""
        match label:
            case SectionRef(section=section):
                return self.section_url(section)
            case DefinitionRef(name=name):
                return definition_url(name)
            case ItemRef(ordinal=ordinal):
                return str(ordinal)
            case _:  # pragma: no cover - closed union
                typ.assert_never(label)

    def link_for(self, label: Label) -> str:
        """Return the rendered anchor (or plain ordinal) for ``label``."""
        match label:
            case SectionRef(section=section):
                return self.section_link(section)
            case DefinitionRef(name=name):
                return render_anchor(definition_url(name), name)
            case ItemRef(ordinal=ordinal):
                return str(ordinal)
            case _:  # pragma: no cover - closed union
                typ.assert_never(label)

    def _replace_link(self, match: re.Match[str]) -> str:
        ref_id = match.group(1)
        label = self.labels.get(ref_id)
        if label is None:
            return self._unresolved(ref_id)
        return self.link_for(label)

    def _replace_url(self, match: re.Match[str]) -> str:
        ref_id = match.group(1)
        label = self.labels.get(ref_id)
        if label is None:
            return self._unresolved(ref_id)
        return self.url_for(label)

    @staticmethod
    def _unresolved(ref_id: str) -> str:
        logger.warning("Unresolved cross-reference '%s'; leaving id text", ref_id)
        return ref_id


__all__ = [
    "LINK_MARKER_PATTERN",
    "URL_MARKER_PATTERN",
    "CrossReferenceResolver",
    "anchor_id",
    "definition_url",
    "render_anchor",
    "section_url",
]
