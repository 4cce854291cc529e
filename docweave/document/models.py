"""Typed dataclasses describing a parsed docweave document."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class DocumentError(ValueError):
    """Raised when the input document is missing, unreadable, or malformed."""


@dc.dataclass(slots=True)
class Section:
    """Titled node of source content.

    Attributes
    ----------
    identifier : str
        Stable identifier shown in child listings (for example ``"2.1"``).
    title : str
        Human-readable heading used as link text.
    content : str
        Raw inline text. The tree walker rewrites this in place with the
        normalized, cross-reference-resolved content.
    label : str, optional
        Anchor name; sections without one cannot be navigated to.
    children : list[Section]
        Ordered child sections owned exclusively by this node.
    """

    identifier: str
    title: str
    content: str = ""
    label: str | None = None
    children: list[Section] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class SectionRef:
    """Label pointing at another section."""

    section: Section


@dc.dataclass(frozen=True, slots=True)
class DefinitionRef:
    """Label pointing at a dictionary entry by name."""

    name: str


@dc.dataclass(frozen=True, slots=True)
class ItemRef:
    """Label for an enumerable item (equation, figure) with no target page."""

    ordinal: int | str


Label: typ.TypeAlias = SectionRef | DefinitionRef | ItemRef
LabelTable: typ.TypeAlias = typ.Mapping[str, Label]
DefinitionTable: typ.TypeAlias = typ.Mapping[str, str]


@dc.dataclass(slots=True)
class Document:
    """Section tree plus the label and definition tables that describe it."""

    sections: list[Section]
    labels: dict[str, Label] = dc.field(default_factory=dict)
    definitions: dict[str, str] = dc.field(default_factory=dict)


__all__ = [
    "DefinitionRef",
    "DefinitionTable",
    "Document",
    "DocumentError",
    "ItemRef",
    "Label",
    "LabelTable",
    "Section",
    "SectionRef",
]
