"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True)
class Page:
    """Rendered page record for one section of the flat sequence.

    Attributes
    ----------
    identifier : str
        Identifier of the source section.
    title : str
        Section title.
    content : str
        Rendered HTML for the section's resolved content.
    path : str
        Page file path relative to the output root (for example
        ``"intro.json"``).
    prev : str, optional
        URL of the preceding page; ``None`` for the first page.
    prev_title : str, optional
        Title of the preceding page.
    next : str, optional
        URL of the following page; ``None`` for the last page.
    next_title : str, optional
        Title of the following page.
    """

    identifier: str
    title: str
    content: str
    path: str
    prev: str | None = None
    prev_title: str | None = None
    next: str | None = None
    next_title: str | None = None

    def to_record(self) -> dict[str, typ.Any]:
        """Return the JSON record served for this page."""
        return {
            "id": self.identifier,
            "title": self.title,
            "content": self.content,
            "prev": self.prev,
            "prevTitle": self.prev_title,
            "next": self.next,
            "nextTitle": self.next_title,
        }


__all__ = ["Page"]
