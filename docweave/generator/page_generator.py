"""Build paginated page records from the flat section sequence.

:class:`PageEmitter` pairs every section with its neighbours in traversal
order, renders the section content through the supplied markdown renderer,
and persists one JSON record per page. The record path mirrors the section
URL with ``.html`` swapped for ``.json`` so the page endpoint can map links
back to files.

Example
-------
>>> from pathlib import Path
>>> from docweave.generator import HtmlContentRenderer, PageEmitter
>>> from docweave.references import CrossReferenceResolver
>>> emitter = PageEmitter(HtmlContentRenderer(), CrossReferenceResolver({}))
>>> pages = emitter.build_pages(flat)  # doctest: +SKIP
>>> emitter.write(pages, Path("public"))  # doctest: +SKIP
[PosixPath('public/intro.json'), ...]
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

from docweave._constants import LINK_EXTENSION, PAGE_EXTENSION
from docweave.generator.models import Page
from docweave.generator.output import PublishError, write_output
from docweave.references import section_url

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docweave.document.models import Section
    from docweave.references import CrossReferenceResolver

logger = logging.getLogger(__name__)


class PageEmitter:
    """Render and persist one page record per flat section."""

    def __init__(
        self,
        render: cabc.Callable[[str], str],
        resolver: CrossReferenceResolver,
    ) -> None:
        """Initialize the emitter.

        Parameters
        ----------
        render : Callable[[str], str]
            Markdown-to-HTML conversion applied to each section's content.
        resolver : CrossReferenceResolver
            Resolver whose link base shapes the prev/next URLs.
        """
        self.render = render
        self.resolver = resolver

    def build_pages(self, flat: typ.Sequence[Section]) -> list[Page]:
        """Return pages for ``flat`` with prev/next links in sequence order.

        Raises
        ------
        PublishError
            If rendering any section fails.
        """
        pages: list[Page] = []
        last = len(flat) - 1
        for idx, section in enumerate(flat):
            prev_section = flat[idx - 1] if idx > 0 else None
            next_section = flat[idx + 1] if idx < last else None
            pages.append(
                Page(
                    identifier=section.identifier,
                    title=section.title,
                    content=self._render(section),
                    path=page_path(section),
                    prev=self._url(prev_section),
                    prev_title=prev_section.title if prev_section else None,
                    next=self._url(next_section),
                    next_title=next_section.title if next_section else None,
                )
            )
        return pages

    def write(self, pages: typ.Iterable[Page], root: Path) -> list[Path]:
        """Persist each page under ``root`` and return the written paths."""
        written: list[Path] = []
        for page in pages:
            payload = json.dumps(page.to_record(), indent=2, ensure_ascii=False)
            written.append(write_output(root / page.path, payload + "\n"))
        logger.info("Wrote %d page(s) to %s", len(written), root)
        return written

    def _render(self, section: Section) -> str:
        try:
            return self.render(section.content)
        except Exception as exc:
            msg = f"Failed to render section '{section.identifier}': {exc}"
            raise PublishError(msg, Path(page_path(section))) from exc

    def _url(self, section: Section | None) -> str | None:
        if section is None:
            return None
        return self.resolver.section_url(section)


def page_path(section: Section) -> str:
    """Return the record path for ``section``: its relative URL as ``.json``."""
    url = section_url(section)
    return url.removesuffix(LINK_EXTENSION) + PAGE_EXTENSION


__all__ = ["PageEmitter", "page_path"]
