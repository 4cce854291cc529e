"""Flatten a section tree into pagination order and a mirrored navigation tree.

A single pre-order traversal produces both structures so every surviving
section occupies exactly one slot in each. Sections without a label are
dropped together with their whole subtree; empty leaves are dropped; empty
parents receive a generated listing of links to their declared children.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    from docweave.document.models import Section
    from docweave.references import CrossReferenceResolver

logger = logging.getLogger(__name__)

CHILD_LISTING_SEPARATOR = "\n\n"


@dc.dataclass(frozen=True, slots=True)
class NavLeaf:
    """Navigation entry for a section without children."""

    link: str


@dc.dataclass(frozen=True, slots=True)
class NavBranch:
    """Navigation entry for a section with declared children."""

    link: str
    children: tuple[NavItem, ...] = ()


NavItem: typ.TypeAlias = NavLeaf | NavBranch


class SectionTreeWalker:
    """Walk sections in document order, normalizing content as it goes."""

    def __init__(self, resolver: CrossReferenceResolver) -> None:
        self.resolver = resolver

    def flatten(
        self, roots: typ.Sequence[Section]
    ) -> tuple[list[Section], list[NavItem]]:
        """Return the filtered pre-order section list and navigation forest.

        Parameters
        ----------
        roots : Sequence[Section]
            Root-level sections in document order. Their ``content`` fields
            are rewritten in place with the normalized text.

        Returns
        -------
        tuple[list[Section], list[NavItem]]
            The flat pagination sequence and the navigation items for the
            roots that survived filtering.
        """
        flat: list[Section] = []
        nav: list[NavItem] = []
        for root in roots:
            item = self._visit(root, flat)
            if item is not None:
                nav.append(item)
        return flat, nav

    def _visit(self, section: Section, flat: list[Section]) -> NavItem | None:
        if not section.label:
            logger.warning(
                "Skipping unlabeled section '%s' (%s) and its %d child section(s)",
                section.identifier,
                section.title,
                len(section.children),
            )
            return None

        section.content = self.resolver.resolve(section.content.strip())
        if not section.content:
            if not section.children:
                logger.info(
                    "Skipping empty section '%s' (%s)",
                    section.identifier,
                    section.title,
                )
                return None
            section.content = self._child_listing(section)

        flat.append(section)
        link = self.resolver.section_link(section)
        if not section.children:
            return NavLeaf(link)

        children: list[NavItem] = []
        for child in section.children:
            item = self._visit(child, flat)
            if item is not None:
                children.append(item)
        return NavBranch(link, tuple(children))

    def _child_listing(self, section: Section) -> str:
        """Return ``id: link`` lines for every declared child of ``section``."""
        lines: list[str] = []
        for child in section.children:
            if child.label:
                target = self.resolver.section_link(child)
            else:
                target = escape(child.title, quote=False)
            lines.append(f"{child.identifier}: {target}")
        return CHILD_LISTING_SEPARATOR.join(lines)


__all__ = ["NavBranch", "NavItem", "NavLeaf", "SectionTreeWalker"]
