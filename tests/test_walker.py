"""Unit tests for ``SectionTreeWalker``.

The tests pin the traversal contract: flat output is the pre-order listing of
labelled, non-empty sections; navigation mirrors it; unlabeled sections drop
their entire subtree; empty parents receive a generated child listing.

Usage
-----
Run ``pytest tests/test_walker.py -v``. The ``sample_document`` fixture comes
from ``tests/conftest.py``.
"""

from __future__ import annotations

import logging
import typing as typ

import pytest

from docweave.document import Section
from docweave.references import CrossReferenceResolver
from docweave.walker import NavBranch, NavLeaf, SectionTreeWalker

if typ.TYPE_CHECKING:
    from docweave.document import Document, Label
    from docweave.walker import NavItem


def _walk(
    sections: list[Section], labels_for: typ.Callable[..., dict[str, Label]]
) -> tuple[list[Section], list[NavItem]]:
    resolver = CrossReferenceResolver(labels_for(sections))
    return SectionTreeWalker(resolver).flatten(sections)


def _nav_links(items: typ.Iterable[NavItem]) -> list[str]:
    """Return nav links in pre-order."""
    links: list[str] = []
    for item in items:
        match item:
            case NavLeaf(link=link):
                links.append(link)
            case NavBranch(link=link, children=children):
                links.append(link)
                links.extend(_nav_links(children))
    return links


def test_flat_sequence_is_filtered_preorder(sample_document: Document) -> None:
    """Parents precede descendants and filtered sections are absent."""
    resolver = CrossReferenceResolver(sample_document.labels)
    flat, _nav = SectionTreeWalker(resolver).flatten(sample_document.sections)
    assert [section.identifier for section in flat] == ["1", "2", "2.1", "2.2"]


def test_navigation_mirrors_flat_sequence(sample_document: Document) -> None:
    """Every flat section appears exactly once in the navigation tree."""
    resolver = CrossReferenceResolver(sample_document.labels)
    flat, nav = SectionTreeWalker(resolver).flatten(sample_document.sections)
    assert _nav_links(nav) == [resolver.section_link(section) for section in flat]
    assert isinstance(nav[0], NavLeaf)
    assert isinstance(nav[1], NavBranch)
    assert len(nav[1].children) == 2


def test_unlabeled_section_drops_whole_subtree(
    caplog: pytest.LogCaptureFixture,
    labels_for: typ.Callable[..., dict[str, Label]],
) -> None:
    """Labelled descendants of an unlabeled section are never visited.

    Orphaned children are intentionally not promoted to the parent's level.
    """
    sections = [
        Section(
            "1",
            "Unlabeled",
            "text",
            None,
            [
                Section("1.1", "Child", "text", "child"),
                Section(
                    "1.2",
                    "Other",
                    "text",
                    "other",
                    [Section("1.2.1", "Deep", "x", "deep")],
                ),
            ],
        ),
        Section("2", "Kept", "text", "kept"),
    ]
    with caplog.at_level(logging.WARNING, logger="docweave.walker"):
        flat, nav = _walk(sections, labels_for)
    assert [section.identifier for section in flat] == ["2"]
    assert nav == [NavLeaf('<a href="kept.html">Kept</a>')]
    assert any("Unlabeled" in record.getMessage() for record in caplog.records)
    assert sections[0].children[0].content == "text", "subtree must not be visited"


def test_empty_leaf_is_excluded(
    caplog: pytest.LogCaptureFixture,
    labels_for: typ.Callable[..., dict[str, Label]],
) -> None:
    """Whitespace-only leaves produce neither a page nor a nav entry."""
    sections = [Section("1", "Blank", " \n\t ", "blank")]
    with caplog.at_level(logging.INFO, logger="docweave.walker"):
        flat, nav = _walk(sections, labels_for)
    assert flat == []
    assert nav == []
    assert any("Blank" in record.getMessage() for record in caplog.records)


def test_empty_parent_gets_child_listing(
    labels_for: typ.Callable[..., dict[str, Label]],
) -> None:
    """An empty parent lists its children as ``id: link`` joined by blank lines."""
    sections = [
        Section(
            "2",
            "Guide",
            "",
            "guide",
            [
                Section("2.1", "Install", "Install steps.", "install"),
                Section("2.2", "Configure", "Configure steps.", "configure"),
            ],
        )
    ]
    flat, _nav = _walk(sections, labels_for)
    assert flat[0].content == (
        '2.1: <a href="install.html">Install</a>\n\n'
        '2.2: <a href="configure.html">Configure</a>'
    )


def test_child_listing_uses_declared_children(
    labels_for: typ.Callable[..., dict[str, Label]],
) -> None:
    """Children dropped later still appear in the parent's generated listing."""
    sections = [
        Section(
            "2",
            "Guide",
            "",
            "guide",
            [
                Section("2.1", "Empty", "", "empty"),
                Section("2.2", "Draft", "text", None),
            ],
        )
    ]
    flat, nav = _walk(sections, labels_for)
    assert flat[0].content == '2.1: <a href="empty.html">Empty</a>\n\n2.2: Draft'
    assert [section.identifier for section in flat] == ["2"]
    assert nav == [NavBranch('<a href="guide.html">Guide</a>', ())]


def test_content_is_trimmed_and_resolved_in_place(sample_document: Document) -> None:
    """Walking rewrites section content with trimmed, resolved text."""
    resolver = CrossReferenceResolver(sample_document.labels)
    flat, _nav = SectionTreeWalker(resolver).flatten(sample_document.sections)
    by_id = {section.identifier: section for section in flat}
    assert by_id["1"].content == 'See <a href="dictionary.html#foo">foo</a>'
    assert by_id["2.1"].content == "Run step 3."
    assert by_id["2.2"].content == "[Back](intro.html)"
    assert sample_document.sections[0].content == by_id["1"].content


def test_no_section_appears_twice(sample_document: Document) -> None:
    """Flat output never repeats a section."""
    resolver = CrossReferenceResolver(sample_document.labels)
    flat, _nav = SectionTreeWalker(resolver).flatten(sample_document.sections)
    assert len({id(section) for section in flat}) == len(flat)
