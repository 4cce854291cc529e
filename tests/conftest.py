"""Shared fixtures for docweave tests.

The fixtures build small in-memory documents so each test module can exercise
the walker, generators, and publisher without touching YAML files. Tests that
need a document on disk write their own YAML through ``tmp_path``.
"""

from __future__ import annotations

import typing as typ

import pytest

from docweave.document import (
    DefinitionRef,
    Document,
    ItemRef,
    Label,
    Section,
    SectionRef,
)


def _build_labels(
    sections: typ.Iterable[Section], definitions: typ.Iterable[str] = ()
) -> dict[str, Label]:
    """Register labelled sections and ``def:<name>`` definitions, recursively."""
    labels: dict[str, Label] = {}
    stack = list(sections)
    while stack:
        section = stack.pop()
        if section.label:
            labels[section.label] = SectionRef(section)
        stack.extend(section.children)
    for name in definitions:
        labels[f"def:{name}"] = DefinitionRef(name)
    return labels


@pytest.fixture
def labels_for() -> typ.Callable[..., dict[str, Label]]:
    """Return a helper that builds a label table for a list of sections."""
    return _build_labels


@pytest.fixture
def sample_document() -> Document:
    """Return a document with nested sections, a definition, and an item label.

    Layout::

        1 Intro (intro)            -> "See ~~~def:foo~~~"
        2 Guide (guide)            -> empty, two labelled children
          2.1 Install (install)    -> text referencing eq-3
          2.2 Configure (configure)-> url marker to intro
        3 Drafts (no label)        -> subtree dropped
          3.1 Hidden (hidden)
        4 Empty (empty)            -> empty leaf, dropped
    """
    sections = [
        Section("1", "Intro", "  See ~~~def:foo~~~  ", "intro"),
        Section(
            "2",
            "Guide",
            "",
            "guide",
            [
                Section("2.1", "Install", "Run step ~~~eq-3~~~.", "install"),
                Section("2.2", "Configure", "[Back](~~intro~~)", "configure"),
            ],
        ),
        Section(
            "3",
            "Drafts",
            "Work in progress",
            None,
            [Section("3.1", "Hidden", "Secret", "hidden")],
        ),
        Section("4", "Empty", "   ", "empty"),
    ]
    definitions = {"foo": "Foo means bar.", "Zeta": "Last letter.", "alpha": "First."}
    labels = _build_labels(sections, definitions)
    labels["eq-3"] = ItemRef(3)
    return Document(sections=sections, labels=labels, definitions=definitions)
