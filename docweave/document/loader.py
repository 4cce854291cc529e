"""Load a pre-parsed document description from YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import (
    DefinitionRef,
    Document,
    DocumentError,
    ItemRef,
    Label,
    Section,
    SectionRef,
)

DEFINITION_LABEL_PREFIX = "def:"


def load_document(path: Path) -> Document:
    """Load the YAML document describing sections, definitions, and labels.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML document.

    Returns
    -------
    Document
        Section tree plus a label table and definition table. Every labelled
        section is registered under its label as a ``SectionRef`` and every
        definition under ``def:<name>`` as a ``DefinitionRef``; entries from
        the optional ``labels`` mapping are applied last and win on conflict.

    Raises
    ------
    DocumentError
        If the file is missing, cannot be parsed, or describes an invalid
        section or label.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docweave.document import load_document
    >>> doc = load_document(Path("docs/document.yaml"))  # doctest: +SKIP
    >>> doc.sections[0].title  # doctest: +SKIP
    'Intro'
    """
    if not path.exists():
        msg = f"Document '{path}' not found."
        raise DocumentError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as exc:
        msg = f"Unable to read document '{path}': {exc}"
        raise DocumentError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise DocumentError(msg)

    raw: dict[str, typ.Any] = dict(loaded)
    sections_raw = raw.get("sections") or []
    if not isinstance(sections_raw, list):
        msg = "'sections' must be a list."
        raise DocumentError(msg)
    sections = [
        _build_section(payload, f"sections[{idx}]")
        for idx, payload in enumerate(sections_raw)
    ]

    definitions = _build_definitions(raw.get("definitions") or {})
    labels: dict[str, Label] = {}
    by_label: dict[str, Section] = {}
    by_url: dict[str, str] = {}
    for section in _iter_sections(sections):
        if section.label:
            # Page files are named after the lowercased label.
            seen = by_url.setdefault(section.label.lower(), section.label)
            if seen != section.label:
                msg = f"Section label '{section.label}' collides with '{seen}'."
                raise DocumentError(msg)
            labels[section.label] = SectionRef(section)
            by_label[section.label] = section
    for name in definitions:
        labels[f"{DEFINITION_LABEL_PREFIX}{name}"] = DefinitionRef(name)
    labels.update(_build_labels(raw.get("labels") or {}, by_label))

    return Document(sections=sections, labels=labels, definitions=definitions)


def _build_section(payload: object, where: str) -> Section:
    """Build a Section (and its children) from one YAML mapping."""
    if not isinstance(payload, dict):
        msg = f"{where} must be a mapping."
        raise DocumentError(msg)
    title = payload.get("title")
    if not title:
        msg = f"{where} is missing 'title'."
        raise DocumentError(msg)
    children_raw = payload.get("children") or []
    if not isinstance(children_raw, list):
        msg = f"{where}.children must be a list."
        raise DocumentError(msg)
    label = str(payload["label"]) if payload.get("label") else None
    if label is not None:
        _check_label_path(label, where)
    return Section(
        identifier=str(payload.get("id", title)),
        title=str(title),
        content=str(payload.get("content") or ""),
        label=label,
        children=[
            _build_section(child, f"{where}.children[{idx}]")
            for idx, child in enumerate(children_raw)
        ],
    )


def _check_label_path(label: str, where: str) -> None:
    """Reject labels that would place a page outside the published directory."""
    parts = PurePosixPath(label).parts
    if PurePosixPath(label).is_absolute() or ".." in parts or "\\" in label:
        msg = f"{where} label '{label}' must be a relative path inside the target."
        raise DocumentError(msg)


def _iter_sections(sections: list[Section]) -> typ.Iterator[Section]:
    for section in sections:
        yield section
        yield from _iter_sections(section.children)


def _build_definitions(payload: object) -> dict[str, str]:
    if not isinstance(payload, dict):
        msg = "'definitions' must be a mapping of name to text."
        raise DocumentError(msg)
    return {str(name): str(value or "") for name, value in payload.items()}


def _build_labels(
    payload: object, by_label: typ.Mapping[str, Section]
) -> dict[str, Label]:
    """Build explicit label entries from ``{id: {section|definition|item: ...}}``."""
    if not isinstance(payload, dict):
        msg = "'labels' must be a mapping."
        raise DocumentError(msg)
    labels: dict[str, Label] = {}
    for ref_id, entry in payload.items():
        match entry:
            case {"section": str() as target} if target in by_label:
                labels[str(ref_id)] = SectionRef(by_label[target])
            case {"section": target}:
                msg = f"Label '{ref_id}' points at unknown section label '{target}'."
                raise DocumentError(msg)
            case {"definition": name}:
                labels[str(ref_id)] = DefinitionRef(str(name))
            case {"item": int() | str() as ordinal}:
                labels[str(ref_id)] = ItemRef(ordinal)
            case _:
                msg = (
                    f"Label '{ref_id}' must be a mapping with one of "
                    "'section', 'definition', or 'item'."
                )
                raise DocumentError(msg)
    return labels


__all__ = ["DEFINITION_LABEL_PREFIX", "load_document"]
