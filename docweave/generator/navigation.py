"""Serialize the navigation forest into nested list markup."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docweave._constants import NAVIGATION_FILENAME
from docweave.generator.output import write_output
from docweave.walker import NavBranch, NavLeaf

if typ.TYPE_CHECKING:
    from docweave.walker import NavItem

logger = logging.getLogger(__name__)


class NavigationRenderer:
    """Render ``NavItem`` trees as nested ``<ul>``/``<li>`` HTML."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("navigation.html")

    def render(self, items: typ.Sequence[NavItem]) -> str:
        """Return the navigation document for ``items`` in input order."""
        return self.template.render(items=[_nav_context(item) for item in items])

    def write(self, items: typ.Sequence[NavItem], root: Path) -> Path:
        """Render ``items`` and persist the navigation document under ``root``."""
        path = write_output(root / NAVIGATION_FILENAME, self.render(items))
        logger.info("Wrote navigation index to %s", path)
        return path


def _nav_context(item: NavItem) -> dict[str, typ.Any]:
    """Convert a nav item into the mapping consumed by the template macro."""
    match item:
        case NavLeaf(link=link):
            return {"link": link, "branch": False, "children": []}
        case NavBranch(link=link, children=children):
            return {
                "link": link,
                "branch": True,
                "children": [_nav_context(child) for child in children],
            }
        case _:  # pragma: no cover - closed union
            typ.assert_never(item)


__all__ = ["NavigationRenderer"]
