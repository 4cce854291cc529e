"""Stage a complete output set next to the target and swap it into place.

:class:`SitePublisher` runs the walker and every generator against a freshly
created staging directory that sits beside the target. Only once every
artifact has been written does it remove the previous target and rename the
staging directory onto the target path, so a failed run never leaves a
half-written site behind. All paths are passed explicitly; the process
working directory is never changed.

Example
-------
>>> from pathlib import Path
>>> from docweave.publish import publish_document
>>> publish_document(Path("docs/document.yaml"), Path("public"))  # doctest: +SKIP
[PosixPath('public/intro.json'), PosixPath('public/dictionary.html'), ...]
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import typing as typ
from pathlib import Path

from docweave._constants import STAGING_PREFIX_TEMPLATE
from docweave.document import load_document
from docweave.generator import (
    DictionaryBuilder,
    HtmlContentRenderer,
    NavigationRenderer,
    PageEmitter,
    PublishError,
)
from docweave.references import CrossReferenceResolver
from docweave.walker import SectionTreeWalker

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docweave.document import Document

logger = logging.getLogger(__name__)


class SitePublisher:
    """Build every artifact into a staging directory, then promote it."""

    def __init__(
        self,
        document: Document,
        target: Path,
        *,
        link_base: str = "",
        render: cabc.Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the publisher.

        Parameters
        ----------
        document : Document
            Parsed section tree, label table, and definition table.
        target : Path
            Directory that receives the published output.
        link_base : str, optional
            Prefix for generated section links; empty keeps links relative.
        render : Callable[[str], str], optional
            Markdown-to-HTML conversion; defaults to ``HtmlContentRenderer``.
        """
        self.document = document
        self.target = target
        self.resolver = CrossReferenceResolver(document.labels, link_base)
        self.render = render or HtmlContentRenderer()
        self.walker = SectionTreeWalker(self.resolver)
        self.pages = PageEmitter(self.render, self.resolver)
        self.dictionary = DictionaryBuilder(self.render, self.resolver)
        self.navigation = NavigationRenderer()

    def run(self) -> list[Path]:
        """Stage, build, and promote the output set.

        Returns
        -------
        list[Path]
            Published artifact paths inside the target directory: pages in
            flat order, then the dictionary, then the navigation index.

        Raises
        ------
        PublishError
            Raised when any artifact fails to render or write, or when the
            staging directory cannot be promoted. The existing target is left
            untouched unless the failure happens during promotion itself.

        Notes
        -----
        A staging directory from a failed run is not cleaned up; it is named
        distinctly from the target and never served.
        """
        staging = self._create_staging()
        logger.info("Staging output in %s", staging)

        flat, nav = self.walker.flatten(self.document.sections)
        written = self.pages.write(self.pages.build_pages(flat), staging)
        written.append(self.dictionary.write(self.document.definitions, staging))
        written.append(self.navigation.write(nav, staging))

        self._promote(staging)
        logger.info("Published %d artifact(s) to %s", len(written), self.target)
        return [self.target / path.relative_to(staging) for path in written]

    def _create_staging(self) -> Path:
        parent = self.target.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            created = tempfile.mkdtemp(
                prefix=STAGING_PREFIX_TEMPLATE.format(name=self.target.name),
                dir=parent,
            )
        except OSError as exc:
            msg = f"Unable to create staging directory in '{parent}': {exc}"
            raise PublishError(msg, parent) from exc
        return Path(created)

    def _promote(self, staging: Path) -> None:
        """Replace the target with ``staging``."""
        try:
            if self.target.is_dir() and not self.target.is_symlink():
                shutil.rmtree(self.target)
            elif self.target.exists() or self.target.is_symlink():
                self.target.unlink()
        except OSError as exc:
            msg = f"Unable to remove previous output '{self.target}': {exc}"
            raise PublishError(msg, self.target) from exc
        try:
            os.replace(staging, self.target)
        except OSError as exc:
            msg = f"Unable to move '{staging}' to '{self.target}': {exc}"
            raise PublishError(msg, staging) from exc


def publish_document(
    input_path: Path,
    target: Path,
    *,
    link_base: str = "",
    pygments_style: str = "monokai",
) -> list[Path]:
    """Load ``input_path`` and publish it to ``target``.

    Raises
    ------
    DocumentError
        If the input document cannot be loaded; nothing is staged.
    PublishError
        If staging, writing, or promotion fails.
    """
    document = load_document(input_path)
    publisher = SitePublisher(
        document,
        target,
        link_base=link_base,
        render=HtmlContentRenderer(pygments_style),
    )
    return publisher.run()


__all__ = ["PublishError", "SitePublisher", "publish_document"]
