"""Cyclopts CLI entrypoint for publishing docweave documents.

The ``docweave`` console script defined here loads a parsed document,
builds the paginated page records, glossary, and navigation index into a
staging directory, and swaps the result onto the target directory. Every
option can also be supplied through ``INPUT_*`` environment variables so CI
jobs can drive it without arguments.

Examples
--------
Publish the default document into ``public``:

>>> from docweave.cli import main
>>> main()  # doctest: +SKIP

Publish with absolute links under ``/docs/``:

>>> from docweave.cli import app
>>> app(
...     ["publish", "--input", "book.yaml", "--target", "site", "--link-base", "/docs/"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .document import DocumentError
from .generator import PublishError
from .publish import publish_document

DEFAULT_DOCUMENT = Path("docs/document.yaml")
DEFAULT_TARGET = Path("public")

app = App(name="docweave", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Publish pages, dictionary, and navigation for a document.")
def publish(
    *,
    input_path: typ.Annotated[
        Path,
        Parameter(
            name="--input", help="Path to the parsed document", env_var="INPUT_DOCUMENT"
        ),
    ] = DEFAULT_DOCUMENT,
    target: typ.Annotated[
        Path, Parameter(help="Output directory", env_var="INPUT_TARGET")
    ] = DEFAULT_TARGET,
    link_base: typ.Annotated[
        str,
        Parameter(help="Prefix for generated section links", env_var="INPUT_LINK_BASE"),
    ] = "",
    pygments_style: typ.Annotated[
        str,
        Parameter(
            help="Pygments style for code blocks", env_var="INPUT_PYGMENTS_STYLE"
        ),
    ] = "monokai",
    verbose: typ.Annotated[
        bool, Parameter(help="Log every file written")
    ] = False,
) -> int:
    """Publish the document at ``input_path`` into ``target``.

    Parameters
    ----------
    input_path : Path, optional
        YAML document describing sections, definitions, and labels.
    target : Path, optional
        Directory that receives the published output; replaced atomically.
    link_base : str, optional
        Prefix for section links; empty (default) keeps links relative.
    pygments_style : str, optional
        Pygments style used when highlighting fenced code.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    int
        ``0`` on success, ``1`` when the document cannot be loaded or the
        output cannot be published. Failures are reported on stderr.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        written = publish_document(
            input_path, target, link_base=link_base, pygments_style=pygments_style
        )
    except (DocumentError, PublishError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for path in written:
        print(f"wrote {_format_path(path)}")
    return 0


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docweave`` command."""
    sys.exit(app())


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
