"""Filesystem helpers shared by the page, dictionary, and navigation writers."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """Raised when an artifact cannot be rendered, written, or promoted.

    Attributes
    ----------
    path : Path, optional
        File or directory the failing operation targeted.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def write_output(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` as UTF-8, creating parent directories.

    Raises
    ------
    PublishError
        If the directory cannot be created or the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        msg = f"Unable to write '{path}': {exc.strerror or exc}"
        raise PublishError(msg, path) from exc
    logger.debug("wrote %s", path)
    return path


__all__ = ["PublishError", "write_output"]
