"""Reading the text file to be checked."""

from __future__ import annotations

import logging
from pathlib import Path

from spanish_checker.exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """Return the full contents of *path* decoded as UTF-8.

    The text is returned verbatim: no stripping and no newline
    translation, so service offsets line up with it.

    Raises
    ------
    FileReadError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    source = Path(path)
    try:
        with source.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Error leyendo archivo: {exc}") from exc

    logger.debug("Read %d characters from %s", len(text), source)
    return text
