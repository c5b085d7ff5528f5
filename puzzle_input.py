"""
Readers for puzzle input files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

__all__ = ["get_text", "get_all_lines", "get_lines"]

logger = logging.getLogger(__name__)


def get_text(filename: str | Path) -> str:
    """Return the whole file as text."""
    text = Path(filename).read_text(encoding="utf-8")
    logger.debug("get_text: read %d characters from %s", len(text), filename)
    return text


def get_all_lines(filename: str | Path) -> list[str]:
    """Return every line of the file, without line endings."""
    return get_text(filename).splitlines()


def get_lines(filename: str | Path) -> Iterator[str]:
    """
    Lazily yield the lines of a file, without line endings.

    A missing file fails on the call, not on first iteration. The file is only
    opened once iteration starts, and is closed when the iterator finishes or
    is closed. An iterator dropped before its first line holds no file.
    """
    path = Path(filename)
    path.stat()  # raises now for a missing file

    def lines() -> Iterator[str]:
        with path.open(encoding="utf-8") as handle:
            for line in handle:
                yield line.rstrip("\r\n")

    return lines()
