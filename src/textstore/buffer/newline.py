"""Line terminator handling for loading and saving buffers."""

from __future__ import annotations

import os
from typing import Iterable, List


def newline() -> str:
    """Return the host line terminator (CRLF on Windows, LF elsewhere)."""

    return os.linesep


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines with their terminators removed.

    ``"\\n"`` and ``"\\r\\n"`` are both accepted. A final terminator does not
    start another line, so ``"a\\n"`` and ``"a"`` both give ``["a"]``.
    """

    if not text:
        return []
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def join_lines(lines: Iterable[str], terminator: str) -> str:
    """Terminate every line, the last one included."""

    return "".join(f"{line}{terminator}" for line in lines)
