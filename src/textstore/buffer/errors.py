"""Exceptions raised by text stores and the buffer workspace."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .position import Point


class TextStoreError(RuntimeError):
    """Base class for every error surfaced by the buffer layer."""


class OutOfBoundsError(TextStoreError):
    """Raised when a point does not address an existing row or column."""

    def __init__(self, point: Point, message: Optional[str] = None) -> None:
        super().__init__(message or f"Point {point} is out of bounds")
        self.point = point


class FileNotSetError(TextStoreError):
    """Raised when saving a buffer that has no backing file."""

    def __init__(self) -> None:
        super().__init__("Buffer file not set")


class BufferIOError(TextStoreError):
    """Raised when the backing file cannot be read or written.

    The originating ``OSError`` or ``UnicodeError`` is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class UnknownBufferError(TextStoreError):
    """Raised when a workspace is asked for a buffer id it does not hold."""

    def __init__(self, buffer_id: int) -> None:
        super().__init__(f"No buffer with id {buffer_id}")
        self.buffer_id = buffer_id
