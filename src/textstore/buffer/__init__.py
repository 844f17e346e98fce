"""Text store, coordinates, and the workspace of open buffers."""

from .errors import (
    BufferIOError,
    FileNotSetError,
    OutOfBoundsError,
    TextStoreError,
    UnknownBufferError,
)
from .newline import join_lines, newline, split_lines
from .position import Point, Span
from .store import TextStore
from .view import LineView
from .workspace import BufferWorkspace

__all__ = [
    "TextStore",
    "LineView",
    "Point",
    "Span",
    "BufferWorkspace",
    "TextStoreError",
    "OutOfBoundsError",
    "FileNotSetError",
    "BufferIOError",
    "UnknownBufferError",
    "newline",
    "split_lines",
    "join_lines",
]
