"""Line-addressable in-memory text store.

Content lives in one separator-free string. A table of line lengths marks
where each line begins and ends, so a point ``(column, row)`` maps to the
offset ``sum(line_lengths[:row]) + column``. Every mutation updates the
string and the table together, and validation happens before either is
touched.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence, Tuple, Union

from textstore.runtime import telemetry

from .errors import BufferIOError, FileNotSetError, OutOfBoundsError
from .newline import join_lines, newline, split_lines
from .position import Point, Span
from .view import LineView

PathLike = Union[str, os.PathLike]


class TextStore:
    def __init__(
        self,
        content: str = "",
        line_lengths: Sequence[int] = (),
        *,
        path: Optional[PathLike] = None,
    ) -> None:
        if sum(line_lengths) != len(content):
            raise ValueError("line lengths do not add up to the content length")
        self._content = content
        self._line_lengths: List[int] = list(line_lengths)
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.cursor = Point()

    @classmethod
    def from_text(cls, text: str) -> "TextStore":
        """Build a store from raw text; the result has no backing file."""

        lines = split_lines(text)
        return cls("".join(lines), [len(line) for line in lines])

    @classmethod
    def load(cls, path: PathLike) -> "TextStore":
        """Read ``path`` as UTF-8 and remember it for :meth:`save`."""

        source = Path(path)
        with telemetry.span("store::load", metadata={"path": source}):
            try:
                # newline="" keeps "\r\n" intact so split_lines sees it.
                with source.open("r", encoding="utf-8", newline="") as handle:
                    text = handle.read()
            except (OSError, UnicodeError) as exc:
                raise BufferIOError(
                    f"Could not read {source}: {exc}", path=source
                ) from exc
            store = cls.from_text(text)
            store.path = source
        return store

    def save(self) -> None:
        """Write every line back to the backing file, each followed by a newline.

        The file is overwritten in place; a failed write may leave it partial.
        """

        if self.path is None:
            raise FileNotSetError()
        with telemetry.span("store::save", metadata={"path": self.path}):
            data = join_lines(self.lines(), newline())
            try:
                with self.path.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(data)
            except (OSError, UnicodeError) as exc:
                raise BufferIOError(
                    f"Could not write {self.path}: {exc}", path=self.path
                ) from exc

    # ------------------------------------------------------------------
    # Read access

    @property
    def content(self) -> str:
        return self._content

    @property
    def line_lengths(self) -> Tuple[int, ...]:
        return tuple(self._line_lengths)

    @property
    def line_count(self) -> int:
        return len(self._line_lengths)

    @property
    def name(self) -> str:
        return self.path.name if self.path is not None else "[scratch]"

    def line_length(self, row: int) -> int:
        if not 0 <= row < len(self._line_lengths):
            raise OutOfBoundsError(Point(0, row))
        return self._line_lengths[row]

    def line(self, row: int) -> str:
        start = self._row_start(row)
        if start is None:
            raise OutOfBoundsError(Point(0, row))
        return self._content[start : start + self._line_lengths[row]]

    def lines(self) -> LineView:
        """Snapshot the current lines for display."""

        return LineView(self._content, self._line_lengths)

    def offset_of(self, point: Point) -> int:
        """Absolute content offset of ``point``; end of line is addressable."""

        offset, _ = self._offset(point, allow_end=True)
        return offset

    # ------------------------------------------------------------------
    # Line operations

    def insert_line(self, row: int, text: str) -> None:
        """Insert ``text`` as line ``row``.

        Rows past the end are reached by padding with empty lines first, so
        a non-negative row never fails.
        """

        if row < 0:
            raise ValueError("row must be non-negative")
        _ensure_single_line(text)
        with telemetry.span("store::insert_line", metadata={"row": row}):
            count = len(self._line_lengths)
            if row >= count:
                if row > count:
                    telemetry.record_event(
                        "store.pad_lines",
                        level="debug",
                        data={"from": count, "to": row},
                    )
                self._line_lengths.extend([0] * (row - count))
                self._line_lengths.append(len(text))
                self._content += text
                return

            start = sum(self._line_lengths[:row])
            self._line_lengths.insert(row, len(text))
            self._content = self._content[:start] + text + self._content[start:]

    def remove_line(self, row: int) -> Optional[str]:
        """Remove line ``row`` and return its text, or ``None`` if it does not exist."""

        start = self._row_start(row)
        if start is None:
            return None
        with telemetry.span("store::remove_line", metadata={"row": row}):
            end = start + self._line_lengths.pop(row)
            removed = self._content[start:end]
            self._content = self._content[:start] + self._content[end:]
        return removed

    # ------------------------------------------------------------------
    # Character operations

    def insert_char(self, point: Point, char: str) -> None:
        _ensure_char(char)
        offset, row = self._offset(point, allow_end=True)
        self._content = self._content[:offset] + char + self._content[offset:]
        self._line_lengths[row] += 1

    def remove_char(self, point: Point) -> str:
        offset, row = self._offset(point, allow_end=False)
        removed = self._content[offset]
        self._content = self._content[:offset] + self._content[offset + 1 :]
        self._line_lengths[row] -= 1
        return removed

    def replace_char(self, point: Point, char: str) -> str:
        _ensure_char(char)
        return self.replace_str(point, char)

    # ------------------------------------------------------------------
    # String operations

    def insert_str(self, point: Point, text: str) -> None:
        _ensure_single_line(text)
        span, row = self._offset_span(point, len(text))
        self._content = self._content[: span.start] + text + self._content[span.start :]
        self._line_lengths[row] += len(text)

    def remove_str(self, point: Point, size: int) -> str:
        if size < 0:
            raise ValueError("size must be non-negative")
        span, row = self._offset_span(point, size)
        removed = self._content[span.as_slice()]
        self._content = self._content[: span.start] + self._content[span.end :]
        self._line_lengths[row] -= size
        return removed

    def replace_str(self, point: Point, text: str) -> str:
        """Overwrite ``len(text)`` characters at ``point``, keeping line lengths."""

        _ensure_single_line(text)
        span, _ = self._offset_span(point, len(text))
        old = self._content[span.as_slice()]
        self._content = self._content[: span.start] + text + self._content[span.end :]
        return old

    # ------------------------------------------------------------------
    # Offset resolution

    def _row_start(self, row: int) -> Optional[int]:
        if not 0 <= row < len(self._line_lengths):
            return None
        return sum(self._line_lengths[:row])

    def _offset(self, point: Point, *, allow_end: bool) -> Tuple[int, int]:
        """Resolve ``point`` to ``(offset, row)``.

        ``allow_end`` admits ``column == line_length`` for insertion; otherwise
        the column must name an existing character.
        """

        column, row = point.as_tuple()
        start = self._row_start(row)
        if start is None:
            self._reject(point, "row")
        limit = self._line_lengths[row] if allow_end else self._line_lengths[row] - 1
        if column > limit:
            self._reject(point, "column")
        return start + column, row

    def _offset_span(self, point: Point, size: int) -> Tuple[Span, int]:
        """Resolve ``size`` characters starting at ``point`` to ``(span, row)``.

        All string operations share the rule ``column + size + 1 <= line_length``,
        one character stricter than plain insertion at end of line needs. It is
        kept as a single rule for insert, remove and replace; callers that need
        to append at end of line use ``insert_char`` or ``insert_line``.
        """

        column, row = point.as_tuple()
        start = self._row_start(row)
        if start is None:
            self._reject(point, "row")
        if column + size + 1 > self._line_lengths[row]:
            self._reject(point, "span", size=size)
        offset = start + column
        return Span(offset, offset + size), row

    def _reject(self, point: Point, reason: str, **data: object) -> NoReturn:
        telemetry.record_event(
            "store.out_of_bounds",
            level="debug",
            data={"point": point, "reason": reason, "lines": self.line_count, **data},
        )
        raise OutOfBoundsError(point)

    def __repr__(self) -> str:
        return (
            f"TextStore(name={self.name!r}, lines={self.line_count}, "
            f"chars={len(self._content)}, cursor={self.cursor})"
        )


def _ensure_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _ensure_single_line(char)


def _ensure_single_line(text: str) -> None:
    if "\n" in text or "\r" in text:
        raise ValueError("line separators cannot be stored inside a line")
