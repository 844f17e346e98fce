"""Read-only line snapshots handed to renderers."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterator, Sequence, Tuple, overload


class LineView(Sequence[str]):
    """Lazy, restartable sequence of lines taken from a store at one moment.

    Lines are sliced out of the captured content on demand. Later edits to the
    store do not show up here.
    """

    __slots__ = ("_content", "_lengths", "_starts")

    def __init__(self, content: str, line_lengths: Sequence[int]) -> None:
        self._content = content
        self._lengths: Tuple[int, ...] = tuple(line_lengths)
        self._starts: Tuple[int, ...] = tuple(accumulate(self._lengths, initial=0))

    def __len__(self) -> int:
        return len(self._lengths)

    def __iter__(self) -> Iterator[str]:
        offset = 0
        for length in self._lengths:
            yield self._content[offset : offset + length]
            offset += length

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self[i] for i in range(*index.indices(len(self))))
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("line index out of range")
        start = self._starts[index]
        return self._content[start : start + self._lengths[index]]

    def __repr__(self) -> str:
        return f"LineView(lines={len(self)}, chars={len(self._content)})"
