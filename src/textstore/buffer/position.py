"""Point and span coordinates used to address buffer content."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Point:
    """Zero-based ``(column, row)`` coordinate inside a buffer."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Point coordinates must be non-negative, got ({self.x}, {self.y})"
            )

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def with_x(self, x: int) -> "Point":
        return replace(self, x=x)

    def with_y(self, y: int) -> "Point":
        return replace(self, y=y)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` character offset range into buffer content."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)
