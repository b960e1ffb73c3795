# src/termsnake/geometry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .errors import ConfigurationError


@dataclass(frozen=True)
class Vector2:
    """Integer (x, y) pair, used for both positions and directions."""
    x: int
    y: int

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        # lets callers unpack like the old (dx, dy) tuples
        yield self.x
        yield self.y

    def wrap(self, board: Board) -> Vector2:
        """Fold the vector back onto the board (toroidal edges)."""
        w, h = board.width, board.height
        return Vector2(((self.x % w) + w) % w, ((self.y % h) + h) % h)

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0


@dataclass(frozen=True)
class Board:
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"board must be at least 1x1, got {self.width}x{self.height}"
            )

    @property
    def cells(self) -> int:
        return self.width * self.height

    def contains(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height


def same_axis(a: Vector2, b: Vector2) -> bool:
    """True if both directions move along the same axis (a stationary vector has no axis)."""
    if a.is_zero or b.is_zero:
        return False
    return (a.x != 0) == (b.x != 0)
