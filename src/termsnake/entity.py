# src/termsnake/entity.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

import numpy as np  # type: ignore

from .config import BODY_GLYPH, FOOD_GLYPH, HEAD_GLYPH, START_DIRECTION, ZERO
from .geometry import Board, Vector2


@dataclass
class Entity:
    position: Vector2
    direction: Vector2
    glyph: str

    def copy(self) -> Entity:
        # Vector2 is frozen, so a shallow copy is already a value copy
        return Entity(self.position, self.direction, self.glyph)


Snake = List[Entity]   # head at index 0


# ---------- Constructors ----------
def random_cell(board: Board, rng: np.random.Generator) -> Vector2:
    """Uniformly random cell in [0, width) x [0, height)."""
    return Vector2(int(rng.integers(board.width)), int(rng.integers(board.height)))

def new_snake(position: Vector2, direction: Vector2 = START_DIRECTION) -> Snake:
    return [Entity(position, direction, HEAD_GLYPH)]

def new_food(position: Vector2) -> Entity:
    return Entity(position, ZERO, FOOD_GLYPH)

def body_segment(position: Vector2, direction: Vector2) -> Entity:
    return Entity(position, direction, BODY_GLYPH)

def occupied(snake: Snake) -> set:
    return {seg.position for seg in snake}
