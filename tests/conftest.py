"""Shared fixtures: hand-built sessions with a seeded generator."""
from __future__ import annotations

import numpy as np
import pytest

from termsnake.config import BODY_GLYPH, HEAD_GLYPH
from termsnake.entity import Entity, new_food
from termsnake.game import GameSession, GameState
from termsnake.geometry import Board, Vector2


def build_snake(cells, direction=(1, 0)):
    """cells: [(x, y)] head first; every segment gets the same direction unless (x, y, dx, dy)."""
    snake = []
    for i, cell in enumerate(cells):
        if len(cell) == 4:
            x, y, dx, dy = cell
        else:
            (x, y), (dx, dy) = cell, direction
        snake.append(Entity(Vector2(x, y), Vector2(dx, dy), HEAD_GLYPH if i == 0 else BODY_GLYPH))
    return snake


@pytest.fixture
def make_session():
    def _make(width=10, height=10, cells=((5, 5),), direction=(1, 0),
              food=(0, 0), seed=0, state=GameState.PLAYING, **kwargs):
        return GameSession(
            board=Board(width, height),
            snake=build_snake(cells, direction),
            food=new_food(Vector2(*food)),
            rng=np.random.default_rng(seed),
            state=state,
            **kwargs,
        )
    return _make
