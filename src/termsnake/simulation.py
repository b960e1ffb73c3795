# src/termsnake/simulation.py
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np  # type: ignore

from .entity import Entity, Snake, body_segment, new_food, occupied, random_cell
from .errors import BoardFullError
from .geometry import Board, Vector2

if TYPE_CHECKING:
    from .game import GameSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    collided: bool = False
    ate: bool = False


# ---------- Helpers ----------
def propagate_body(snake: Snake) -> None:
    """Each segment takes the position/direction its predecessor had before this tick."""
    # walk from the tail so nothing is overwritten before it is read
    for i in range(len(snake) - 1, 0, -1):
        snake[i].position = snake[i - 1].position
        snake[i].direction = snake[i - 1].direction

def advance_head(head: Entity, board: Board, turn: Optional[Vector2] = None) -> None:
    if turn is not None:
        head.direction = turn
    head.position = (head.position + head.direction).wrap(board)

def hits_self(snake: Snake) -> bool:
    head = snake[0].position
    return any(seg.position == head for seg in snake[1:])

def spawn_food(snake: Snake, board: Board, rng: np.random.Generator) -> Entity:
    """Rejection-sample a free cell for the food."""
    taken = occupied(snake)
    if len(taken) >= board.cells:
        raise BoardFullError(
            f"snake of length {len(snake)} leaves no free cell on a "
            f"{board.width}x{board.height} board"
        )
    while True:
        cell = random_cell(board, rng)
        if cell not in taken:
            return new_food(cell)

def grow(snake: Snake, board: Board) -> Entity:
    """Append a segment on the cell the tail just left."""
    tail = snake[-1]
    seg = body_segment((tail.position - tail.direction).wrap(board), tail.direction)
    snake.append(seg)
    return seg


# ---------- Tick ----------
def step(session: GameSession, turn: Optional[Vector2] = None) -> TickResult:
    """
    Advance the session by one tick.
    Returns whether the head ran into the body and whether it ate.
    """
    snake = session.snake
    propagate_body(snake)
    advance_head(snake[0], session.board, turn)

    collided = hits_self(snake)

    ate = snake[0].position == session.food.position
    if ate:
        session.score += 1
        grow(snake, session.board)
        session.food = spawn_food(snake, session.board, session.rng)
        logger.debug("food eaten: score=%d length=%d food=%s",
                     session.score, len(snake), session.food.position)

    return TickResult(collided=collided, ate=ate)
