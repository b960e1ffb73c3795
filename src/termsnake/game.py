# src/termsnake/game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np  # type: ignore

from .controls import Control, FrameInput
from .entity import Entity, Snake, new_snake, random_cell
from .geometry import Board
from .simulation import spawn_food, step

logger = logging.getLogger(__name__)


class GameState(Enum):
    AWAITING_START = "awaiting_start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass
class GameSession:
    board: Board
    snake: Snake                   # head at index 0
    food: Entity
    rng: np.random.Generator
    score: int = 0
    state: GameState = GameState.AWAITING_START
    paused: bool = False
    rounds: int = 0                # rounds started so far

    @property
    def head(self) -> Entity:
        return self.snake[0]


def new_session(board: Board, rng: np.random.Generator) -> GameSession:
    snake = new_snake(random_cell(board, rng))
    food = spawn_food(snake, board, rng)
    logger.info("new session: board=%dx%d head=%s food=%s",
                board.width, board.height, snake[0].position, food.position)
    return GameSession(board=board, snake=snake, food=food, rng=rng)

def reset_round(session: GameSession) -> None:
    """Throw the old snake away and place a fresh one (length 1), new food, zero score."""
    session.snake = new_snake(random_cell(session.board, session.rng))
    session.food = spawn_food(session.snake, session.board, session.rng)
    session.score = 0

def start_round(session: GameSession) -> None:
    # the very first round plays on the layout made by new_session
    if session.rounds > 0:
        reset_round(session)
    session.rounds += 1
    session.paused = False
    session.state = GameState.PLAYING
    logger.info("round %d started at %s", session.rounds, session.head.position)


# ---------- Update ----------
def update(session: GameSession, frame: FrameInput) -> bool:
    """
    Run one frame of the state machine (and the simulation when playing).
    Return False once the player asked to quit.
    """
    if frame.quit:
        logger.info("quit requested in state %s (score=%d)", session.state.value, session.score)
        return False

    if session.state is GameState.AWAITING_START or session.state is GameState.GAME_OVER:
        if frame.control is Control.CONFIRM:
            start_round(session)
        return True

    # PLAYING
    if frame.control is Control.TOGGLE_PAUSE:
        session.paused = not session.paused
        logger.info("paused" if session.paused else "resumed")
    if session.paused:
        return True

    result = step(session, frame.turn)
    if result.collided:
        session.state = GameState.GAME_OVER
        logger.info("game over: score=%d length=%d", session.score, len(session.snake))
    return True
