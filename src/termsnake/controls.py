# src/termsnake/controls.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from .config import UP, DOWN, LEFT, RIGHT
from .geometry import Vector2, same_axis


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()
    PAUSE = auto()
    QUIT = auto()
    OTHER = auto()


class Control(Enum):
    CONFIRM = auto()
    TOGGLE_PAUSE = auto()
    QUIT = auto()


KEY_TO_DIR = {
    Key.UP: UP,
    Key.DOWN: DOWN,
    Key.LEFT: LEFT,
    Key.RIGHT: RIGHT,
}

KEY_TO_CONTROL = {
    Key.CONFIRM: Control.CONFIRM,
    Key.PAUSE: Control.TOGGLE_PAUSE,
}


@dataclass(frozen=True)
class FrameInput:
    """What one frame's worth of key events amounts to."""
    turn: Optional[Vector2] = None
    control: Optional[Control] = None

    @property
    def quit(self) -> bool:
        return self.control is Control.QUIT


def can_turn(cand: Vector2, current: Vector2) -> bool:
    """Reversal guard: only turns onto the other axis are allowed."""
    return not same_axis(cand, current)

def map_input(events: Iterable[Key], head_direction: Vector2) -> FrameInput:
    """
    Fold the keys drained this frame into at most one turn and one control.

    - the first direction key that passes the reversal guard wins, the rest
      are consumed;
    - direction handling stops at the first unrecognised key;
    - QUIT anywhere in the batch beats every other control.
    """
    turn: Optional[Vector2] = None
    control: Optional[Control] = None
    steering = True

    for key in events:
        if key is Key.QUIT:
            control = Control.QUIT
            continue
        if key in KEY_TO_DIR:
            cand = KEY_TO_DIR[key]
            if steering and turn is None and can_turn(cand, head_direction):
                turn = cand
        elif key in KEY_TO_CONTROL:
            if control is None:
                control = KEY_TO_CONTROL[key]
        else:
            steering = False

    return FrameInput(turn=turn, control=control)
