# src/termsnake/render.py
from __future__ import annotations
import curses
from typing import Dict, List, Sequence

from .config import EMPTY_GLYPH
from .entity import Entity
from .game import GameSession, GameState
from .geometry import Board, Vector2

TITLE = "SNAKE-GAME"

STATUS_START = "press ENTER to start, q to quit"
STATUS_PAUSED = "paused: press p to resume"
STATUS_GAME_OVER = "game over! press ENTER to restart, q to quit"


# ---------- Render list ----------
def build_render_list(session: GameSession) -> List[Entity]:
    """Everything visible this frame: snake (head first), then food."""
    objects = [seg.copy() for seg in session.snake]
    objects.append(session.food.copy())
    return objects

def status_text(session: GameSession) -> str:
    if session.state is GameState.AWAITING_START:
        return STATUS_START
    if session.state is GameState.GAME_OVER:
        return STATUS_GAME_OVER
    return STATUS_PAUSED if session.paused else ""


# ---------- Layout ----------
def _cell_map(entities: Sequence[Entity]) -> Dict[Vector2, str]:
    cells: Dict[Vector2, str] = {}
    for obj in entities:
        # first entity at a cell wins
        cells.setdefault(obj.position, obj.glyph)
    return cells

def compose_frame(board: Board, entities: Sequence[Entity], score: int, status: str = "") -> List[str]:
    cells = _cell_map(entities)
    lines = [TITLE, "-" * len(TITLE)]
    lines.append("┌" + "─" * board.width + "┐")
    for y in range(board.height):
        row = "".join(cells.get(Vector2(x, y), EMPTY_GLYPH) for x in range(board.width))
        lines.append("│" + row + "│")
    lines.append("└" + "─" * board.width + "┘")
    lines.append(f"score: {score}")
    lines.append(status)
    return lines


# ---------- Curses ----------
class CursesRenderer:
    """Full-frame redraw onto a curses window."""

    def __init__(self, window, board: Board):
        self.window = window
        self.board = board

    def draw(self, entities: Sequence[Entity], score: int, status: str = "") -> None:
        self.window.erase()
        for row, line in enumerate(compose_frame(self.board, entities, score, status)):
            try:
                self.window.addstr(row, 0, line)
            except curses.error:
                # writing into the bottom-right cell moves the cursor off-screen
                pass
        self.window.refresh()
