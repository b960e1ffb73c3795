# src/termsnake/__init__.py
"""Real-time snake for the text terminal."""

from .game import GameSession, GameState, new_session, update
from .geometry import Board, Vector2

__version__ = "0.1.0"

__all__ = ["Board", "Vector2", "GameSession", "GameState", "new_session", "update"]
