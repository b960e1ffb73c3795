# src/termsnake/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .geometry import Vector2

# ----- Frame pacing -----
DEFAULT_FPS = 10

# ----- Glyphs -----
HEAD_GLYPH = "X"
BODY_GLYPH = "X"
FOOD_GLYPH = "O"
EMPTY_GLYPH = " "

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = Vector2(0, -1), Vector2(0, 1), Vector2(-1, 0), Vector2(1, 0)
ZERO = Vector2(0, 0)
START_DIRECTION = RIGHT

# ----- Screen layout -----
# title + underline + top border, then bottom border + score + status
HEADER_ROWS = 3
FOOTER_ROWS = 3
BORDER_COLS = 2

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = DEFAULT_FPS
    width: Optional[int] = None      # None -> fill the terminal
    height: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"

    def validate(self) -> "Config":
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")
        return self
