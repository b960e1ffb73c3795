# src/termsnake/errors.py


class SnakeError(Exception):
    """Base class for errors raised by termsnake."""


class ConfigurationError(SnakeError):
    """The board, terminal or frame rate cannot host a game."""


class BoardFullError(SnakeError):
    """Food cannot be placed because the snake covers every cell."""
