# src/termsnake/main.py
from __future__ import annotations
import argparse
import curses
import locale
import logging
import os
import sys
from typing import List, Optional, Sequence

import numpy as np  # type: ignore

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # type: ignore  # noqa: E402

from .config import DEFAULT_FPS, Config
from .controls import map_input
from .errors import SnakeError
from .game import GameSession, new_session, update
from .render import CursesRenderer, build_render_list, status_text
from .terminal import CursesKeySource, board_for_screen, setup_terminal

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food/snake placement")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="frames (ticks) per second")
    parser.add_argument("--width", type=int, default=None, help="board width in cells (default: fill terminal)")
    parser.add_argument("--height", type=int, default=None, help="board height in cells (default: fill terminal)")
    parser.add_argument("--log-file", default=None, help="write logs to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return Config(
        seed=args.seed,
        fps=args.fps,
        width=args.width,
        height=args.height,
        log_file=args.log_file,
        log_level=args.log_level,
    ).validate()

def configure_logging(cfg: Config) -> None:
    # curses owns the screen, so logs only ever go to a file
    if cfg.log_file:
        logging.basicConfig(
            filename=cfg.log_file,
            level=getattr(logging, cfg.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("termsnake").addHandler(logging.NullHandler())


# ---------- Frame driver ----------
def run_loop(session: GameSession, keys, renderer, clock, fps: int) -> int:
    """
    input -> state machine/simulation -> render -> sleep, until quit.
    Returns the number of frames drawn.
    """
    frames = 0
    running = True
    while running:
        # 1) input
        frame = map_input(keys.poll(), session.head.direction)

        # 2) update
        running = update(session, frame)

        # 3) render
        renderer.draw(build_render_list(session), session.score, status_text(session))
        frames += 1

        # 4) pace
        if running:
            clock.tick(fps)
    return frames

def play(stdscr, cfg: Config) -> GameSession:
    setup_terminal(stdscr)
    rows, cols = stdscr.getmaxyx()
    board = board_for_screen(rows, cols, cfg.width, cfg.height)
    rng = np.random.default_rng(cfg.seed)
    logger.info("starting: board=%dx%d fps=%d seed=%s", board.width, board.height, cfg.fps, cfg.seed)

    session = new_session(board, rng)
    frames = run_loop(
        session,
        CursesKeySource(stdscr),
        CursesRenderer(stdscr, board),
        pygame.time.Clock(),
        cfg.fps,
    )
    logger.info("stopped after %d frames", frames)
    return session

def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_args(argv)
        configure_logging(cfg)
        locale.setlocale(locale.LC_ALL, "")
        session = curses.wrapper(play, cfg)
    except SnakeError as e:
        logger.error("%s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 1
    print(f"score: {session.score}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
