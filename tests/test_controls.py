"""Tests for termsnake.controls"""
import pytest

from termsnake.config import DOWN, LEFT, RIGHT, UP, ZERO
from termsnake.controls import Control, FrameInput, Key, map_input


class TestReversalGuard:
    @pytest.mark.parametrize("key,expected", [(Key.UP, UP), (Key.DOWN, DOWN)])
    def test_cross_axis_turn_accepted(self, key, expected):
        assert map_input([key], RIGHT).turn == expected

    def test_exact_reverse_rejected(self):
        assert map_input([Key.LEFT], RIGHT).turn is None

    def test_same_direction_ignored(self):
        assert map_input([Key.RIGHT], RIGHT).turn is None

    def test_vertical_motion(self):
        assert map_input([Key.DOWN], UP).turn is None
        assert map_input([Key.LEFT], UP).turn == LEFT

    def test_stationary_head_accepts_anything(self):
        for key, d in [(Key.UP, UP), (Key.DOWN, DOWN), (Key.LEFT, LEFT), (Key.RIGHT, RIGHT)]:
            assert map_input([key], ZERO).turn == d


class TestBatch:
    def test_empty(self):
        assert map_input([], RIGHT) == FrameInput()

    def test_first_accepted_key_wins(self):
        frame = map_input([Key.LEFT, Key.UP, Key.DOWN], RIGHT)
        assert frame.turn == UP

    def test_opposite_keys_same_frame(self):
        assert map_input([Key.DOWN, Key.UP], RIGHT).turn == DOWN

    def test_stops_at_unrecognised_key(self):
        assert map_input([Key.OTHER, Key.UP], RIGHT).turn is None

    def test_turn_before_unrecognised_key_kept(self):
        assert map_input([Key.UP, Key.OTHER], RIGHT).turn == UP


class TestControl:
    def test_confirm(self):
        assert map_input([Key.CONFIRM], RIGHT).control is Control.CONFIRM

    def test_pause(self):
        assert map_input([Key.PAUSE], RIGHT).control is Control.TOGGLE_PAUSE

    def test_first_control_wins(self):
        assert map_input([Key.PAUSE, Key.CONFIRM], RIGHT).control is Control.TOGGLE_PAUSE

    @pytest.mark.parametrize("keys", [
        [Key.QUIT],
        [Key.CONFIRM, Key.QUIT],
        [Key.QUIT, Key.CONFIRM],
        [Key.OTHER, Key.PAUSE, Key.QUIT],
    ])
    def test_quit_has_priority(self, keys):
        frame = map_input(keys, RIGHT)
        assert frame.control is Control.QUIT
        assert frame.quit

    def test_direction_and_control_together(self):
        frame = map_input([Key.UP, Key.CONFIRM], RIGHT)
        assert frame.turn == UP
        assert frame.control is Control.CONFIRM
