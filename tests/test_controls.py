"""
Tests for controls.py - key name translation.
"""

import pytest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from controls import KeyboardController, translate_key
from domain import Food, FoodSpawner, UP, DOWN, LEFT, RIGHT
from snake_game import SnakeGame


class TestTranslateKey:
    """Tests for translate_key()."""

    @pytest.mark.parametrize("key,expected", [
        ("up", UP),
        ("ArrowDown", DOWN),
        ("a", LEFT),
        ("D", RIGHT),
        (" w ", UP),
    ])
    def test_bound_keys(self, key, expected):
        assert translate_key(key) == expected

    @pytest.mark.parametrize("key", ["q", "space", "enter", "", None])
    def test_unbound_keys_are_ignored(self, key):
        """Keys with no binding map to None rather than raising."""
        assert translate_key(key) is None


class TestKeyboardController:
    """Tests for KeyboardController."""

    def _game(self):
        spawner = FoodSpawner(seed=0)
        spawner.spawn = lambda board: Food((8, 8))
        return SnakeGame(width=9, height=9, start=(4, 4), spawner=spawner)

    def test_key_press_sets_direction(self):
        game = self._game()
        controller = KeyboardController(game)

        assert controller.on_key_press("right") is True
        game.tick()

        assert game.segments()[0][0] == (5, 4)

    def test_unknown_key_keeps_direction(self):
        game = self._game()
        controller = KeyboardController(game)
        controller.on_key_press("left")

        assert controller.on_key_press("escape") is False
        assert game.direction.current() == LEFT
