"""
Translation from key names to directions.

Whatever polls the keyboard passes key names in here; only recognised
directional keys reach the game, everything else is dropped.
"""

import logging
from typing import Dict, Optional

from domain.constants import DOWN, LEFT, RIGHT, UP

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, str] = {
    "up": UP,
    "arrowup": UP,
    "w": UP,
    "down": DOWN,
    "arrowdown": DOWN,
    "s": DOWN,
    "left": LEFT,
    "arrowleft": LEFT,
    "a": LEFT,
    "right": RIGHT,
    "arrowright": RIGHT,
    "d": RIGHT,
}


def translate_key(key: str) -> Optional[str]:
    """Return the direction bound to key, or None if it has no binding."""
    if not key:
        return None
    return KEY_BINDINGS.get(key.strip().lower())


class KeyboardController:
    """Pushes one direction into the game per recognised key press."""

    def __init__(self, game):
        self.game = game

    def on_key_press(self, key: str) -> bool:
        direction = translate_key(key)
        if direction is None:
            logger.debug("Ignoring key %r", key)
            return False
        self.game.set_direction(direction)
        return True
