"""
Startup configuration for the snake simulation.

Values come from the environment (optionally a .env file) and fall back to
the defaults in domain.constants. Command line flags override both.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_TICK_INTERVAL,
)


@dataclass
class GameConfig:
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    tick_interval: float = DEFAULT_TICK_INTERVAL
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.grid_width}x{self.grid_height}"
            )
        if self.tick_interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_interval}")


def _env_value(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


def load_config(env_file: Optional[str] = None) -> GameConfig:
    """Build a GameConfig from SNAKE_* environment variables."""
    load_dotenv(env_file)
    return GameConfig(
        grid_width=_env_value("SNAKE_GRID_WIDTH", int, DEFAULT_GRID_WIDTH),
        grid_height=_env_value("SNAKE_GRID_HEIGHT", int, DEFAULT_GRID_HEIGHT),
        tick_interval=_env_value("SNAKE_TICK_INTERVAL", float, DEFAULT_TICK_INTERVAL),
        seed=_env_value("SNAKE_SEED", int, None),
    )
