#!/usr/bin/env python3
"""Run the snake simulation headless in the terminal.

An autopilot player stands in for the keyboard: before every tick it looks
at a snapshot and pushes a direction into the game. The board is printed
after each tick unless --quiet is given.

Usage examples (from the repo root):

    python cli/run_simulation.py --ticks 50
    python cli/run_simulation.py --width 12 --height 8 --player random --seed 7

Board size, tick interval and seed default to the SNAKE_* environment
variables (a .env file is honoured), then to the built-in defaults.
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

# Ensure project modules are importable when run as a script
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import GameConfig, load_config  # noqa: E402
from players import AVAILABLE_VARIANTS, get_player_class  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402
from snake_game import SnakeGame  # noqa: E402


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a single-snake grid simulation driven by an autopilot player."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells (default: SNAKE_GRID_WIDTH or 9)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells (default: SNAKE_GRID_HEIGHT or 9)")
    parser.add_argument("--tick-interval", type=float, default=None,
                        help="Seconds between ticks (default: SNAKE_TICK_INTERVAL or 0.3)")
    parser.add_argument("--ticks", type=int, default=30,
                        help="Number of ticks to run")
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="greedy",
                        help="Autopilot that chooses the heading")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board after each tick")
    parser.add_argument("--env-file", type=str, default=None,
                        help="Path to a .env file with SNAKE_* settings")
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Apply command line overrides on top of the environment config."""
    base = load_config(args.env_file)
    return GameConfig(
        grid_width=args.width if args.width is not None else base.grid_width,
        grid_height=args.height if args.height is not None else base.grid_height,
        tick_interval=(
            args.tick_interval if args.tick_interval is not None else base.tick_interval
        ),
        seed=args.seed if args.seed is not None else base.seed,
    )


def run_simulation(config: GameConfig, ticks: int, player_key: str = "greedy",
                   show_board: bool = True) -> dict:
    """
    Runs a single headless simulation.

    Returns:
        A dictionary summarizing the run (ticks, length, apples_eaten, head, food).
    """
    game = SnakeGame(
        width=config.grid_width,
        height=config.grid_height,
        seed=config.seed,
    )

    player_class = get_player_class(player_key)
    if player_key == "random":
        player = player_class(rng=random.Random(config.seed))
    else:
        player = player_class()

    def feed_direction(g: SnakeGame):
        g.set_direction(player.get_move(g.get_current_state()))

    def show(g: SnakeGame):
        if show_board:
            print(f"Tick {g.tick_number} (length {len(g.snake)}, eaten {g.apples_eaten})")
            g.print_board()

    scheduler = TickScheduler(
        game,
        interval=config.tick_interval,
        before_tick=feed_direction,
        after_tick=show,
    )
    ticks_run = scheduler.run(max_ticks=ticks)

    state = game.get_current_state()
    return {
        "ticks": ticks_run,
        "length": len(state.segments),
        "apples_eaten": state.apples_eaten,
        "head": state.head,
        "food": state.food,
    }


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        config = resolve_config(args)
        if args.ticks <= 0:
            raise ValueError(f"--ticks must be positive, got {args.ticks}")
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    result = run_simulation(config, args.ticks, args.player, show_board=not args.quiet)

    logger.info(
        "Done. ticks=%d, length=%d, eaten=%d",
        result["ticks"], result["length"], result["apples_eaten"],
    )
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
