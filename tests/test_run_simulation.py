"""
Tests for cli/run_simulation.py - the headless command line runner.
"""

import json
import pytest
import sys
import os
from unittest.mock import patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.run_simulation import build_parser, main, resolve_config, run_simulation
from config import GameConfig


@patch('services.tick_scheduler.time.sleep')
class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_greedy_run(self, mock_sleep):
        config = GameConfig(grid_width=5, grid_height=5, tick_interval=0.001, seed=3)

        result = run_simulation(config, ticks=6, player_key="greedy", show_board=False)

        assert result["ticks"] == 6
        assert result["length"] == result["apples_eaten"] + 1
        assert 0 <= result["head"][0] < 5
        assert 0 <= result["head"][1] < 5

    def test_random_run_prints_board(self, mock_sleep, capsys):
        config = GameConfig(grid_width=4, grid_height=4, tick_interval=0.001, seed=1)

        result = run_simulation(config, ticks=2, player_key="random", show_board=True)

        out = capsys.readouterr().out
        assert result["ticks"] == 2
        assert "Tick 1" in out
        assert "Tick 2" in out


@patch('cli.run_simulation.load_config', return_value=GameConfig())
class TestCommandLine:
    """Tests for argument handling and main()."""

    def test_flags_override_config(self, mock_load_config):
        args = build_parser().parse_args(["--width", "12", "--seed", "5"])

        config = resolve_config(args)

        assert config.grid_width == 12
        assert config.grid_height == 9
        assert config.seed == 5

    def test_env_values_used_without_flags(self, mock_load_config):
        mock_load_config.return_value = GameConfig(grid_width=6, grid_height=4, tick_interval=1.0)
        config = resolve_config(build_parser().parse_args([]))
        assert (config.grid_width, config.grid_height, config.tick_interval) == (6, 4, 1.0)

    def test_invalid_board_exits(self, mock_load_config):
        with pytest.raises(SystemExit):
            main(["--width", "0"])

    def test_invalid_tick_count_exits(self, mock_load_config):
        with pytest.raises(SystemExit):
            main(["--ticks", "0"])

    @patch('services.tick_scheduler.time.sleep')
    def test_main_prints_summary(self, mock_sleep, mock_load_config, capsys):
        main(["--ticks", "3", "--quiet", "--tick-interval", "0.001", "--seed", "2"])

        out = capsys.readouterr().out
        summary = json.loads(out[out.index("{"):])
        assert summary["ticks"] == 3
        assert summary["length"] >= 1
