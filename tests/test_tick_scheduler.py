"""
Tests for services/tick_scheduler.py - the fixed-cadence tick driver.
"""

import pytest
import sys
import os
from unittest.mock import Mock, patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.tick_scheduler import TickScheduler


@patch('services.tick_scheduler.time.sleep')
class TestTickScheduler:
    """Tests for TickScheduler."""

    def test_runs_requested_number_of_ticks(self, mock_sleep):
        game = Mock()
        scheduler = TickScheduler(game, interval=0.001)

        ticks = scheduler.run(max_ticks=3)

        assert ticks == 3
        assert game.tick.call_count == 3
        assert scheduler.running is False

    def test_hooks_wrap_each_tick(self, mock_sleep):
        """before_tick runs before the tick and after_tick after it."""
        calls = []
        game = Mock()
        game.tick.side_effect = lambda: calls.append("tick")
        scheduler = TickScheduler(
            game,
            interval=0.001,
            before_tick=lambda g: calls.append("before"),
            after_tick=lambda g: calls.append("after"),
        )

        scheduler.run(max_ticks=2)

        assert calls == ["before", "tick", "after", "before", "tick", "after"]

    def test_hooks_receive_game(self, mock_sleep):
        game = Mock()
        before = Mock()
        scheduler = TickScheduler(game, interval=0.001, before_tick=before)

        scheduler.run(max_ticks=1)

        before.assert_called_once_with(game)

    def test_stop_cancels_job(self, mock_sleep):
        scheduler = TickScheduler(Mock(), interval=5)
        scheduler.start()
        assert scheduler.running is True

        scheduler.stop()

        assert scheduler.running is False

    def test_nothing_runs_before_interval(self, mock_sleep):
        game = Mock()
        scheduler = TickScheduler(game, interval=60)
        scheduler.start()

        scheduler.run_pending()

        game.tick.assert_not_called()
        scheduler.stop()

    def test_keyboard_interrupt_stops_loop(self, mock_sleep):
        game = Mock()
        game.tick.side_effect = KeyboardInterrupt
        scheduler = TickScheduler(game, interval=0.001)

        assert scheduler.run() == 0
        assert scheduler.running is False

    @pytest.mark.parametrize("interval", [0, -1])
    def test_non_positive_interval_raises(self, mock_sleep, interval):
        with pytest.raises(ValueError):
            TickScheduler(Mock(), interval=interval)

    def test_non_positive_max_ticks_raises(self, mock_sleep):
        scheduler = TickScheduler(Mock(), interval=1)
        with pytest.raises(ValueError):
            scheduler.start(max_ticks=0)
