"""
Fixed-cadence driver that calls SnakeGame.tick().

The game itself never schedules anything. This service registers one job
with the `schedule` library and runs a single-threaded loop, so a tick
always finishes before the next one can start.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

SCHEDULER_LOOP_SLEEP_SECONDS = 0.05


class TickScheduler:
    """
    Runs game.tick() every `interval` seconds.

    Args:
        game: anything with a tick() method
        interval: seconds between ticks
        before_tick: called with the game right before each tick; input
            producers use it to push a direction
        after_tick: called with the game right after each tick
    """

    def __init__(
        self,
        game,
        interval: float,
        before_tick: Optional[Callable] = None,
        after_tick: Optional[Callable] = None
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.game = game
        self.interval = interval
        self.before_tick = before_tick
        self.after_tick = after_tick
        self.ticks_run = 0
        self.max_ticks: Optional[int] = None

        self._scheduler = schedule.Scheduler()
        self._job: Optional[schedule.Job] = None

    @property
    def running(self) -> bool:
        return self._job is not None and self._job in self._scheduler.jobs

    def _step(self):
        if self.before_tick is not None:
            self.before_tick(self.game)
        self.game.tick()
        self.ticks_run += 1
        if self.after_tick is not None:
            self.after_tick(self.game)

        if self.max_ticks is not None and self.ticks_run >= self.max_ticks:
            logger.info("Reached %d ticks, stopping", self.ticks_run)
            return schedule.CancelJob
        return None

    def start(self, max_ticks: Optional[int] = None):
        """Register the tick job. max_ticks=None runs until stop()."""
        if max_ticks is not None and max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive, got {max_ticks}")
        self.stop()
        self.max_ticks = max_ticks
        self.ticks_run = 0
        self._job = self._scheduler.every(self.interval).seconds.do(self._step)
        logger.info("Ticking every %.3fs", self.interval)

    def stop(self):
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            self._job = None

    def run_pending(self):
        self._scheduler.run_pending()

    def run(self, max_ticks: Optional[int] = None):
        """Block, ticking at the fixed cadence, until stopped or max_ticks is hit."""
        self.start(max_ticks)
        try:
            while self.running:
                self.run_pending()
                idle = self._scheduler.idle_seconds
                if idle is None:
                    break
                time.sleep(min(max(idle, 0), SCHEDULER_LOOP_SLEEP_SECONDS))
        except KeyboardInterrupt:
            logger.info("Interrupted after %d ticks", self.ticks_run)
        finally:
            self.stop()
        return self.ticks_run
