"""
Fixed-interval tick driver built on the ``schedule`` library.

The driver owns the timer lifecycle: the game loop only tells it when the
interval changes, and the driver cancels the pending job before arming
the new one so two schedules never interleave.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Calls ``callback`` every ``interval_ms`` milliseconds while running.

    Only one job is ever registered on the scheduler.
    """

    def __init__(
        self,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.scheduler = scheduler or schedule.Scheduler()
        self._sleep = sleep
        self._job: Optional[schedule.Job] = None
        self._callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._job is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if self.running:
            raise RuntimeError("Tick driver is already running; call reschedule() or stop() first.")
        self._callback = callback
        self._arm(interval_ms)
        logger.info("Tick driver started at %s ms", interval_ms)

    def reschedule(self, new_interval_ms: int) -> None:
        if not self.running:
            raise RuntimeError("Tick driver is not running.")
        if new_interval_ms == self.interval_ms:
            return
        old = self.interval_ms
        self.scheduler.cancel_job(self._job)
        self._job = None
        self._arm(new_interval_ms)
        logger.info("Tick interval changed %s -> %s ms", old, new_interval_ms)

    def stop(self) -> None:
        if self._job is not None:
            self.scheduler.cancel_job(self._job)
            self._job = None
            logger.info("Tick driver stopped after %s ticks", self.ticks)

    def _arm(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._job = self.scheduler.every(interval_ms / 1000.0).seconds.do(self._fire)

    def _fire(self) -> None:
        self.ticks += 1
        self._callback()

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Block and fire ticks until stopped or ``max_ticks`` have run."""
        while self.running:
            if max_ticks is not None and self.ticks >= max_ticks:
                self.stop()
                break
            self.scheduler.run_pending()
            idle = self.scheduler.idle_seconds
            if idle is not None and idle > 0:
                self._sleep(idle)
