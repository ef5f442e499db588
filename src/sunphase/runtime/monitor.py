"""Periodic poller tying the clock, solar calculator and tracker together."""
from threading import Event, Thread
from typing import Optional
import logging

from ..core.solar import compute_boundary
from ..core.timebase import minute_of_day
from ..model.geo import RefreshPolicy, Settings
from ..model.phase import TransitionEvent
from .clock import SimulationClock
from .hooks import PhaseHooks
from .tracker import DayPhaseTracker

logger = logging.getLogger(__name__)


class DayPhaseMonitor:
    """Polls the clock and fires day/night hooks on each transition."""

    def __init__(
        self,
        settings: Settings,
        clock: Optional[SimulationClock] = None,
        hooks: Optional[PhaseHooks] = None,
    ):
        """Initialize monitor.

        Args:
            settings: Validated location and polling settings
            clock: Clock to read (default: real time in the configured offset)
            hooks: Transition hooks (default: theme switching only)
        """
        self.settings = settings
        self.clock = clock or SimulationClock(utc_offset=settings.geo.utc_offset)
        self.hooks = hooks or PhaseHooks()

        today = self.clock.now().date()
        self.tracker = DayPhaseTracker(compute_boundary(today, settings.geo))
        self.tracker.add_listener(self.hooks)

        self._running = False
        self._stop_event = Event()
        self._thread: Optional[Thread] = None
        self._ticks = 0

    @property
    def ticks(self) -> int:
        return self._ticks

    def poll(self) -> Optional[TransitionEvent]:
        """Run one classification against the current clock time.

        Returns:
            The TransitionEvent if the phase changed, else None
        """
        now = self.clock.now()
        self._refresh_boundary(now.date())
        self._ticks += 1
        return self.tracker.tick(minute_of_day(now))

    def _refresh_boundary(self, today) -> None:
        if self.settings.refresh is RefreshPolicy.ONCE:
            return
        if self.tracker.boundary.day == today:
            return
        logger.info(f"Date rolled over to {today.isoformat()}, recomputing sunrise/sunset")
        self.tracker.set_boundary(compute_boundary(today, self.settings.geo))

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Poll until stopped, waiting ``poll_interval`` between polls.

        Args:
            max_ticks: Stop after this many polls (default: run until stopped)
        """
        self._running = True
        polled = 0
        try:
            while self._running and not self._stop_event.is_set():
                self.poll()
                polled += 1
                if max_ticks is not None and polled >= max_ticks:
                    break
                self._stop_event.wait(self.clock.wall_seconds(self.settings.poll_interval))
        finally:
            self._running = False

    def start(self) -> None:
        """Start polling in a background thread."""
        if self._running:
            logger.warning("Monitor already running")
            return

        self._stop_event.clear()
        self._running = True
        self._thread = Thread(target=self.run, daemon=True)
        self._thread.start()
        logger.info("Monitor started")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop polling.

        Args:
            timeout: Maximum time to wait for the polling thread
        """
        logger.info("Stopping monitor")
        self._running = False
        self._stop_event.set()

        if self._thread:
            self._thread.join(timeout=timeout)
            self._thread = None

    def is_running(self) -> bool:
        return self._running
