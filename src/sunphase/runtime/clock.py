"""Wall clock for the phase monitor.

Reports local time in the configured fixed UTC offset. The clock can run
faster than real time or be pinned, which lets a whole day be replayed in
seconds.
"""
from datetime import datetime, timedelta, timezone
from threading import RLock
from typing import Optional
import time


class SimulationClock:
    """Clock in a fixed UTC offset with optional time acceleration."""

    def __init__(
        self,
        start_time: Optional[datetime] = None,
        speed: float = 1.0,
        utc_offset: int = 0,
        paused: bool = False,
    ):
        """Initialize clock.

        Args:
            start_time: Initial time (default: now). Naive values are taken
                as local time in ``utc_offset``.
            speed: Time acceleration factor (1.0 = real-time)
            utc_offset: Whole hours east of UTC
            paused: Whether to start paused
        """
        if speed <= 0:
            raise ValueError("Speed must be positive")

        self._lock = RLock()
        self._tz = timezone(timedelta(hours=utc_offset))
        self._start_time = self._localize(start_time or datetime.now(timezone.utc))
        self._wall_start = time.time()
        self._speed = speed
        self._paused = paused
        self._pause_sim_time: Optional[datetime] = self._start_time if paused else None

    def _localize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=self._tz)
        return value.astimezone(self._tz)

    def now(self) -> datetime:
        """Get current local time.

        Returns:
            Aware datetime in the configured offset
        """
        with self._lock:
            if self._paused:
                return self._pause_sim_time

            wall_elapsed = time.time() - self._wall_start
            return self._start_time + timedelta(seconds=wall_elapsed * self._speed)

    def set_time(self, new_time: datetime) -> None:
        """Jump to a specific time.

        Args:
            new_time: The time to jump to
        """
        with self._lock:
            self._start_time = self._localize(new_time)
            self._wall_start = time.time()
            if self._paused:
                self._pause_sim_time = self._start_time

    def set_speed(self, speed: float) -> None:
        """Change time acceleration factor.

        Args:
            speed: New speed multiplier (must be > 0)
        """
        if speed <= 0:
            raise ValueError("Speed must be positive")

        with self._lock:
            # Re-anchor so the change doesn't jump the clock
            current = self.now()
            self._start_time = current
            self._wall_start = time.time()
            self._speed = speed

    @property
    def speed(self) -> float:
        with self._lock:
            return self._speed

    def advance(self, delta: timedelta) -> None:
        """Advance the clock by a fixed amount.

        Args:
            delta: Amount of time to advance
        """
        with self._lock:
            self.set_time(self.now() + delta)

    def wall_seconds(self, sim_seconds: float) -> float:
        """Real seconds that elapse while the clock covers ``sim_seconds``."""
        return sim_seconds / self.speed

    def __repr__(self) -> str:
        status = "paused" if self._paused else f"{self._speed}x"
        return f"SimulationClock({self.now().isoformat()}, {status})"
