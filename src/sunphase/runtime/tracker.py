"""Day/night classification with one-shot transition detection."""
from typing import Callable, List, Optional
import logging

from ..core.timebase import MINUTES_PER_DAY
from ..model.phase import DayBoundary, Phase, TransitionEvent

logger = logging.getLogger(__name__)

# Civil twilight, split evenly around sunrise and sunset.
TWILIGHT_MARGIN = 30
HALF_MARGIN = TWILIGHT_MARGIN // 2

Listener = Callable[[TransitionEvent], None]


def classify(now_minutes: int, boundary: DayBoundary) -> Phase:
    """Classify a minute of the day against a boundary.

    Day is the open interval (sunrise - 15, sunset + 15); everything else,
    including both twilight edges, is Night.

    Args:
        now_minutes: Minutes since local midnight (0..1439)
        boundary: Sunrise/sunset for the current day

    Returns:
        Phase.DAY or Phase.NIGHT
    """
    if not 0 <= now_minutes < MINUTES_PER_DAY:
        raise ValueError(f"now_minutes must be in 0..{MINUTES_PER_DAY - 1}, got {now_minutes}")
    if boundary.polar is not None:
        return boundary.polar
    if now_minutes <= boundary.sunrise_minutes - HALF_MARGIN:
        return Phase.NIGHT
    if now_minutes >= boundary.sunset_minutes + HALF_MARGIN:
        return Phase.NIGHT
    return Phase.DAY


class DayPhaseTracker:
    """Holds the current phase and reports each change exactly once."""

    def __init__(self, boundary: DayBoundary):
        """Initialize tracker.

        Args:
            boundary: Boundary for the current day
        """
        self._boundary = boundary
        self._phase: Optional[Phase] = None
        self._listeners: List[Listener] = []

    @property
    def boundary(self) -> DayBoundary:
        return self._boundary

    @property
    def phase(self) -> Optional[Phase]:
        """Last classified phase, None before the first tick."""
        return self._phase

    def set_boundary(self, boundary: DayBoundary) -> None:
        """Replace the boundary; the stored phase is kept."""
        self._boundary = boundary

    def tick(self, now_minutes: int) -> Optional[TransitionEvent]:
        """Classify now and emit an event if the phase changed.

        The first tick always emits so that hooks run once at startup.

        Args:
            now_minutes: Minutes since local midnight

        Returns:
            The TransitionEvent, or None when the phase is unchanged
        """
        new_phase = classify(now_minutes, self._boundary)
        if new_phase is self._phase:
            return None

        event = TransitionEvent(
            phase=new_phase,
            previous=self._phase,
            minute=now_minutes,
            boundary=self._boundary,
        )
        self._phase = new_phase
        logger.info(f"Entered {new_phase.value} at minute {now_minutes}")
        self._notify_listeners(event)
        return event

    def add_listener(self, callback: Listener) -> None:
        """Add a transition listener.

        Args:
            callback: Function called with each TransitionEvent
        """
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> bool:
        """Remove a transition listener.

        Returns:
            True if removed, False if not found
        """
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    def _notify_listeners(self, event: TransitionEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as e:
                # Log but don't fail the tick on hook errors
                logger.error(f"Error in transition listener {listener!r}: {e}")
