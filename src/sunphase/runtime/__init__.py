"""Runtime components for the day phase monitor."""

from .clock import SimulationClock
from .hooks import PhaseHooks, ThemeMode, ThemeSetting, command_hook
from .monitor import DayPhaseMonitor
from .tracker import TWILIGHT_MARGIN, DayPhaseTracker, classify

__all__ = [
    "SimulationClock",
    "PhaseHooks",
    "ThemeMode",
    "ThemeSetting",
    "command_hook",
    "DayPhaseMonitor",
    "TWILIGHT_MARGIN",
    "DayPhaseTracker",
    "classify",
]
