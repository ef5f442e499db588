"""Day/night hooks and the default theme action."""
from enum import Enum
from typing import Callable, List, Optional
import logging
import os
import shlex
import subprocess

from ..model.phase import Phase, TransitionEvent

logger = logging.getLogger(__name__)

Hook = Callable[[TransitionEvent], None]


class ThemeMode(Enum):
    LIGHT = "light"
    DARK = "dark"


class ThemeSetting:
    """The cosmetic setting switched when no hook is registered."""

    def __init__(self, mode: Optional[ThemeMode] = None):
        self._mode = mode
        self._subscribers: List[Callable[[ThemeMode], None]] = []

    @property
    def mode(self) -> Optional[ThemeMode]:
        return self._mode

    def subscribe(self, callback: Callable[[ThemeMode], None]) -> None:
        self._subscribers.append(callback)

    def apply(self, mode: ThemeMode) -> None:
        """Switch to ``mode`` and notify subscribers."""
        if mode is self._mode:
            return
        logger.info(f"Applying {mode.value} theme")
        self._mode = mode
        for callback in self._subscribers:
            callback(mode)


class PhaseHooks:
    """Tracker listener dispatching to day/night hooks.

    A missing hook falls back to switching the theme: light for day,
    dark for night.
    """

    def __init__(
        self,
        on_day: Optional[Hook] = None,
        on_night: Optional[Hook] = None,
        theme: Optional[ThemeSetting] = None,
    ):
        """Initialize hooks.

        Args:
            on_day: Called on entering daytime
            on_night: Called on entering nighttime
            theme: Setting used by the default action
        """
        self.on_day = on_day
        self.on_night = on_night
        self.theme = theme or ThemeSetting()

    def __call__(self, event: TransitionEvent) -> None:
        if event.phase is Phase.DAY:
            hook, default = self.on_day, ThemeMode.LIGHT
        else:
            hook, default = self.on_night, ThemeMode.DARK

        if hook is None:
            self.theme.apply(default)
        else:
            hook(event)


def command_hook(command: str, timeout: float = 30.0) -> Hook:
    """Build a hook that runs a shell command on each transition.

    The new phase is exported to the command as ``SUNPHASE_PHASE``.

    Args:
        command: Command line, split with shell quoting rules
        timeout: Seconds before the command is killed
    """
    argv = shlex.split(command)

    def run(event: TransitionEvent) -> None:
        logger.info(f"Running {event.phase.value} hook: {command}")
        try:
            result = subprocess.run(argv, env=_hook_env(event), check=False, timeout=timeout)
        except subprocess.TimeoutExpired:
            logger.warning(f"Hook {command!r} timed out after {timeout}s")
            return
        if result.returncode != 0:
            logger.warning(f"Hook {command!r} exited with status {result.returncode}")

    return run


def _hook_env(event: TransitionEvent):
    env = dict(os.environ)
    env["SUNPHASE_PHASE"] = event.phase.value
    return env
