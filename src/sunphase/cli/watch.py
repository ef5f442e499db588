"""CLI command to watch for day/night transitions."""

from datetime import datetime
import logging
import click

from ..core.timebase import format_minutes
from ..model.phase import TransitionEvent
from ..runtime.clock import SimulationClock
from ..runtime.hooks import PhaseHooks, command_hook
from ..runtime.monitor import DayPhaseMonitor
from .common import location_options, settings_from_cli

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@location_options
@click.option(
    "--interval",
    type=float,
    help="Seconds between polls (default: poll_interval from config, else 60)",
)
@click.option(
    "--refresh",
    type=click.Choice(["daily", "once"]),
    help="Recompute sunrise/sunset every day or only at startup",
)
@click.option(
    "--speed",
    default=1.0,
    type=float,
    help="Time acceleration factor (default: 1.0 = real-time)",
)
@click.option(
    "--start-time",
    type=str,
    help="Initial local time (ISO format, default: now)",
)
@click.option(
    "--ticks",
    type=click.IntRange(min=1),
    help="Stop after this many polls",
)
@click.option("--on-day", help="Command to run on entering daytime")
@click.option("--on-night", help="Command to run on entering nighttime")
def main(config, latitude, longitude, utc_offset, interval, refresh, speed, start_time, ticks, on_day, on_night):
    """Watch the clock and report day/night transitions.

    Without --on-day/--on-night the built-in light/dark theme is switched.

    Examples:
        # Poll every minute in real time
        sunphase-watch --latitude 51.5 --longitude -0.13

        # Replay a day at 600x, polling every simulated minute
        sunphase-watch --config sunphase.yaml --speed 600 --start-time 2025-06-21T00:00
    """
    settings = settings_from_cli(
        config, latitude, longitude, utc_offset,
        poll_interval=interval, refresh=refresh,
    )

    start_dt = None
    if start_time:
        try:
            start_dt = datetime.fromisoformat(start_time)
        except ValueError as e:
            raise click.BadParameter(f"Invalid start time: {e}", param_hint="--start-time")
    if speed <= 0:
        raise click.BadParameter("Speed must be positive", param_hint="--speed")

    clock = SimulationClock(start_time=start_dt, speed=speed, utc_offset=settings.geo.utc_offset)
    hooks = PhaseHooks(
        on_day=command_hook(on_day) if on_day else None,
        on_night=command_hook(on_night) if on_night else None,
    )
    hooks.theme.subscribe(lambda mode: click.echo(f"Theme: {mode.value}"))
    monitor = DayPhaseMonitor(settings, clock=clock, hooks=hooks)
    monitor.tracker.add_listener(_report)

    logger.info(f"Watching {settings.geo.latitude}, {settings.geo.longitude} from {clock.now().isoformat()}")
    try:
        monitor.run(max_ticks=ticks)
    except KeyboardInterrupt:
        click.echo("Stopped.")


def _report(event: TransitionEvent) -> None:
    click.echo(f"{format_minutes(event.minute)} -> {event.phase.value}")


if __name__ == "__main__":
    main()
