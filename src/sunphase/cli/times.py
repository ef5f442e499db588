from datetime import datetime, timedelta, timezone

import click

from ..core.solar import compute_boundary
from ..core.timebase import format_minutes, minute_of_day
from ..runtime.tracker import classify
from .common import location_options, settings_from_cli


@click.command()
@location_options
@click.option("--date", "on_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day to report (default: today)")
def main(config, latitude, longitude, utc_offset, on_date):
  """Print sunrise, sunset and the current day phase."""
  settings = settings_from_cli(config, latitude, longitude, utc_offset)
  geo = settings.geo
  now = datetime.now(timezone(timedelta(hours=geo.utc_offset)))
  d = on_date.date() if on_date else now.date()
  boundary = compute_boundary(d, geo)
  click.echo(f"Location: {geo.latitude:.4f}, {geo.longitude:.4f} (UTC{geo.utc_offset:+d})")
  click.echo(f"Date: {d.isoformat()}")
  if boundary.polar is not None:
    click.echo(f"No sunrise or sunset: permanent {boundary.polar.value}")
  else:
    click.echo(f"Sunrise: {format_minutes(boundary.sunrise_minutes)}")
    click.echo(f"Sunset: {format_minutes(boundary.sunset_minutes)}")
  if d == now.date():
    click.echo(f"Now: {now.strftime('%H:%M')} ({classify(minute_of_day(now), boundary).value})")


if __name__ == "__main__":
  main()
