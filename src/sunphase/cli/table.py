from datetime import date

import click

from ..core.solar import compute_boundary
from ..core.timebase import Timebase, format_minutes
from .common import location_options, settings_from_cli


@click.command()
@location_options
@click.option("--year", type=int, default=lambda: date.today().year, help="Year to tabulate (default: this year)")
@click.option("--every", type=click.IntRange(min=1), default=7, help="Days between rows (default: 7)")
def main(config, latitude, longitude, utc_offset, year, every):
  """Print sunrise and sunset through a year."""
  settings = settings_from_cli(config, latitude, longitude, utc_offset)
  click.echo("Date       | Sunrise | Sunset")
  click.echo("-----------|---------|-------")
  for d in Timebase(year).days(every):
    b = compute_boundary(d, settings.geo)
    if b.polar is not None:
      click.echo(f"{d.isoformat()} | {'-':7} | {b.polar.value}")
      continue
    click.echo(f"{d.isoformat()} | {format_minutes(b.sunrise_minutes):7} | {format_minutes(b.sunset_minutes)}")


if __name__ == "__main__":
  main()
