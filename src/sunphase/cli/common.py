import click

from ..core.errors import SunPhaseError
from ..core.platform import check_platform
from ..model.geo import load_settings


def location_options(fn):
  fn = click.option("--utc-offset", type=int, help="Whole hours east of UTC (default: host offset)")(fn)
  fn = click.option("--longitude", type=float, help="Longitude in degrees, east positive")(fn)
  fn = click.option("--latitude", type=float, help="Latitude in degrees, north positive")(fn)
  fn = click.option("--config", type=click.Path(exists=True), help="YAML settings file")(fn)
  return fn


def settings_from_cli(config, latitude, longitude, utc_offset, **extra):
  try:
    check_platform()
    return load_settings(config, {"latitude": latitude, "longitude": longitude, "utc_offset": utc_offset, **extra})
  except SunPhaseError as e:
    raise click.ClickException(str(e)) from e
