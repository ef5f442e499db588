"""Approximate sunrise/sunset from the standard solar-position method.

Accuracy is a few minutes at mid-latitudes, which is plenty for deciding
whether it is day or night. Angles are in degrees throughout.
"""
from datetime import date
from enum import Enum
import logging
import math

from .errors import GeometryUndefined
from .timebase import MINUTES_PER_DAY, day_of_year as ordinal_day
from ..model.geo import GeoConfig
from ..model.phase import DayBoundary, Phase

logger = logging.getLogger(__name__)

# Sun centre exactly on the horizon, no refraction correction.
ZENITH = 90.0


class SolarEvent(Enum):
  SUNRISE = 6
  SUNSET = 18

  @property
  def nominal_hour(self) -> int:
    return self.value


def _sin(deg):
  return math.sin(math.radians(deg))


def _cos(deg):
  return math.cos(math.radians(deg))


def _tan(deg):
  return math.tan(math.radians(deg))


def _wrap(value: float, period: float) -> float:
  return value % period


def calculate(kind: SolarEvent, day_of_year: int, geo: GeoConfig) -> int:
  """Local time of sunrise or sunset as minutes since midnight.

  Raises GeometryUndefined when the sun stays above or below the horizon
  all day.
  """
  if not 1 <= day_of_year <= 366:
    raise ValueError(f"day_of_year must be in 1..366, got {day_of_year}")

  lng_hour = geo.longitude / 15
  t = day_of_year + ((kind.nominal_hour - lng_hour) / 24)

  m = 0.9856 * t - 3.289
  true_long = _wrap(m + 1.916 * _sin(m) + 0.020 * _sin(2 * m) + 282.634, 360)

  ra = _wrap(math.degrees(math.atan(0.91764 * _tan(true_long))), 360)
  ra += math.floor(true_long / 90) * 90 - math.floor(ra / 90) * 90
  ra /= 15

  sin_dec = 0.39782 * _sin(true_long)
  cos_dec = math.cos(math.asin(sin_dec))

  cos_h = (_cos(ZENITH) - sin_dec * _sin(geo.latitude)) / (cos_dec * _cos(geo.latitude))
  if not -1 <= cos_h <= 1:
    raise GeometryUndefined(cos_h, day_of_year)

  h = math.degrees(math.acos(cos_h))
  if kind is SolarEvent.SUNRISE:
    h = 360 - h
  h /= 15

  mean_time = h + ra - 0.06571 * t - 6.622
  ut = _wrap(mean_time - lng_hour, 24)
  local = _wrap(ut + geo.utc_offset, 24)

  hours = int(local)
  minutes = round((local - hours) * 60)
  return (hours * 60 + minutes) % MINUTES_PER_DAY


def sun_times(d: date, geo: GeoConfig):
  doy = ordinal_day(d)
  return calculate(SolarEvent.SUNRISE, doy, geo), calculate(SolarEvent.SUNSET, doy, geo)


def compute_boundary(d: date, geo: GeoConfig) -> DayBoundary:
  """DayBoundary for ``d``; polar days come back pinned to DAY or NIGHT."""
  try:
    sunrise, sunset = sun_times(d, geo)
  except GeometryUndefined as e:
    phase = Phase.DAY if e.sun_always_up else Phase.NIGHT
    logger.warning(f"{e}; treating {d.isoformat()} as permanent {phase.value}")
    return DayBoundary.pinned(phase, day=d)

  logger.debug(f"Computed boundary for {d.isoformat()} at ({geo.latitude}, {geo.longitude}): "
               f"sunrise={sunrise} sunset={sunset}")
  return DayBoundary(sunrise_minutes=sunrise, sunset_minutes=sunset, day=d)
