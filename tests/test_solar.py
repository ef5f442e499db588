from datetime import date

import pytest

from sunphase.core.errors import GeometryUndefined
from sunphase.core.solar import SolarEvent, calculate, compute_boundary, sun_times
from sunphase.model.geo import GeoConfig
from sunphase.model.phase import Phase


def test_london_midsummer_local_times():
  # 172 is the June solstice; London keeps BST (UTC+1) in summer.
  geo = GeoConfig(latitude=51.5, longitude=-0.13, utc_offset=1)
  sunrise = calculate(SolarEvent.SUNRISE, 172, geo)
  sunset = calculate(SolarEvent.SUNSET, 172, geo)
  assert abs(sunrise - (4 * 60 + 45)) <= 15
  assert abs(sunset - (21 * 60 + 20)) <= 15


def test_utc_offset_shifts_by_whole_hours():
  gmt = GeoConfig(latitude=51.5, longitude=-0.13, utc_offset=0)
  bst = GeoConfig(latitude=51.5, longitude=-0.13, utc_offset=1)
  for kind in SolarEvent:
    assert calculate(kind, 172, bst) - calculate(kind, 172, gmt) == 60


def test_sunrise_precedes_sunset_at_mid_latitudes():
  for lat in range(-50, 51, 10):
    for lon in (-150, -75, -0.13, 30, 100, 150):
      geo = GeoConfig(latitude=lat, longitude=lon, utc_offset=round(lon / 15))
      for doy in range(1, 366, 7):
        sunrise = calculate(SolarEvent.SUNRISE, doy, geo)
        sunset = calculate(SolarEvent.SUNSET, doy, geo)
        assert sunrise < sunset, (lat, lon, doy)


def test_extreme_longitude_and_offset_stay_in_range():
  for lon in (-180, -179.9, 179.9, 180):
    for offset in (-12, 0, 14):
      for lat in (-45, 0, 45):
        geo = GeoConfig(latitude=lat, longitude=lon, utc_offset=offset)
        for doy in (1, 100, 200, 366):
          for kind in SolarEvent:
            assert 0 <= calculate(kind, doy, geo) <= 1439


def test_day_of_year_out_of_range():
  geo = GeoConfig(latitude=10, longitude=10, utc_offset=1)
  with pytest.raises(ValueError):
    calculate(SolarEvent.SUNRISE, 0, geo)
  with pytest.raises(ValueError):
    calculate(SolarEvent.SUNSET, 367, geo)


def test_polar_day_and_night_raise():
  geo = GeoConfig(latitude=80, longitude=15, utc_offset=1)
  with pytest.raises(GeometryUndefined) as summer:
    calculate(SolarEvent.SUNRISE, 172, geo)
  assert summer.value.sun_always_up
  assert summer.value.cos_h < -1
  with pytest.raises(GeometryUndefined) as winter:
    calculate(SolarEvent.SUNSET, 355, geo)
  assert not winter.value.sun_always_up


def test_sun_times_uses_calendar_day():
  geo = GeoConfig(latitude=40.7, longitude=-74.0, utc_offset=-4)
  assert sun_times(date(2025, 6, 21), geo) == (
    calculate(SolarEvent.SUNRISE, 172, geo),
    calculate(SolarEvent.SUNSET, 172, geo),
  )


def test_compute_boundary():
  geo = GeoConfig(latitude=40.7, longitude=-74.0, utc_offset=-4)
  b = compute_boundary(date(2025, 6, 21), geo)
  assert b.day == date(2025, 6, 21)
  assert b.polar is None
  assert 0 <= b.sunrise_minutes < b.sunset_minutes <= 1439


def test_compute_boundary_pins_polar_days():
  geo = GeoConfig(latitude=80, longitude=15, utc_offset=1)
  assert compute_boundary(date(2025, 6, 21), geo).polar is Phase.DAY
  assert compute_boundary(date(2025, 12, 21), geo).polar is Phase.NIGHT
