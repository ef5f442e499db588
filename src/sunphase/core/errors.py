"""Exceptions raised while configuring or computing day phases."""


class SunPhaseError(Exception):
  """Base class for sunphase errors."""


class ConfigurationError(SunPhaseError):
  """Required location settings are missing, malformed or out of range."""


class PlatformCapabilityError(SunPhaseError):
  """The host cannot provide the time or float facilities we rely on."""


class GeometryUndefined(SunPhaseError):
  """The sun does not cross the horizon on this day at this latitude."""

  def __init__(self, cos_h: float, day_of_year: int):
    self.cos_h = cos_h
    self.day_of_year = day_of_year
    # cos_h below -1 means the hour angle never closes: the sun stays up.
    self.sun_always_up = cos_h < -1
    kind = "polar day" if self.sun_always_up else "polar night"
    super().__init__(f"No sunrise/sunset on day {day_of_year} ({kind}, cos_h={cos_h:.4f})")
