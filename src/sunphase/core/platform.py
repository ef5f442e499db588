import sys
import time

from .errors import PlatformCapabilityError


def check_platform() -> None:
  # Solar angles are computed in doubles; anything narrower drifts by minutes.
  if sys.float_info.mant_dig < 53:
    raise PlatformCapabilityError("IEEE double precision floats are required")
  if getattr(time.localtime(), "tm_gmtoff", None) is None:
    raise PlatformCapabilityError("Host clock does not report its UTC offset")


def host_utc_offset() -> int:
  """Current local UTC offset of the host, rounded to whole hours."""
  gmtoff = getattr(time.localtime(), "tm_gmtoff", None)
  if gmtoff is None:
    raise PlatformCapabilityError("Host clock does not report its UTC offset")
  return int(round(gmtoff / 3600.0))
