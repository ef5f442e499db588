from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Phase(Enum):
  DAY = "day"
  NIGHT = "night"


@dataclass(frozen=True)
class DayBoundary:
  """Sunrise/sunset for one calendar day, as minutes since local midnight.

  ``polar`` pins the whole day to a single phase when the sun never crosses
  the horizon; the minute fields are then meaningless and left at zero.
  """
  sunrise_minutes: int
  sunset_minutes: int
  day: Optional[date] = None
  polar: Optional[Phase] = None

  @classmethod
  def pinned(cls, phase: Phase, day: Optional[date] = None) -> "DayBoundary":
    return cls(sunrise_minutes=0, sunset_minutes=0, day=day, polar=phase)


@dataclass(frozen=True)
class TransitionEvent:
  phase: Phase
  previous: Optional[Phase]
  minute: int
  boundary: DayBoundary
