from dataclasses import dataclass
from datetime import date, datetime, timedelta

MINUTES_PER_DAY = 24 * 60


@dataclass
class Timebase:
  year: int

  def days(self, every: int = 1):
    d = date(self.year, 1, 1)
    while d.year == self.year:
      yield d
      d += timedelta(days=every)


def day_of_year(d: date) -> int:
  return d.timetuple().tm_yday


def minute_of_day(dt: datetime) -> int:
  return dt.hour * 60 + dt.minute


def format_minutes(minutes: int) -> str:
  hours, mins = divmod(minutes, 60)
  return f"{hours:02d}:{mins:02d}"
