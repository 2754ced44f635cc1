from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class Timebase:
  year: int

  def days(self):
    d = date(self.year, 1, 1)
    while d.year == self.year:
      yield d
      d += timedelta(days=1)

  def months(self):
    for month in range(1, 13):
      yield month, [d for d in self.days() if d.month == month]
