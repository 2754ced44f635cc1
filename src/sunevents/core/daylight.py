from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from . import solar_position
from .assembler import time_of_event
from .events import SunEvent, Zenith
from .julian import as_utc, julian_century
from .position import GlobalPosition

POLAR_DAY = "polar_day"
POLAR_NIGHT = "polar_night"


@dataclass(frozen=True)
class Daylight:
  position: GlobalPosition

  def sunrise_sunset(self, d: date) -> Tuple[Optional[datetime], Optional[datetime]]:
    return (time_of_event(d, self.position, SunEvent.SUNRISE),
            time_of_event(d, self.position, SunEvent.SUNSET))

  def noon_altitude(self, d: date) -> float:
    """Altitude of the sun at solar noon, degrees."""
    noon = time_of_event(d, self.position, SunEvent.SOLAR_NOON)
    coords = solar_position.compute(julian_century(noon))
    return 90.0 - abs(self.position.latitude - coords.declination)

  def polar_state(self, d: date) -> str:
    # Only meaningful when there is no sunrise/sunset pair.
    if self.noon_altitude(d) > Zenith.OFFICIAL.altitude:
      return POLAR_DAY
    return POLAR_NIGHT

  def day_length(self, d: date) -> timedelta:
    """Time the sun spends above the horizon during the solar day of `d`.

    The solar day runs from the lower transit 12 h before solar noon to the one
    12 h after. When only sunrise or only sunset happens (the days the midnight
    sun starts or ends), the missing end is taken as that lower transit.
    """
    sunrise, sunset = self.sunrise_sunset(d)
    if sunrise is None and sunset is None:
      if self.polar_state(d) == POLAR_DAY:
        return timedelta(hours=24)
      return timedelta(0)
    noon = time_of_event(d, self.position, SunEvent.SOLAR_NOON)
    start = sunrise if sunrise is not None else noon - timedelta(hours=12)
    end = sunset if sunset is not None else noon + timedelta(hours=12)
    return end - start

  def is_daylight(self, ts: datetime) -> bool:
    """Whether the sun is above the horizon at `ts`. Naive datetimes are UTC."""
    ts = as_utc(ts)
    d = ts.date()
    # Far from Greenwich a day's sunrise or sunset lands on a neighbouring UTC date.
    pairs = {k: self.sunrise_sunset(d + timedelta(days=k)) for k in (-1, 0, 1)}
    for sunrise, sunset in pairs.values():
      if sunrise is not None and sunset is not None and sunrise <= ts <= sunset:
        return True
    sunrise, sunset = pairs[0]
    if sunrise is not None and sunset is not None:
      return False
    if sunrise is not None:
      return ts >= sunrise
    if sunset is not None:
      return ts <= sunset
    return self.polar_state(d) == POLAR_DAY
