"""Turn solar coordinates and hour angles into UTC event times.

Solar noon is estimated from coordinates at 12:00 UTC, then refined once
with coordinates taken at the estimated noon. Zenith events start from the
coordinates at solar noon and are refined once more at the estimated event
instant. That second pass moves results by up to about a minute at
mid-latitudes and keeps them within the minute of published almanacs.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional
import logging

from . import solar_position
from .events import Motion, SunEvent
from .hour_angle import solve
from .julian import century_from_julian_day, julian_day
from .position import GlobalPosition
from .units import (
  MINUTES_PER_DAY,
  hour_angle_to_minutes,
  longitude_to_minutes,
  minutes_to_timedelta,
)

logger = logging.getLogger(__name__)

NOON_MINUTES = 720.0


def _calendar_date(when) -> date:
  if isinstance(when, datetime):
    if when.tzinfo is not None:
      when = when.astimezone(timezone.utc)
    return when.date()
  if isinstance(when, date):
    return when
  raise TypeError(f"expected date or datetime, got {type(when).__name__}")


def _utc_midnight(d: date) -> datetime:
  return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def _coordinates_at(jd_midnight: float, minutes: float) -> solar_position.SolarCoordinates:
  return solar_position.compute(century_from_julian_day(jd_midnight + minutes / MINUTES_PER_DAY))


def _noon_from(lng: float, coords: solar_position.SolarCoordinates) -> float:
  return NOON_MINUTES - longitude_to_minutes(lng) - coords.equation_of_time


def solar_noon_minutes(d: date, position: GlobalPosition) -> float:
  """Solar noon of `d` in minutes after 00:00 UTC; may fall outside [0, 1440)."""
  jd0 = julian_day(d.year, d.month, d.day)
  estimate = _noon_from(position.longitude, _coordinates_at(jd0, NOON_MINUTES))
  return _noon_from(position.longitude, _coordinates_at(jd0, estimate))


def _event_minutes(jd0: float, noon: float, position: GlobalPosition, event: SunEvent) -> Optional[float]:
  sign = -1.0 if event.motion is Motion.RISING else 1.0
  coords = _coordinates_at(jd0, noon)
  h = solve(coords.declination, position.latitude, event.zenith.angle)
  if h is None:
    return None
  estimate = noon + sign * hour_angle_to_minutes(h)
  coords = _coordinates_at(jd0, estimate)
  h = solve(coords.declination, position.latitude, event.zenith.angle)
  if h is None:
    return None
  return NOON_MINUTES - longitude_to_minutes(position.longitude - sign * h) - coords.equation_of_time


def _shift(midnight: datetime, delta: timedelta, event: SunEvent) -> datetime:
  try:
    return midnight + delta
  except OverflowError:
    raise ValueError(
      f"{event} on {midnight.date()} falls outside the supported range {date.min} to {date.max}"
    ) from None


def time_of_event(when, position: GlobalPosition, event: SunEvent) -> Optional[datetime]:
  """UTC instant of `event` on the calendar date `when` at `position`.

  Returns None when the event does not happen that day (polar day or night,
  or a twilight angle the sun never crosses). Results may land on the
  previous or next UTC date for positions far from Greenwich; ValueError is
  raised when that date is before 0001-01-01 or after 9999-12-31.
  """
  d = _calendar_date(when)
  midnight = _utc_midnight(d)
  noon = solar_noon_minutes(d, position)
  noon_dt = _shift(midnight, minutes_to_timedelta(noon), event)

  if event is SunEvent.SOLAR_NOON:
    return noon_dt
  if event is SunEvent.SOLAR_MIDNIGHT:
    # Pick the lower transit that falls on the requested date.
    if noon >= NOON_MINUTES:
      return noon_dt - timedelta(hours=12)
    return noon_dt + timedelta(hours=12)

  jd0 = julian_day(d.year, d.month, d.day)
  minutes = _event_minutes(jd0, noon, position, event)
  if minutes is None:
    logger.debug("%s does not occur on %s at %s", event, d, position)
    return None
  return _shift(midnight, minutes_to_timedelta(minutes), event)
