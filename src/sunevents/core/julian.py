from datetime import date, datetime, timezone
import math

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


def julian_day(year: int, month: int, day: int, fraction: float = 0.0) -> float:
  """Julian day of a proleptic Gregorian date at `fraction` of a day past 00:00 UTC."""
  if month <= 2:
    year -= 1
    month += 12
  a = math.floor(year / 100)
  b = 2 - a + math.floor(a / 4)
  return (math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1))
          + day + b - 1524.5 + fraction)


def day_fraction(dt: datetime) -> float:
  seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
  return seconds / 86400.0


def as_utc(ts: datetime) -> datetime:
  """Aware copy of `ts` in UTC; naive datetimes are taken as UTC already."""
  if ts.tzinfo is None:
    return ts.replace(tzinfo=timezone.utc)
  return ts.astimezone(timezone.utc)


def to_julian_day(when) -> float:
  # Naive datetimes are taken as UTC; plain dates mean 00:00 UTC.
  if isinstance(when, datetime):
    if when.tzinfo is not None:
      when = when.astimezone(timezone.utc)
    return julian_day(when.year, when.month, when.day, day_fraction(when))
  if isinstance(when, date):
    return julian_day(when.year, when.month, when.day)
  raise TypeError(f"expected date or datetime, got {type(when).__name__}")


def century_from_julian_day(jd: float) -> float:
  return (jd - J2000) / DAYS_PER_CENTURY


def julian_century(when) -> float:
  return century_from_julian_day(to_julian_day(when))
