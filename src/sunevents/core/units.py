from datetime import timedelta
import math

# Earth turns 360 degrees in 1440 minutes.
MINUTES_PER_DEGREE = 4.0
MINUTES_PER_DAY = 1440.0


def to_radians(deg: float) -> float:
  return math.radians(deg)


def to_degrees(rad: float) -> float:
  return math.degrees(rad)


def normalize_degrees(deg: float) -> float:
  """Wrap an angle into [0, 360)."""
  return deg % 360.0


def hour_angle_to_minutes(deg: float) -> float:
  return deg * MINUTES_PER_DEGREE


def longitude_to_minutes(lng: float) -> float:
  return lng * MINUTES_PER_DEGREE


def minutes_to_timedelta(minutes: float) -> timedelta:
  # Whole seconds; the series is not good below a few seconds anyway.
  return timedelta(seconds=round(minutes * 60.0))
