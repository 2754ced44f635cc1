"""Low-precision solar position series (NOAA solar calculator).

Everything is carried in degrees; radians only appear at the trig call sites.
Good to roughly a minute of time for dates within a few centuries of J2000.
"""
from dataclasses import dataclass
import math

from .units import normalize_degrees, to_degrees, to_radians


@dataclass(frozen=True)
class SolarCoordinates:
  declination: float       # degrees
  equation_of_time: float  # minutes, apparent minus mean solar time


def mean_longitude(t: float) -> float:
  """Geometric mean longitude of the sun, degrees in [0, 360)."""
  return normalize_degrees(280.46646 + t * (36000.76983 + t * 0.0003032))


def mean_anomaly(t: float) -> float:
  return normalize_degrees(357.52911 + t * (35999.05029 - 0.0001537 * t))


def eccentricity(t: float) -> float:
  """Eccentricity of Earth's orbit (unitless)."""
  return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float, m: float) -> float:
  m_rad = to_radians(m)
  return (math.sin(m_rad) * (1.914602 - t * (0.004817 + 0.000014 * t))
          + math.sin(2 * m_rad) * (0.019993 - 0.000101 * t)
          + math.sin(3 * m_rad) * 0.000289)


def ascending_node(t: float) -> float:
  # Longitude of the moon's ascending node, drives nutation.
  return 125.04 - 1934.136 * t


def apparent_longitude(t: float, l0: float, m: float) -> float:
  true_long = l0 + equation_of_center(t, m)
  return true_long - 0.00569 - 0.00478 * math.sin(to_radians(ascending_node(t)))


def mean_obliquity(t: float) -> float:
  seconds = 21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))
  return 23.0 + (26.0 + seconds / 60.0) / 60.0


def corrected_obliquity(t: float) -> float:
  return mean_obliquity(t) + 0.00256 * math.cos(to_radians(ascending_node(t)))


def declination(obliquity: float, app_long: float) -> float:
  return to_degrees(math.asin(math.sin(to_radians(obliquity)) * math.sin(to_radians(app_long))))


def equation_of_time(l0: float, m: float, e: float, obliquity: float) -> float:
  """Equation of time in minutes."""
  y = math.tan(to_radians(obliquity) / 2.0) ** 2
  l0_rad = to_radians(l0)
  m_rad = to_radians(m)
  e_rad = (y * math.sin(2 * l0_rad)
           - 2 * e * math.sin(m_rad)
           + 4 * e * y * math.sin(m_rad) * math.cos(2 * l0_rad)
           - 0.5 * y * y * math.sin(4 * l0_rad)
           - 1.25 * e * e * math.sin(2 * m_rad))
  return 4.0 * to_degrees(e_rad)


def compute(t: float) -> SolarCoordinates:
  """Solar coordinates at `t` Julian centuries since J2000.0."""
  l0 = mean_longitude(t)
  m = mean_anomaly(t)
  e = eccentricity(t)
  obliquity = corrected_obliquity(t)
  app_long = apparent_longitude(t, l0, m)
  return SolarCoordinates(
    declination=declination(obliquity, app_long),
    equation_of_time=equation_of_time(l0, m, e, obliquity),
  )
