from datetime import datetime
import math

from sunevents.core import solar_position
from sunevents.core.julian import julian_century


def test_angles_normalized():
  for t in (-2.0, -0.5, 0.0, 0.2, 1.5):
    assert 0.0 <= solar_position.mean_longitude(t) < 360.0
    assert 0.0 <= solar_position.mean_anomaly(t) < 360.0


def test_j2000_values():
  coords = solar_position.compute(0.0)
  assert math.isclose(coords.declination, -23.03, abs_tol=0.02)
  assert math.isclose(coords.equation_of_time, -3.30, abs_tol=0.05)


def test_obliquity_near_23_44():
  assert math.isclose(solar_position.corrected_obliquity(0.2), 23.44, abs_tol=0.01)


def test_eccentricity_decreases():
  assert solar_position.eccentricity(1.0) < solar_position.eccentricity(0.0) < 0.0168


def test_solstice_declination():
  coords = solar_position.compute(julian_century(datetime(2020, 6, 21, 12)))
  assert math.isclose(coords.declination, 23.44, abs_tol=0.05)
  coords = solar_position.compute(julian_century(datetime(2020, 12, 21, 12)))
  assert math.isclose(coords.declination, -23.44, abs_tol=0.05)


def test_equinox_declination_near_zero():
  coords = solar_position.compute(julian_century(datetime(2020, 3, 20, 4)))
  assert abs(coords.declination) < 0.1


def test_equation_of_time_extremes():
  november = solar_position.compute(julian_century(datetime(2021, 11, 3, 12)))
  february = solar_position.compute(julian_century(datetime(2021, 2, 11, 12)))
  assert 15.8 < november.equation_of_time < 16.8
  assert -14.8 < february.equation_of_time < -13.8
