import math

from sunevents.core.hour_angle import cos_hour_angle, solve


def test_equator_equinox_geometric_horizon():
  assert math.isclose(solve(0.0, 0.0, 90.0), 90.0, abs_tol=1e-9)


def test_polar_night_is_absent():
  assert cos_hour_angle(-23.44, 80.0, 90.833) > 1.0
  assert solve(-23.44, 80.0, 90.833) is None


def test_midnight_sun_is_absent():
  assert cos_hour_angle(23.44, 80.0, 90.833) < -1.0
  assert solve(23.44, 80.0, 90.833) is None


def test_mid_latitude_summer():
  assert math.isclose(solve(23.44, 51.48, 90.833), 124.8, abs_tol=0.2)


def test_result_always_within_half_turn():
  for lat in range(-65, 66, 5):
    for dec in (-23.4, -10.0, 0.0, 10.0, 23.4):
      for zenith in (80.0, 90.833, 96.0, 102.0, 108.0):
        h = solve(dec, lat, zenith)
        if h is not None:
          assert 0.0 <= h <= 180.0


def test_deeper_zenith_means_larger_hour_angle():
  angles = [solve(5.0, 40.0, z) for z in (90.833, 96.0, 102.0, 108.0)]
  assert angles == sorted(angles)
  assert len(set(angles)) == 4


def test_exact_pole_does_not_divide_by_zero():
  assert solve(10.0, 90.0, 90.833) is None
  assert solve(-10.0, -90.0, 90.833) is None
