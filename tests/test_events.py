import pytest

from sunevents.core.events import Motion, SunEvent, Zenith


def test_zenith_angles():
  assert SunEvent.SUNRISE.zenith.angle == 90.833
  assert SunEvent.SUNSET.zenith.angle == 90.833
  assert SunEvent.CIVIL_DAWN.zenith.angle == 96.0
  assert SunEvent.NAUTICAL_DUSK.zenith.angle == 102.0
  assert SunEvent.ASTRONOMICAL_DAWN.zenith.angle == 108.0
  assert SunEvent.GOLDEN_HOUR_END.zenith.angle == 80.0


def test_transits_have_no_zenith():
  assert SunEvent.SOLAR_NOON.zenith is None
  assert SunEvent.SOLAR_MIDNIGHT.zenith is None
  assert SunEvent.SOLAR_NOON.is_transit
  assert SunEvent.SOLAR_NOON.motion is Motion.UPPER_TRANSIT


def test_zenith_sorts_by_angle():
  zeniths = [Zenith.ASTRONOMICAL, Zenith.GOLDEN, Zenith.CIVIL, Zenith.OFFICIAL, Zenith.NAUTICAL]
  assert sorted(zeniths) == [Zenith.GOLDEN, Zenith.OFFICIAL, Zenith.CIVIL, Zenith.NAUTICAL, Zenith.ASTRONOMICAL]


def test_events_sort_in_order_of_occurrence():
  events = [SunEvent.CIVIL_DUSK, SunEvent.SUNSET, SunEvent.SOLAR_NOON, SunEvent.SUNRISE, SunEvent.CIVIL_DAWN]
  assert sorted(events) == [
    SunEvent.CIVIL_DAWN,
    SunEvent.SUNRISE,
    SunEvent.SOLAR_NOON,
    SunEvent.SUNSET,
    SunEvent.CIVIL_DUSK,
  ]
  assert SunEvent.ASTRONOMICAL_DAWN < SunEvent.NAUTICAL_DAWN < SunEvent.CIVIL_DAWN
  assert SunEvent.NAUTICAL_DUSK < SunEvent.ASTRONOMICAL_DUSK


def test_rising_and_setting():
  assert SunEvent.SUNRISE.is_rising and not SunEvent.SUNRISE.is_setting
  assert SunEvent.ASTRONOMICAL_DUSK.is_setting


@pytest.mark.parametrize("text,expected", [
  ("sunrise", SunEvent.SUNRISE),
  ("civil-dawn", SunEvent.CIVIL_DAWN),
  ("NAUTICAL_DUSK", SunEvent.NAUTICAL_DUSK),
  ("dawn", SunEvent.CIVIL_DAWN),
  ("dusk", SunEvent.CIVIL_DUSK),
  ("noon", SunEvent.SOLAR_NOON),
  (" Solar Midnight ", SunEvent.SOLAR_MIDNIGHT),
])
def test_parse(text, expected):
  assert SunEvent.parse(text) is expected


def test_parse_unknown():
  with pytest.raises(ValueError):
    SunEvent.parse("moonrise")


def test_labels_round_trip():
  for event in SunEvent:
    assert SunEvent.parse(str(event)) is event
