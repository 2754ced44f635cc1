"""Sun events: which zenith angle the sun crosses, and in which direction."""
from enum import Enum
from functools import total_ordering
from typing import Optional


@total_ordering
class Zenith(Enum):
  """Reference zenith angles in degrees."""
  GOLDEN = 80.0
  OFFICIAL = 90.833  # disk radius + standard refraction
  CIVIL = 96.0
  NAUTICAL = 102.0
  ASTRONOMICAL = 108.0

  @property
  def angle(self) -> float:
    return self.value

  @property
  def altitude(self) -> float:
    return 90.0 - self.value

  def __lt__(self, other):
    if not isinstance(other, Zenith):
      return NotImplemented
    return self.value < other.value

  def __str__(self):
    return self.name.lower()


class Motion(Enum):
  RISING = "rising"
  UPPER_TRANSIT = "upper_transit"
  SETTING = "setting"
  LOWER_TRANSIT = "lower_transit"


@total_ordering
class SunEvent(Enum):
  """A solar event, ordered by when it happens in a normal day."""

  ASTRONOMICAL_DAWN = (Zenith.ASTRONOMICAL, Motion.RISING)
  NAUTICAL_DAWN = (Zenith.NAUTICAL, Motion.RISING)
  CIVIL_DAWN = (Zenith.CIVIL, Motion.RISING)
  SUNRISE = (Zenith.OFFICIAL, Motion.RISING)
  GOLDEN_HOUR_END = (Zenith.GOLDEN, Motion.RISING)
  SOLAR_NOON = (None, Motion.UPPER_TRANSIT)
  GOLDEN_HOUR_START = (Zenith.GOLDEN, Motion.SETTING)
  SUNSET = (Zenith.OFFICIAL, Motion.SETTING)
  CIVIL_DUSK = (Zenith.CIVIL, Motion.SETTING)
  NAUTICAL_DUSK = (Zenith.NAUTICAL, Motion.SETTING)
  ASTRONOMICAL_DUSK = (Zenith.ASTRONOMICAL, Motion.SETTING)
  SOLAR_MIDNIGHT = (None, Motion.LOWER_TRANSIT)

  def __init__(self, zenith: Optional[Zenith], motion: Motion):
    self.zenith = zenith
    self.motion = motion

  @property
  def is_rising(self) -> bool:
    return self.motion is Motion.RISING

  @property
  def is_setting(self) -> bool:
    return self.motion is Motion.SETTING

  @property
  def is_transit(self) -> bool:
    return self.zenith is None

  @property
  def sort_key(self) -> tuple:
    # Rising events go deepest zenith first, setting events shallowest first.
    if self.motion is Motion.LOWER_TRANSIT:
      return (0, 0.0)
    if self.motion is Motion.RISING:
      return (1, -self.zenith.angle)
    if self.motion is Motion.UPPER_TRANSIT:
      return (2, 0.0)
    return (3, self.zenith.angle)

  def __lt__(self, other):
    if not isinstance(other, SunEvent):
      return NotImplemented
    return self.sort_key < other.sort_key

  @property
  def label(self) -> str:
    return self.name.lower().replace("_", "-")

  def __str__(self):
    return self.label

  @classmethod
  def parse(cls, text: str) -> "SunEvent":
    """Look up an event by label ("civil-dawn"), name ("CIVIL_DAWN") or alias ("dawn")."""
    key = text.strip().lower().replace("-", "_").replace(" ", "_")
    key = _ALIASES.get(key, key)
    try:
      return cls[key.upper()]
    except KeyError:
      raise ValueError(f"unknown sun event {text!r}") from None


_ALIASES = {
  "dawn": "civil_dawn",
  "dusk": "civil_dusk",
  "noon": "solar_noon",
  "midnight": "solar_midnight",
}
