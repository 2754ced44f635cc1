from dataclasses import dataclass
import math


class InvalidCoordinate(ValueError):
  """Latitude or longitude outside its physical range, or not finite."""


@dataclass(frozen=True)
class GlobalPosition:
  """A point on the globe in decimal degrees, longitude east-positive.

  Out-of-range values are rejected, never clamped.
  """
  latitude: float
  longitude: float

  def __post_init__(self):
    _check("latitude", self.latitude, 90.0)
    _check("longitude", self.longitude, 180.0)

  @classmethod
  def at(cls, latitude: float, longitude: float) -> "GlobalPosition":
    try:
      return cls(float(latitude), float(longitude))
    except (TypeError, ValueError) as e:
      if isinstance(e, InvalidCoordinate):
        raise
      raise InvalidCoordinate(f"not a coordinate: ({latitude!r}, {longitude!r})") from e


def _check(name: str, value: float, limit: float):
  if not isinstance(value, (int, float)) or not math.isfinite(value):
    raise InvalidCoordinate(f"{name} must be a finite number, got {value!r}")
  if not -limit <= value <= limit:
    raise InvalidCoordinate(f"{name} {value} outside [-{limit:g}, {limit:g}]")
