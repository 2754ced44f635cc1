from typing import Optional
import logging
import math

from .units import to_degrees, to_radians

logger = logging.getLogger(__name__)


def cos_hour_angle(declination: float, latitude: float, zenith: float) -> float:
  lat = to_radians(latitude)
  dec = to_radians(declination)
  return ((math.cos(to_radians(zenith)) - math.sin(lat) * math.sin(dec))
          / (math.cos(lat) * math.cos(dec)))


def solve(declination: float, latitude: float, zenith: float) -> Optional[float]:
  """Hour angle in degrees [0, 180] at which the sun sits at `zenith`.

  Returns None when the sun never reaches that zenith angle on the day
  (cos H > 1) or never leaves it (cos H < -1). Both are normal answers
  poleward of the polar circles, not errors.
  """
  cos_h = cos_hour_angle(declination, latitude, zenith)
  if cos_h > 1.0:
    logger.debug("sun never reaches zenith %.3f at lat %.4f (dec %.4f)", zenith, latitude, declination)
    return None
  if cos_h < -1.0:
    logger.debug("sun never leaves zenith %.3f at lat %.4f (dec %.4f)", zenith, latitude, declination)
    return None
  return to_degrees(math.acos(cos_h))
