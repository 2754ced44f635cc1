"""UTC times of sunrise, sunset, solar noon and twilight for any date and place."""

from .core.assembler import time_of_event
from .core.daylight import Daylight
from .core.events import Motion, SunEvent, Zenith
from .core.hour_angle import solve as solve_hour_angle
from .core.julian import julian_century, julian_day
from .core.position import GlobalPosition, InvalidCoordinate
from .core.solar_position import SolarCoordinates, compute as solar_coordinates
from .runtime.timeline import SunEvents

__all__ = [
    "time_of_event",
    "Daylight",
    "Motion",
    "SunEvent",
    "Zenith",
    "solve_hour_angle",
    "julian_century",
    "julian_day",
    "GlobalPosition",
    "InvalidCoordinate",
    "SolarCoordinates",
    "solar_coordinates",
    "SunEvents",
]
