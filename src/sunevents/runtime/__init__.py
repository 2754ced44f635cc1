"""Day-by-day iteration over sun events."""

from .timeline import SunEvents, Occurrence

__all__ = [
    "SunEvents",
    "Occurrence",
]
