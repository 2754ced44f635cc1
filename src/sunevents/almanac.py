"""Per-site almanac rows and day-length statistics for a run of dates."""

from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence
import logging

import numpy as np

from .core.assembler import time_of_event
from .core.daylight import Daylight
from .core.events import SunEvent
from .io.schema import AlmanacRow, DaylightStats
from .model.sites import SiteConfig

logger = logging.getLogger(__name__)

DEFAULT_EVENTS = (
    SunEvent.ASTRONOMICAL_DAWN,
    SunEvent.NAUTICAL_DAWN,
    SunEvent.CIVIL_DAWN,
    SunEvent.SUNRISE,
    SunEvent.SOLAR_NOON,
    SunEvent.SUNSET,
    SunEvent.CIVIL_DUSK,
    SunEvent.NAUTICAL_DUSK,
    SunEvent.ASTRONOMICAL_DUSK,
)


def _epoch_ms(ts: Optional[datetime]) -> Optional[int]:
    return int(ts.timestamp() * 1000) if ts is not None else None


def day_rows(site: SiteConfig, d: date, events: Sequence[SunEvent] = DEFAULT_EVENTS) -> List[dict]:
    """One row per requested event for `site` on `d`, absent events included with null times."""
    position = site.position()
    rows = []
    for event in sorted(events):
        ts = time_of_event(d, position, event)
        row = AlmanacRow(
            site=site.name,
            date=d.isoformat(),
            event=event.label,
            ts=_epoch_ms(ts),
            utc=ts.isoformat() if ts is not None else None,
        )
        rows.append(row.model_dump())
    return rows


def day_lengths(site: SiteConfig, days: Iterable[date]) -> np.ndarray:
    """Hours of daylight for each day (24 for polar day, 0 for polar night)."""
    daylight = Daylight(site.position())
    return np.array([daylight.day_length(d).total_seconds() / 3600.0 for d in days], dtype=float)


def daylight_stats(hours: np.ndarray) -> DaylightStats:
    if hours.size == 0:
        raise ValueError("no days to summarize")
    return DaylightStats(
        days=int(hours.size),
        min_hours=round(float(np.min(hours)), 3),
        max_hours=round(float(np.max(hours)), 3),
        mean_hours=round(float(np.mean(hours)), 3),
        polar_day_days=int(np.count_nonzero(hours >= 24.0)),
        polar_night_days=int(np.count_nonzero(hours <= 0.0)),
    )
