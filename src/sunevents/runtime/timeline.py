"""Walk through sun events day by day, forward or backward in time.

Each calendar date is solved independently; events that roll over into a
neighbouring UTC date are still picked up because the walk starts one day
before (or after) the start instant.
"""
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, List, Optional, Tuple
import logging

from ..core.assembler import time_of_event
from ..core.events import SunEvent
from ..core.julian import as_utc
from ..core.position import GlobalPosition

logger = logging.getLogger(__name__)

Occurrence = Tuple[SunEvent, datetime]


class SunEvents:
    """Iterates sun events at one position, limited to a set of event kinds."""

    def __init__(
        self,
        position: GlobalPosition,
        start: datetime,
        events: Iterable[SunEvent],
        max_idle_days: int = 366,
    ):
        """Initialize the timeline.

        Args:
            position: Where on the globe events are computed
            start: Instant to walk from (naive values are taken as UTC)
            events: Event kinds to include; must not be empty
            max_idle_days: Stop after this many consecutive days without
                any matching event (e.g. sunrise at the pole)

        Raises:
            ValueError: If `events` is empty
        """
        self.position = position
        self.start = as_utc(start)
        self.events: List[SunEvent] = sorted(set(events))
        if not self.events:
            raise ValueError("at least one sun event is required")
        self.max_idle_days = max_idle_days

    @classmethod
    def starting_from(
        cls,
        start: datetime,
        position: GlobalPosition,
        events: Iterable[SunEvent],
    ) -> "SunEvents":
        """Create a timeline starting at `start`."""
        return cls(position, start, events)

    def occurrences(self, d: date) -> List[Occurrence]:
        """All selected events computed for calendar date `d`, in time order.

        Args:
            d: The calendar date to solve

        Returns:
            List of (event, instant) pairs; events that do not occur are left out
        """
        found = []
        for event in self.events:
            ts = time_of_event(d, self.position, event)
            if ts is not None:
                found.append((event, ts))
        found.sort(key=lambda pair: pair[1])
        return found

    def forecast(self) -> Iterator[Occurrence]:
        """Yield events strictly after the start instant, earliest first."""
        current = self.start
        day = current.date() - timedelta(days=1)
        idle = 0
        while idle < self.max_idle_days:
            emitted = False
            for event, ts in self.occurrences(day):
                if ts > current:
                    current = ts
                    emitted = True
                    yield event, ts
            idle = 0 if emitted else idle + 1
            day += timedelta(days=1)
        logger.debug("No %s events for %d days after %s, stopping forecast", self._names(), idle, day)

    def history(self) -> Iterator[Occurrence]:
        """Yield events strictly before the start instant, latest first."""
        current = self.start
        day = current.date() + timedelta(days=1)
        idle = 0
        while idle < self.max_idle_days:
            emitted = False
            for event, ts in reversed(self.occurrences(day)):
                if ts < current:
                    current = ts
                    emitted = True
                    yield event, ts
            idle = 0 if emitted else idle + 1
            day -= timedelta(days=1)
        logger.debug("No %s events for %d days before %s, stopping history", self._names(), idle, day)

    def next_event(self) -> Optional[Occurrence]:
        """First event after the start instant, or None if none within the idle limit."""
        return next(self.forecast(), None)

    def previous_event(self) -> Optional[Occurrence]:
        """Last event before the start instant, or None if none within the idle limit."""
        return next(self.history(), None)

    def _names(self) -> str:
        return ",".join(str(e) for e in self.events)
