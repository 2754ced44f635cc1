from typing import Optional

from pydantic import BaseModel

SCHEMA_VERSION = "1.0.0"


class AlmanacRow(BaseModel):
  site: str
  date: str                  # calendar date the event was solved for, ISO
  event: str                 # SunEvent label, e.g. "civil-dawn"
  ts: Optional[int]          # UTC epoch milliseconds, None when the event does not occur
  utc: Optional[str]         # same instant as ISO-8601


class DaylightStats(BaseModel):
  days: int
  min_hours: float
  max_hours: float
  mean_hours: float
  polar_day_days: int
  polar_night_days: int
