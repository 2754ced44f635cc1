from datetime import date

import numpy as np

from sunevents.almanac import day_lengths, day_rows, daylight_stats
from sunevents.core.events import SunEvent
from sunevents.io.manifest import dataset_hash
from sunevents.io.schema import AlmanacRow
from sunevents.model.sites import SiteConfig

TROMSO = SiteConfig(name="tromso", latitude=69.6492, longitude=18.9553)


def test_almanac_row_schema():
  r = AlmanacRow(site="x", date="2020-06-21", event="sunrise", ts=None, utc=None)
  assert r.ts is None
  assert r.model_dump()["event"] == "sunrise"


def test_day_rows_keep_absent_events():
  rows = day_rows(TROMSO, date(2020, 12, 21), [SunEvent.SUNSET, SunEvent.SUNRISE, SunEvent.SOLAR_NOON])
  assert [r["event"] for r in rows] == ["sunrise", "solar-noon", "sunset"]
  assert rows[0]["ts"] is None and rows[0]["utc"] is None
  assert isinstance(rows[1]["ts"], int)
  assert rows[1]["utc"].startswith("2020-12-21T")


def test_daylight_stats_counts_polar_days():
  days = [date(2020, 6, 21), date(2020, 12, 21), date(2020, 3, 20)]
  hours = day_lengths(TROMSO, days)
  stats = daylight_stats(hours)
  assert stats.days == 3
  assert stats.polar_day_days == 1
  assert stats.polar_night_days == 1
  assert stats.max_hours == 24.0
  assert stats.min_hours == 0.0
  assert 11.5 < hours[2] < 13.0


def test_daylight_stats_plain_array():
  stats = daylight_stats(np.array([10.0, 12.0, 14.0]))
  assert stats.mean_hours == 12.0


def test_dataset_hash_ignores_existing_hash():
  meta = {"year": 2020, "months": {"2020-01": 3}}
  h = dataset_hash(meta)
  assert dataset_hash({**meta, "dataset_hash": "stale"}) == h
  assert len(h) == 16
