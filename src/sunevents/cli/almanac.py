from pathlib import Path
import logging

import click
from pydantic import ValidationError

from ..almanac import DEFAULT_EVENTS, day_lengths, day_rows, daylight_stats
from ..core.position import InvalidCoordinate
from ..core.timebase import Timebase
from ..io.manifest import write_manifest
from ..io.schema import SCHEMA_VERSION
from ..io.write_jsonl import write_almanac_jsonl
from ..io.write_parquet import write_almanac_parquet
from ..model.almanac import load_almanac_config
from ..model.sites import SiteNotFound, get_site, load_sites
from .common import configure_logging, parse_events

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", required=True, type=click.Path(exists=True))
@click.option("--verbose", is_flag=True, help="Debug logging")
def main(config, verbose):
  """Write a year of sun event times for every configured site, one shard per month."""
  configure_logging(verbose)
  try:
    cfg = load_almanac_config(config)
    all_sites = load_sites(cfg.sites_file)
    names = cfg.sites or sorted(all_sites)
    sites = [get_site(all_sites, n) for n in names]
    for s in sites:
      s.position()
  except (ValidationError, InvalidCoordinate) as e:
    raise click.ClickException(f"invalid configuration: {e}") from e
  except SiteNotFound as e:
    raise click.ClickException(f"unknown site {e.args[0]!r} in configuration") from e
  events = parse_events(cfg.events) if cfg.events else list(DEFAULT_EVENTS)
  year = cfg.year
  fmt = cfg.output.format
  out_dir = Path(cfg.output.path) / f"{year:04d}"
  logger.info("Building %d almanac for %d sites, %d events, format=%s", year, len(sites), len(events), fmt)

  tb = Timebase(year)
  meta = {
    "year": year,
    "format": fmt,
    "events": [e.label for e in events],
    "months": {},
    "sites": {},
  }
  for month, days in tb.months():
    rows = []
    for d in days:
      for s in sites:
        rows.extend(day_rows(s, d, events))
    shard_path = out_dir / f"{month:02d}" / f"almanac_{year:04d}_{month:02d}.{fmt}"
    if fmt == "parquet":
      written = write_almanac_parquet(rows, str(shard_path), SCHEMA_VERSION)
    else:
      written = write_almanac_jsonl(rows, str(shard_path))
    meta["months"][f"{year:04d}-{month:02d}"] = written
    logger.debug("Wrote %d rows to %s", written, shard_path)

  for s in sites:
    hours = day_lengths(s, tb.days())
    meta["sites"][s.name] = {
      "latitude": s.latitude,
      "longitude": s.longitude,
      **daylight_stats(hours).model_dump(),
    }
  manifest_path = out_dir / "manifest.json"
  write_manifest(str(manifest_path), meta, SCHEMA_VERSION)
  click.echo(f"Done. Wrote almanac to {out_dir}")


if __name__ == "__main__":
  main()
