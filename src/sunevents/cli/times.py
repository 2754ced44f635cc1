"""Print UTC sun event times for one position and date."""

from datetime import datetime, timezone
import logging

import click

from ..core.assembler import time_of_event
from ..core.events import SunEvent
from ..core.position import GlobalPosition, InvalidCoordinate
from ..model.sites import SiteNotFound, get_site, load_sites
from ..runtime.timeline import SunEvents
from .common import configure_logging, events_callback

logger = logging.getLogger(__name__)


def _resolve_position(lat, lng, site, config) -> GlobalPosition:
  if site:
    if lat is not None or lng is not None:
      raise click.UsageError("--site cannot be combined with --lat/--lng")
    try:
      return get_site(load_sites(config), site).position()
    except SiteNotFound:
      raise click.BadParameter(f"no site named {site!r}", param_hint="--site") from None
  if lat is None or lng is None:
    raise click.UsageError("give either --site or both --lat and --lng")
  return GlobalPosition.at(lat, lng)


@click.command()
@click.option("--lat", type=float, help="Latitude in degrees, north positive")
@click.option("--lng", type=float, help="Longitude in degrees, east positive")
@click.option("--site", type=str, help="Named site from the sites file")
@click.option("--config", type=click.Path(exists=True), help="Sites YAML (default: bundled sites)")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Calendar date (default: today, UTC)")
@click.option("--event", "events", multiple=True, callback=events_callback,
              help="Event label, repeatable (default: all events)")
@click.option("--forecast", type=int, default=0, help="Instead of one date, list the next N events from now")
@click.option("--verbose", is_flag=True, help="Debug logging")
def main(lat, lng, site, config, day, events, forecast, verbose):
  """Print the UTC time of sun events, one per line, or "none" when an event does not occur.

  Examples:
      sunevents-times --lat 51.4810066 --lng 0.0081805 --date 2020-06-21
      sunevents-times --site tromso --event sunrise --event sunset
      sunevents-times --site greenwich --forecast 6 --event dawn --event dusk
  """
  configure_logging(verbose)
  if forecast > 0 and day is not None:
    raise click.UsageError("--forecast starts from now and cannot be combined with --date")
  try:
    position = _resolve_position(lat, lng, site, config)
  except InvalidCoordinate as e:
    raise click.BadParameter(str(e)) from e
  events = events or sorted(SunEvent)

  if forecast > 0:
    timeline = SunEvents.starting_from(datetime.now(timezone.utc), position, events)
    count = 0
    for event, ts in timeline.forecast():
      click.echo(f"{event.label:<20} {ts.isoformat()}")
      count += 1
      if count >= forecast:
        break
    if count < forecast:
      click.echo(f"only {count} events found", err=True)
    return

  d = day.date() if day else datetime.now(timezone.utc).date()
  logger.debug("Solving %d events for %s at %s", len(events), d, position)
  for event in events:
    ts = time_of_event(d, position, event)
    click.echo(f"{event.label:<20} {ts.isoformat() if ts else 'none'}")


if __name__ == "__main__":
  main()
