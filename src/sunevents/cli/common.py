import logging

import click

from ..core.events import SunEvent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool):
  logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def parse_events(values) -> list:
  try:
    return sorted({SunEvent.parse(v) for v in values})
  except ValueError as e:
    choices = ", ".join(ev.label for ev in SunEvent)
    raise click.BadParameter(f"{e}; choose from {choices}") from e


def events_callback(ctx, param, value):
  return parse_events(value) if value else None
