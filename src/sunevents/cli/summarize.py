import sys

import click

from ..io.manifest import read_manifest


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  """Print per-site day-length statistics from an almanac manifest."""
  try:
    m = read_manifest(manifest)
  except ValueError as e:
    raise click.ClickException(str(e)) from e
  sites = m.get("sites", {})
  if not sites:
    click.echo("ERROR: no sites found in manifest", err=True)
    sys.exit(1)
  rows = sorted(sites.items())
  width = max(len("Site"), max(len(k) for k, _ in rows))
  click.echo("Site".ljust(width) + " |   Min h |   Max h |  Mean h | Polar day | Polar night")
  click.echo("-" * width + "-|---------|---------|---------|-----------|------------")
  for name, st in rows:
    click.echo(
      name.ljust(width)
      + f" | {st['min_hours']:7.2f} | {st['max_hours']:7.2f} | {st['mean_hours']:7.2f}"
      + f" | {st['polar_day_days']:9d} | {st['polar_night_days']:11d}"
    )
  total = sum(m.get("months", {}).values())
  click.echo(f"Year: {m.get('year')}, rows: {total:,}, events: {', '.join(m.get('events', []))}")


if __name__ == "__main__":
  main()
