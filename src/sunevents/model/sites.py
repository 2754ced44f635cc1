from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel

from ..core.position import GlobalPosition

DEFAULT_SITES = Path(__file__).parent.parent / "config" / "sites.yaml"


class SiteNotFound(KeyError):
  """No site with the requested name in the configuration."""


class SiteConfig(BaseModel):
  name: str
  latitude: float
  longitude: float
  description: Optional[str] = None

  def position(self) -> GlobalPosition:
    return GlobalPosition.at(self.latitude, self.longitude)


def parse_sites(raw: Union[dict, list]) -> Dict[str, SiteConfig]:
  # Accepts {"sites": {name: {...}}}, {name: {...}} or a list of entries with a name.
  if isinstance(raw, dict) and "sites" in raw:
    raw = raw["sites"]
  if isinstance(raw, dict):
    entries = [{"name": k, **v} for k, v in raw.items()]
  else:
    entries = list(raw or [])
  sites = [SiteConfig(**e) for e in entries]
  return {s.name: s for s in sites}


def load_sites(path: Union[str, Path, None] = None) -> Dict[str, SiteConfig]:
  path = Path(path) if path else DEFAULT_SITES
  return parse_sites(yaml.safe_load(path.read_text(encoding="utf-8")))


def get_site(sites: Dict[str, SiteConfig], name: str) -> SiteConfig:
  if name not in sites:
    raise SiteNotFound(name)
  return sites[name]
