from pathlib import Path
from typing import List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
  path: str = "out/"
  format: Literal["parquet", "jsonl"] = "parquet"


class AlmanacConfig(BaseModel):
  year: int = 2025
  sites_file: Optional[str] = None
  sites: Optional[List[str]] = None          # names to include; None means every site
  events: Optional[List[str]] = None         # event labels; None means the default set
  output: OutputConfig = Field(default_factory=OutputConfig)


def load_almanac_config(path: Union[str, Path]) -> AlmanacConfig:
  raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  cfg = AlmanacConfig(**raw)
  # Relative sites files resolve against the config file's directory.
  if cfg.sites_file and not Path(cfg.sites_file).is_absolute():
    cfg.sites_file = str(Path(path).parent / cfg.sites_file)
  return cfg
