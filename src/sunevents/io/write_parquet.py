import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

ALMANAC_SCHEMA = pa.schema([
  ("site", pa.string()),
  ("date", pa.string()),
  ("event", pa.string()),
  ("ts", pa.int64()),
  ("utc", pa.string()),
])


def write_almanac_parquet(rows_iter: Iterable[dict], path: str, schema_version: str) -> int:
  """Write almanac rows to a snappy Parquet file. Returns the row count; nothing is written for 0 rows."""
  rows = list(rows_iter)
  if not rows:
    return 0
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  schema = ALMANAC_SCHEMA.with_metadata({"schema_version": schema_version})
  table = pa.Table.from_pylist(rows, schema=schema)
  pq.write_table(table, path, compression="snappy")
  return len(rows)
