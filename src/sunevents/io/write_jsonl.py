import json
import os
from typing import Iterable


def write_almanac_jsonl(rows_iter: Iterable[dict], path: str) -> int:
  """One JSON object per line. Returns the row count; nothing is written for 0 rows."""
  rows = list(rows_iter)
  if not rows:
    return 0
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    for r in rows:
      f.write(json.dumps(r, ensure_ascii=False, sort_keys=True) + "\n")
  return len(rows)
