import hashlib
import json
import os


def dataset_hash(meta: dict) -> str:
  # Hash covers everything except the hash itself.
  payload = {k: v for k, v in meta.items() if k != "dataset_hash"}
  s = json.dumps(payload, sort_keys=True).encode()
  return hashlib.sha256(s).hexdigest()[:16]


def write_manifest(path: str, meta: dict, schema_version: str):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  meta["schema_version"] = schema_version
  meta["dataset_hash"] = dataset_hash(meta)
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2)


def read_manifest(path: str) -> dict:
  with open(path, encoding="utf-8") as f:
    meta = json.load(f)
  if meta.get("dataset_hash") != dataset_hash(meta):
    raise ValueError(f"manifest {path} has a stale or missing dataset_hash")
  return meta
