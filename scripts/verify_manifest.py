# scripts/verify_manifest.py
"""
Check a written manifest.json the way a consumer would:
- it matches tools/schemas/manifest.schema.json
- its `hash` equals the hash recomputed from its `docs`

Usage:
  python scripts/verify_manifest.py [--root .] [--manifest manifest.json]
"""

import argparse
import json
import sys
from pathlib import Path

import jsonschema

from build_manifest import compute_hash
from docs_settings import Settings

def log(*args): print("[verify-manifest]", *args, flush=True)
def warn(*args): print("[verify-manifest]", *args, file=sys.stderr, flush=True)


def load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))

def schema_problems(manifest: dict, schema: dict) -> list:
    validator_cls = jsonschema.validators.validator_for(schema)
    problems = []
    for err in sorted(validator_cls(schema).iter_errors(manifest), key=lambda e: [str(p) for p in e.path]):
        where = "/".join(str(p) for p in err.path) or "<root>"
        problems.append(f"schema: {where}: {err.message}")
    return problems

def hash_problems(manifest: dict) -> list:
    docs = manifest.get("docs")
    if not isinstance(docs, list):
        return []
    expected = compute_hash(docs)
    if manifest.get("hash") != expected:
        return [f"hash mismatch: manifest says {manifest.get('hash')}, docs hash to {expected}"]
    return []

def verify(manifest: dict, schema: dict) -> list:
    if not isinstance(manifest, dict):
        return ["manifest root must be a JSON object"]
    return schema_problems(manifest, schema) + hash_problems(manifest)

def run(settings: Settings) -> int:
    path = settings.manifest_path
    try:
        manifest = load_json(path)
        schema = load_json(settings.schema_path)
    except (OSError, ValueError) as e:
        warn(f"Manifest verification could not start: {e}")
        return 2

    problems = verify(manifest, schema)
    if problems:
        warn(f"Manifest verification failed with {len(problems)} problem(s):")
        for p in problems:
            warn(f"- {p}")
        return 1

    log(f"Manifest OK. hash={manifest['hash']} docs={len(manifest['docs'])}")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Verify manifest.json against its schema and hash")
    ap.add_argument("--root", type=Path, help="Repository root (default: cwd)")
    ap.add_argument("--manifest", type=Path, help="Manifest path (default: manifest.json)")
    args = ap.parse_args(argv)

    settings = Settings.from_env(repo_root=args.root).with_overrides(output_path=args.manifest)
    return run(settings)

if __name__ == "__main__":
    raise SystemExit(main())
