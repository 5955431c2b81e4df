# scripts/build_manifest.py
"""
Aggregate content front matter into one hash-stamped manifest.json.

- One record per content file that has a title (titleless files are skipped
  with a warning, or abort the run when strict)
- Records keep discovery order (sorted paths)
- `hash` covers the docs array only, never generated_at, so identical
  content always yields the identical hash
"""

import argparse
import datetime as dt
import hashlib
import json
import sys
from pathlib import Path

from content_index import HARD_FIELDS, SOFT_FIELDS, ContentRootError, build_index
from docs_settings import Settings
from docs_utils import as_list, derive_category, iso_utc_midnight, root_relative, slug_for

HASH_LENGTH = 16

LIST_FIELDS = (
    "audience_levels",
    "personas",
    "categories",
    "tags",
    "search_keywords",
    "related",
    "related_project_types",
)

def log(*args): print("[build-manifest]", *args, flush=True)
def warn(*args): print("[build-manifest]", *args, file=sys.stderr, flush=True)


class ManifestError(RuntimeError):
    """The manifest cannot be produced (strict-mode skip, unwritable output)."""


# ----- Records ----------------------------------------------------------------
def _text(value):
    return value if isinstance(value, str) else None

def _minutes(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None

# front matter key -> (record key, coercer); a None result omits the field
SOFT_FIELD_RULES = {
    "description": ("description", _text),
    "min_read_minutes": ("min_read_minutes", _minutes),
    "last_reviewed": ("lastUpdated", iso_utc_midnight),
}

def missing_hard_field(metadata: dict):
    """First HARD field that is absent, non-text or blank, else None."""
    for key in HARD_FIELDS:
        value = metadata.get(key)
        if not (isinstance(value, str) and value.strip()):
            return key
    return None

def build_record(settings: Settings, entry):
    """Document record for one ContentEntry, or None when it must be excluded."""
    meta = entry.metadata
    if missing_hard_field(meta) is not None:
        return None

    path = root_relative(entry.path)
    slug = slug_for(entry.path, settings.content_dir)
    record = {
        "path": path,
        "slug": slug,
        "category": derive_category(meta, slug),
    }
    for key in HARD_FIELDS:
        record[key] = meta[key]
    for key in LIST_FIELDS:
        record[key] = as_list(meta.get(key))
    for key in SOFT_FIELDS:
        out_key, coerce = SOFT_FIELD_RULES[key]
        value = coerce(meta.get(key))
        if value is not None:
            record[out_key] = value

    record["sourcePath"] = path
    record["sourceUrl"] = settings.source_url(path)
    return record

# ----- Hash -------------------------------------------------------------------
def canonical_json(docs) -> str:
    return json.dumps(docs, indent=2, sort_keys=True, ensure_ascii=False, default=str)

def compute_hash(docs) -> str:
    """Short sha256 over the canonical form of the ordered docs list."""
    digest = hashlib.sha256(canonical_json(docs).encode("utf-8")).hexdigest()
    return digest[:HASH_LENGTH]

# ----- Manifest ---------------------------------------------------------------
def utc_now_iso(now=None) -> str:
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def collect_docs(settings: Settings, entries):
    """(docs, skipped_paths) with docs in discovery order."""
    docs, skipped = [], []
    for entry in entries:
        record = build_record(settings, entry)
        if record is None:
            reason = entry.error or f"missing frontmatter {missing_hard_field(entry.metadata)}"
            if settings.strict:
                raise ManifestError(f"{entry.path}: {reason}")
            warn(f"Skipping {entry.path}: {reason}")
            skipped.append(entry.path)
            continue
        docs.append(record)
    return docs, skipped

def build_manifest(settings: Settings, now=None):
    docs, skipped = collect_docs(settings, build_index(settings))
    manifest = {
        "$schema": settings.schema_ref,
        "version": settings.version,
        "generated_at": utc_now_iso(now),
        "hash": compute_hash(docs),
        "docs": docs,
    }
    return manifest, skipped

def previous_hash(path: Path):
    """Hash of an existing manifest at `path`, if there is a readable one."""
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text("utf-8")).get("hash")
    except (ValueError, AttributeError):
        return None

def write_manifest(path: Path, manifest: dict) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False, default=str) + "\n", encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"cannot write {path}: {e}") from e

def run(settings: Settings) -> int:
    out = settings.manifest_path
    try:
        manifest, _ = build_manifest(settings)
        before = previous_hash(out)
        write_manifest(out, manifest)
    except (ContentRootError, ManifestError, OSError, UnicodeDecodeError) as e:
        warn(f"Manifest build failed: {e}")
        return 2

    log(f"Manifest built with hash: {manifest['hash']} and {len(manifest['docs'])} docs -> {out}")
    if before == manifest["hash"]:
        log("No content changes since previous manifest.")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Build manifest.json from content front matter")
    ap.add_argument("--root", type=Path, help="Repository root (default: cwd)")
    ap.add_argument("--content-dir", help="Content directory under the root (default: docs)")
    ap.add_argument("--out", type=Path, help="Manifest output path (default: manifest.json)")
    ap.add_argument("--base-url", help="Prefix for each record's sourceUrl")
    ap.add_argument("--strict", action="store_true", default=None, help="Fail instead of skipping titleless files")
    args = ap.parse_args(argv)

    settings = Settings.from_env(repo_root=args.root).with_overrides(
        content_dir=args.content_dir,
        output_path=args.out,
        base_url=args.base_url,
        strict=args.strict,
    )
    return run(settings)

if __name__ == "__main__":
    raise SystemExit(main())
