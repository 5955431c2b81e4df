# scripts/content_index.py
"""
Shared content index: file discovery + front matter extraction.

Both check_frontmatter.py and build_manifest.py read the corpus through
build_index(), so they always agree on which files exist and what their
metadata says. Each tool applies its own policy on top:

  HARD fields  missing/blank -> builder excludes the record (warns)
  SOFT fields  malformed     -> builder omits the field, keeps the record
  FATAL        content root missing, unreadable file -> the run aborts
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import frontmatter
import yaml

from docs_settings import Settings
from docs_utils import to_posix

HARD_FIELDS = ("title",)
SOFT_FIELDS = ("description", "min_read_minutes", "last_reviewed")


class ContentRootError(RuntimeError):
    """The content root is missing, not a directory, or outside the repo root."""


@dataclass
class ContentEntry:
    path: str                      # repo-root-relative, POSIX separators
    metadata: dict = field(default_factory=dict)
    error: str = None              # front matter parse error, if any


def _is_hidden(name: str) -> bool:
    return name.startswith(".")

def discover_files(settings: Settings) -> list:
    """
    Every content file under the content root, as sorted repo-relative paths.
    Hidden files and anything under a hidden directory are skipped.
    """
    root = settings.content_root
    if not root.is_dir():
        raise ContentRootError(f"content root not found: {root}")
    try:
        root.relative_to(settings.repo_root)
    except ValueError:
        raise ContentRootError(f"content root {root} is outside the repo root {settings.repo_root}") from None

    exts = {e.lower() for e in settings.extensions}
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if not _is_hidden(d)]
        for name in filenames:
            if _is_hidden(name):
                continue
            if Path(name).suffix.lower() not in exts:
                continue
            full = Path(dirpath) / name
            found.append(to_posix(full.relative_to(settings.repo_root).as_posix()))
    # manifest hash must not depend on listing order
    return sorted(found)

def parse_front_matter(text: str) -> dict:
    """Metadata mapping for a file's text; {} when there is no front matter."""
    post = frontmatter.loads(text)
    return dict(post.metadata)

def load_entry(settings: Settings, rel_path: str) -> ContentEntry:
    raw = (settings.repo_root / rel_path).read_text(encoding="utf-8")
    try:
        metadata = parse_front_matter(raw)
    except (yaml.YAMLError, ValueError) as e:  # JSON/TOML decode errors are ValueErrors
        return ContentEntry(path=rel_path, metadata={}, error=f"unparsable front matter ({e})")
    return ContentEntry(path=rel_path, metadata=metadata)

def build_index(settings: Settings) -> list:
    """ContentEntry for every discovered file, in discovery order."""
    return [load_entry(settings, p) for p in discover_files(settings)]
