# scripts/docs_utils.py
import datetime as dt
import re
from pathlib import PurePosixPath

from slugify import slugify

UNCATEGORIZED = "uncategorized"

_YMD_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# -------------------------
# Path helpers
# -------------------------
def to_posix(path: str) -> str:
    """Backslashes -> slashes, no leading slash."""
    return (path or "").replace("\\", "/").lstrip("/")

def root_relative(path: str) -> str:
    """'docs/a/b.md' -> '/docs/a/b.md'"""
    return "/" + to_posix(path)

def slug_for(rel_path: str, content_dir: str) -> str:
    """
    Path relative to the content root with the extension stripped.

    Examples:
      docs/guides/rag/intro.mdx  (content_dir=docs) -> guides/rag/intro
      docs/overview.md           (content_dir=docs) -> overview
    """
    p = PurePosixPath(to_posix(rel_path))
    base = PurePosixPath(to_posix(content_dir).rstrip("/")) if content_dir else None
    if base is not None and str(base) not in ("", "."):
        try:
            p = p.relative_to(base)
        except ValueError:
            pass
    return str(p.with_suffix(""))

# -------------------------
# Category helpers
# -------------------------
def normalize_category(value) -> str:
    """
    Lowercase, collapse every run of non-alphanumerics to one dash, trim edges.
    Empty result -> 'uncategorized'.
    """
    if not isinstance(value, str):
        return UNCATEGORIZED
    # literal text: no HTML entity decoding, commas between digits become dashes
    slug = slugify(
        value,
        entities=False,
        decimal=False,
        hexadecimal=False,
        replacements=[[",", "-"]],
    )
    return slug or UNCATEGORIZED

def _first_text(value):
    if isinstance(value, str) and value.strip():
        return value
    return None

def derive_category(metadata: dict, slug: str) -> str:
    """primary_category, else categories[0], else first slug segment."""
    candidate = _first_text(metadata.get("primary_category"))
    if candidate is None:
        cats = metadata.get("categories")
        if isinstance(cats, list) and cats:
            candidate = _first_text(cats[0])
    if candidate is None:
        candidate = (slug or "").split("/")[0]
    return normalize_category(candidate)

# -------------------------
# Date helpers
# -------------------------
def iso_utc_midnight(value):
    """
    2025-10-06 (str or date) -> '2025-10-06T00:00:00.000Z'.
    Anything else (datetimes, other formats, impossible dates) -> None.
    """
    if isinstance(value, dt.datetime):
        return None
    if isinstance(value, dt.date):
        day = value
    elif isinstance(value, str) and _YMD_RE.match(value):
        try:
            day = dt.date.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None
    return day.strftime("%Y-%m-%d") + "T00:00:00.000Z"

# -------------------------
# List helpers
# -------------------------
def as_list(value) -> list:
    """Lists pass through (copied); anything else is treated as absent."""
    return list(value) if isinstance(value, list) else []

def duplicates(items: list) -> list:
    """Values that occur more than once, in first-seen order."""
    seen, dupes = [], []
    for item in items:
        if item in seen:
            if item not in dupes:
                dupes.append(item)
        else:
            seen.append(item)
    return dupes
