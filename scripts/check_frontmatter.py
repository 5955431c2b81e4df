# scripts/check_frontmatter.py
"""
CI gate for content front matter.

Checks every file from the content index and reports ALL issues in one pass:
- audience_levels / personas / categories must be lists with >= 1 item
- tags / related / search_keywords / related_project_types, when lists,
  must not contain duplicates (required lists are held to the same rule)
- primary_category, when set, must be one of categories

Exit codes: 0 clean, 1 issues found, 2 content root / IO error.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from content_index import ContentRootError, build_index
from docs_settings import Settings
from docs_utils import duplicates

REQUIRED_ARRAY_FIELDS = (
    ("audience_levels", 1),
    ("personas", 1),
    ("categories", 1),
)

OPTIONAL_ARRAY_FIELDS = (
    "tags",
    "related",
    "search_keywords",
    "related_project_types",
)

def log(*args): print("[check-frontmatter]", *args, flush=True)
def warn(*args): print("[check-frontmatter]", *args, file=sys.stderr, flush=True)


@dataclass(frozen=True)
class Issue:
    path: str
    message: str

    def __str__(self):
        return f"{self.path}: {self.message}"


def check_array_field(path: str, data: dict, key: str, min_items: int = 0) -> list:
    value = data.get(key)
    if not isinstance(value, list):
        return [Issue(path, f"missing array for '{key}'")]

    issues = []
    if len(value) < min_items:
        issues.append(Issue(path, f"'{key}' requires at least {min_items} item(s)"))
    if duplicates(value):
        shown = ", ".join(str(v) for v in value)
        issues.append(Issue(path, f"'{key}' contains duplicates -> [{shown}]"))
    return issues

def validate_metadata(path: str, data: dict) -> list:
    issues = []
    for key, min_items in REQUIRED_ARRAY_FIELDS:
        issues.extend(check_array_field(path, data, key, min_items))

    for key in OPTIONAL_ARRAY_FIELDS:
        if isinstance(data.get(key), list):
            issues.extend(check_array_field(path, data, key))

    primary = data.get("primary_category")
    categories = data.get("categories")
    if primary and isinstance(categories, list) and primary not in categories:
        issues.append(Issue(path, f"'primary_category' ({primary}) is not listed in categories"))
    return issues

def validate_index(entries) -> list:
    issues = []
    for entry in entries:
        if entry.error:
            warn(f"{entry.path}: {entry.error}")
        issues.extend(validate_metadata(entry.path, entry.metadata))
    return issues

def run(settings: Settings) -> int:
    try:
        entries = build_index(settings)
    except (ContentRootError, OSError, UnicodeDecodeError) as e:
        warn(f"Frontmatter validation encountered an unexpected error: {e}")
        return 2

    issues = validate_index(entries)
    if issues:
        warn(f"Frontmatter validation failed with {len(issues)} issue(s):")
        for issue in issues:
            warn(str(issue))
        return 1

    log(f"Frontmatter validation passed for {len(entries)} document(s).")
    return 0

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Validate front matter of every content file")
    ap.add_argument("--root", type=Path, help="Repository root (default: cwd)")
    ap.add_argument("--content-dir", help="Content directory under the root (default: docs)")
    args = ap.parse_args(argv)

    settings = Settings.from_env(repo_root=args.root).with_overrides(content_dir=args.content_dir)
    return run(settings)

if __name__ == "__main__":
    raise SystemExit(main())
