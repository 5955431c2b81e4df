# scripts/docs_settings.py
"""
Settings shared by the content tools.

Environment variables are read in exactly one place, Settings.from_env(),
which each tool calls from main(). Everything below main() takes a Settings.

  DOCS_CONTENT_DIR   content root, relative to the repo root   (docs)
  MANIFEST_BASE_URL  prefix for each record's sourceUrl         ("")
  MANIFEST_OUT       manifest output path                        (manifest.json)
  MANIFEST_VERSION   manifest schema version                     (2025.10.0)
  MANIFEST_STRICT    1 = a skipped file fails the build          (0)
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_CONTENT_DIR = "docs"
DEFAULT_EXTENSIONS = (".md", ".mdx")
DEFAULT_OUTPUT = "manifest.json"
DEFAULT_SCHEMA_REF = "./tools/schemas/manifest.schema.json"
DEFAULT_VERSION = "2025.10.0"


@dataclass(frozen=True)
class Settings:
    repo_root: Path
    content_dir: str = DEFAULT_CONTENT_DIR
    extensions: tuple = DEFAULT_EXTENSIONS
    base_url: str = ""
    output_path: Path = field(default=Path(DEFAULT_OUTPUT))
    schema_ref: str = DEFAULT_SCHEMA_REF
    version: str = DEFAULT_VERSION
    strict: bool = False

    @property
    def content_root(self) -> Path:
        return self.repo_root / self.content_dir

    @property
    def schema_path(self) -> Path:
        return self.repo_root / self.schema_ref

    @property
    def manifest_path(self) -> Path:
        """Output path; relative values resolve against the repo root."""
        out = Path(self.output_path)
        return out if out.is_absolute() else self.repo_root / out

    def source_url(self, root_relative_path: str) -> str:
        return self.base_url.rstrip("/") + root_relative_path

    def with_overrides(self, **changes) -> "Settings":
        """Copy with every non-None keyword applied (argparse defaults are None)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ=None, repo_root=None) -> "Settings":
        env = os.environ if environ is None else environ
        root = Path(repo_root) if repo_root is not None else Path.cwd()
        return cls(
            repo_root=root,
            content_dir=env.get("DOCS_CONTENT_DIR", DEFAULT_CONTENT_DIR).strip() or DEFAULT_CONTENT_DIR,
            base_url=env.get("MANIFEST_BASE_URL", "").strip(),
            output_path=Path(env.get("MANIFEST_OUT", "").strip() or DEFAULT_OUTPUT),
            version=env.get("MANIFEST_VERSION", "").strip() or DEFAULT_VERSION,
            strict=env.get("MANIFEST_STRICT", "0") == "1",
        )
