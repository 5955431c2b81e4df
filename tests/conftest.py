from pathlib import Path

import pytest

from docs_settings import Settings

SCHEMA_FILE = Path(__file__).resolve().parents[1] / "tools" / "schemas" / "manifest.schema.json"

VALID_FM = """---
title: "Retrieval basics"
description: "Ground answers in your own data."
audience_levels: [beginner]
personas: [developer]
categories: [rag]
tags: [embeddings, search]
min_read_minutes: 7
last_reviewed: "2025-10-06"
---
Body text is ignored.
"""


def front_matter(**fields) -> str:
    """Tiny YAML writer for flat fields (lists written inline)."""
    lines = ["---"]
    for key, value in fields.items():
        if isinstance(value, list):
            lines.append(f"{key}: [{', '.join(value)}]")
        else:
            lines.append(f"{key}: {value}")
    lines += ["---", "", "Body."]
    return "\n".join(lines) + "\n"


@pytest.fixture
def repo(tmp_path: Path):
    """Write content files under tmp_path; returns the writer."""
    def write(rel: str, text: str) -> Path:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p
    write.root = tmp_path
    return write


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(repo_root=tmp_path, base_url="https://raw.example.test/main")
