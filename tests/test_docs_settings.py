"""Tests for environment-driven settings."""

from pathlib import Path

from docs_settings import DEFAULT_VERSION, Settings


def test_defaults_without_env(tmp_path):
    s = Settings.from_env(environ={}, repo_root=tmp_path)
    assert s.content_root == tmp_path / "docs"
    assert s.base_url == ""
    assert s.manifest_path == tmp_path / "manifest.json"
    assert s.version == DEFAULT_VERSION
    assert s.strict is False
    assert s.source_url("/docs/a.md") == "/docs/a.md"


def test_env_values(tmp_path):
    env = {
        "DOCS_CONTENT_DIR": "content",
        "MANIFEST_BASE_URL": "https://raw.example.test/main/",
        "MANIFEST_OUT": "/srv/site/manifest.json",
        "MANIFEST_VERSION": "2026.1.0",
        "MANIFEST_STRICT": "1",
    }
    s = Settings.from_env(environ=env, repo_root=tmp_path)
    assert s.content_root == tmp_path / "content"
    assert s.manifest_path == Path("/srv/site/manifest.json")
    assert s.version == "2026.1.0"
    assert s.strict is True
    assert s.source_url("/content/a.md") == "https://raw.example.test/main/content/a.md"


def test_with_overrides_ignores_none(tmp_path):
    s = Settings(repo_root=tmp_path, base_url="https://a.test")
    t = s.with_overrides(base_url=None, content_dir="guides")
    assert t.base_url == "https://a.test"
    assert t.content_dir == "guides"
    assert s.content_dir == "docs"
