"""Tests for docs_utils helpers."""

import datetime as dt

import pytest

from docs_utils import (
    UNCATEGORIZED,
    as_list,
    derive_category,
    duplicates,
    iso_utc_midnight,
    normalize_category,
    root_relative,
    slug_for,
)


def test_root_relative_normalizes_separators():
    assert root_relative("docs\\guides\\intro.md") == "/docs/guides/intro.md"
    assert root_relative("/docs/a.md") == "/docs/a.md"


@pytest.mark.parametrize(
    "rel, expected",
    [
        ("docs/guides/rag/intro.mdx", "guides/rag/intro"),
        ("docs/overview.md", "overview"),
        ("docs/notes/v1.2-release.md", "notes/v1.2-release"),
    ],
)
def test_slug_for_strips_content_dir_and_extension(rel, expected):
    assert slug_for(rel, "docs") == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Foo Bar", "foo-bar"),
        ("  RAG / Retrieval  ", "rag-retrieval"),
        ("prompt--engineering", "prompt-engineering"),
        ("1,000 tips", "1-000-tips"),
        ("Don't Panic", "don-t-panic"),
        ("Q&amp;A", "q-amp-a"),
        ("---", UNCATEGORIZED),
        ("", UNCATEGORIZED),
        (None, UNCATEGORIZED),
    ],
)
def test_normalize_category(value, expected):
    assert normalize_category(value) == expected


def test_derive_category_prefers_primary_category():
    meta = {"primary_category": "Foo Bar", "categories": ["other"]}
    assert derive_category(meta, "guides/x") == "foo-bar"


def test_derive_category_falls_back_to_first_category():
    meta = {"categories": ["Agents & Tools", "rag"]}
    assert derive_category(meta, "guides/x") == "agents-tools"


def test_derive_category_falls_back_to_first_path_segment():
    assert derive_category({}, "Getting Started/install") == "getting-started"
    assert derive_category({"categories": []}, "overview") == "overview"


def test_derive_category_skips_blank_primary():
    meta = {"primary_category": "  ", "categories": ["evals"]}
    assert derive_category(meta, "guides/x") == "evals"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-10-06", "2025-10-06T00:00:00.000Z"),
        (dt.date(2024, 2, 29), "2024-02-29T00:00:00.000Z"),
        ("10/06/2025", None),
        ("2025-10-06T10:00:00", None),
        ("2025-13-01", None),
        ("2025-1-6", None),
        (dt.datetime(2025, 10, 6, 9, 30), None),
        (20251006, None),
        (None, None),
    ],
)
def test_iso_utc_midnight(value, expected):
    assert iso_utc_midnight(value) == expected


def test_as_list_treats_non_lists_as_absent():
    assert as_list(["a", "b"]) == ["a", "b"]
    assert as_list("a") == []
    assert as_list(None) == []


def test_duplicates_reports_each_repeated_value_once():
    assert duplicates(["a", "a", "b", "a", "c", "c"]) == ["a", "c"]
    assert duplicates(["a", "b"]) == []
