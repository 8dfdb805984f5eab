from __future__ import annotations

"""
Unit tests for the Extension Classifier.

Verifies extension extraction, exact-match membership, and highlighting
tag lookup with its empty-string fallback.
"""

import pytest

from codebase_scanner.core.analysis.classifier import (
    get_extension,
    get_language_tag,
    is_tracked_extension,
)
from codebase_scanner.domain.constants import DEFAULT_EXTENSIONS


@pytest.mark.parametrize("name, expected", [
    ("main.py", ".py"),
    ("App.csproj", ".csproj"),
    ("archive.tar.gz", ".gz"),
    ("Makefile", ""),
    (".gitignore", ""),
])
def test_get_extension(name, expected):
    assert get_extension(name) == expected


def test_membership_is_exact_and_case_sensitive():
    assert is_tracked_extension(".py", DEFAULT_EXTENSIONS) is True
    assert is_tracked_extension(".PY", DEFAULT_EXTENSIONS) is False
    assert is_tracked_extension("py", DEFAULT_EXTENSIONS) is False


def test_defaults_cover_dotnet_and_web_sources():
    for ext in [".cs", ".csproj", ".sln", ".razor", ".ts", ".css", ".py", ".h"]:
        assert ext in DEFAULT_EXTENSIONS


@pytest.mark.parametrize("path, tag", [
    ("src/a.py", "python"),
    ("Program.cs", "csharp"),
    ("App.csproj", "xml"),
    ("App.sln", "text"),
    ("Index.razor", "cshtml"),
    ("view.tsx", "typescript"),
    ("engine.h", "cpp"),
])
def test_language_tags(path, tag):
    assert get_language_tag(path) == tag


def test_unknown_extension_has_empty_tag():
    assert get_language_tag("notes.md") == ""
    assert get_language_tag("LICENSE") == ""
