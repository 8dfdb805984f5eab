from __future__ import annotations

"""
Unit tests for the Path Filter.

Verifies name-based directory exclusion, extension-based inclusion, and
normalization of user-supplied extension and directory lists.
"""

from codebase_scanner.core.pipeline.components.filters import (
    PathFilter,
    normalize_directory_names,
    normalize_extensions,
)
from codebase_scanner.domain.config import ScanConfiguration


def test_directory_skip_is_by_basename_only():
    pf = PathFilter(ignored_directory_names=frozenset({"node_modules"}), included_extensions=frozenset())

    assert pf.should_skip_directory("node_modules") is True
    assert pf.should_skip_directory("node_modules_backup") is False
    assert pf.should_skip_directory("src") is False


def test_file_inclusion_by_extension():
    pf = PathFilter(ignored_directory_names=frozenset(), included_extensions=frozenset({".py"}))

    assert pf.should_include_file(".py") is True
    assert pf.should_include_file(".js") is False
    assert pf.should_include_name("a.py") is True
    assert pf.should_include_name("a.py.bak") is False


def test_from_config_uses_defaults(tmp_path):
    pf = PathFilter.from_config(ScanConfiguration(root_path=str(tmp_path)))

    assert pf.should_skip_directory(".git") is True
    assert pf.should_skip_directory("obj") is True
    assert pf.should_include_file(".cs") is True


def test_filters_from_different_configs_are_independent(tmp_path):
    only_py = PathFilter.from_config(
        ScanConfiguration(root_path=str(tmp_path), included_extensions=frozenset({".py"}))
    )
    only_cs = PathFilter.from_config(
        ScanConfiguration(root_path=str(tmp_path), included_extensions=frozenset({".cs"}))
    )

    assert only_py.should_include_file(".py") and not only_py.should_include_file(".cs")
    assert only_cs.should_include_file(".cs") and not only_cs.should_include_file(".py")


def test_normalize_extensions_adds_dot_and_drops_blanks():
    assert normalize_extensions(["py", ".cs", " ts ", "", "  "]) == frozenset({".py", ".cs", ".ts"})


def test_normalize_directory_names_strips_separators():
    assert normalize_directory_names(["dist/", " build ", "", "obj\\"]) == frozenset({"dist", "build", "obj"})
