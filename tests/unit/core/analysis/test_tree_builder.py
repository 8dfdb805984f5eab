from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies the sibling ordering invariant, ignore propagation at any depth,
extension filtering, empty-directory retention, and the listing-failure
policy (fatal at the root, annotated below it).
"""

import os
import sys
import unicodedata
from pathlib import Path

import pytest

from codebase_scanner.core.analysis.tree_generator import TreeBuilder, build_tree
from codebase_scanner.core.pipeline.components.filters import PathFilter
from codebase_scanner.domain.constants import DEFAULT_EXTENSIONS, DEFAULT_IGNORED_DIRS
from codebase_scanner.domain.errors import ScanError
from codebase_scanner.domain.tree_models import NodeKind, TreeNode


@pytest.fixture
def default_filter() -> PathFilter:
    return PathFilter(ignored_directory_names=DEFAULT_IGNORED_DIRS, included_extensions=DEFAULT_EXTENSIONS)


def _names(node: TreeNode):
    return [c.name for c in node.children]


def _all_names(node: TreeNode):
    out = [node.name]
    for child in node.children:
        out.extend(_all_names(child))
    return out


def test_children_are_directories_then_files_sorted_by_name(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "root", {
        "beta.py": "", "Alpha.py": "", "10.py": "", "2.py": "", "Gamma.py": "",
        "_init.py": "", "été.py": "",
        "Zeta": {}, "lib": {}, "3rd": {}, "Éclair": {},
    })

    tree = build_tree(str(root), default_filter)

    names = [unicodedata.normalize("NFC", n) for n in _names(tree)]
    assert names == [
        "3rd", "Éclair", "lib", "Zeta",
        "_init.py", "10.py", "2.py", "Alpha.py", "beta.py", "été.py", "Gamma.py",
    ]
    kinds = [c.kind for c in tree.children]
    assert kinds == [NodeKind.DIRECTORY] * 4 + [NodeKind.FILE] * 7


def test_depth_and_paths(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "root", {"src": {"pkg": {"mod.py": ""}}})

    tree = build_tree(str(root), default_filter)
    src = tree.children[0]
    pkg = src.children[0]
    mod = pkg.children[0]

    assert (tree.depth, src.depth, pkg.depth, mod.depth) == (0, 1, 2, 3)
    assert mod.path == os.path.join(str(root), "src", "pkg", "mod.py")
    assert mod.is_file and mod.children == ()


def test_ignored_directory_pruned_at_any_depth(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "root", {
        "node_modules": {"top.py": ""},
        "src": {"deep": {"bin": {"hidden.cs": ""}, "keep.cs": ""}},
    })

    tree = build_tree(str(root), default_filter)
    names = _all_names(tree)

    assert "node_modules" not in names
    assert "top.py" not in names
    assert "bin" not in names
    assert "hidden.cs" not in names
    assert "keep.cs" in names


def test_files_outside_extension_set_are_dropped(tmp_path, make_tree):
    root = make_tree(tmp_path / "root", {"a.py": "", "b.js": "", "README.md": "", "sub": {"c.py": ""}})
    pf = PathFilter(ignored_directory_names=frozenset(), included_extensions=frozenset({".py"}))

    tree = build_tree(str(root), pf)

    assert _names(tree) == ["sub", "a.py"]
    assert _names(tree.children[0]) == ["c.py"]


def test_empty_directory_is_retained(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "root", {"empty": {}, "docs": {"notes.txt": "x"}})

    tree = build_tree(str(root), default_filter)

    assert _names(tree) == ["docs", "empty"]
    assert all(c.is_dir and c.children == () for c in tree.children)


def test_root_with_ignored_name_is_omitted(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "build", {"a.py": ""})

    assert TreeBuilder(default_filter).build(str(root)) is None


def test_root_listing_failure_is_fatal(tmp_path, default_filter):
    with pytest.raises(ScanError):
        build_tree(str(tmp_path / "missing"), default_filter)


def test_unreadable_subdirectory_is_annotated(tmp_path, make_tree, default_filter, monkeypatch):
    root = make_tree(tmp_path / "root", {"locked": {"a.py": ""}, "open": {"b.py": ""}})
    locked = str(root / "locked")
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.path.abspath(path) == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    tree = build_tree(str(root), default_filter)
    locked_node, open_node = tree.children

    assert locked_node.name == "locked"
    assert locked_node.error == "Permission denied"
    assert locked_node.children == ()
    assert _names(open_node) == ["b.py"]


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_symlinks_are_not_followed(tmp_path, make_tree, default_filter):
    outside = make_tree(tmp_path / "outside", {"secret.py": ""})
    root = make_tree(tmp_path / "root", {"real.py": ""})
    os.symlink(outside, root / "linked_dir")
    os.symlink(outside / "secret.py", root / "linked.py")

    tree = build_tree(str(root), default_filter)

    assert _names(tree) == ["real.py"]


def test_iter_files_and_directory_count(tmp_path, make_tree, default_filter):
    root = make_tree(tmp_path / "root", {"a": {"b": {"x.py": ""}, "y.py": ""}, "z.py": ""})

    tree = build_tree(str(root), default_filter)

    assert [Path(f.path).name for f in tree.iter_files()] == ["x.py", "y.py", "z.py"]
    assert tree.count_directories() == 2
