from __future__ import annotations

"""
Directory Tree Generator.

Walks a root directory recursively, applying the path filter, and produces
an immutable, deterministically ordered tree of directory and file nodes.
"""

import logging
import os
from typing import List, Optional

from codebase_scanner.core.pipeline.components.filters import PathFilter
from codebase_scanner.domain.errors import ScanError
from codebase_scanner.domain.tree_models import NodeKind, TreeNode, sort_key

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Builds TreeNode hierarchies for a fixed filter.

    Symbolic links are neither followed nor listed. A listing failure on
    the root raises ScanError; below the root the unreadable directory is
    kept as an annotated, childless node and the walk continues.
    """

    def __init__(self, path_filter: PathFilter) -> None:
        self.path_filter = path_filter

    def build(self, path: str, depth: int = 0) -> Optional[TreeNode]:
        """
        Build the subtree rooted at ``path``.

        Args:
            path: Directory to scan.
            depth: Distance from the scan root.

        Returns:
            Optional[TreeNode]: The directory node, or None when the
            directory's own name is ignored.

        Raises:
            ScanError: If the root directory (depth 0) cannot be listed.
        """
        path = os.path.abspath(path)
        name = os.path.basename(path)

        if self.path_filter.should_skip_directory(name):
            logger.debug(f"Skipping ignored directory: {path}")
            return None

        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            if depth == 0:
                raise ScanError(f"Cannot list directory '{path}': {e}") from e
            reason = e.strerror or str(e)
            logger.warning(f"Unreadable directory skipped: {path} ({reason})")
            return TreeNode(path=path, name=name, kind=NodeKind.DIRECTORY, depth=depth, error=reason)

        children: List[TreeNode] = []
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                sub = self.build(entry.path, depth + 1)
                if sub is not None:
                    children.append(sub)
            elif entry.is_file(follow_symlinks=False):
                if not self.path_filter.should_include_name(entry.name):
                    continue
                children.append(
                    TreeNode(path=entry.path, name=entry.name, kind=NodeKind.FILE, depth=depth + 1)
                )

        children.sort(key=sort_key)
        return TreeNode(
            path=path,
            name=name,
            kind=NodeKind.DIRECTORY,
            depth=depth,
            children=tuple(children),
        )


def build_tree(root_path: str, path_filter: PathFilter) -> Optional[TreeNode]:
    """Convenience wrapper building the full tree for a root directory."""
    logger.info(f"Building directory tree for: {root_path}")
    return TreeBuilder(path_filter).build(root_path, 0)
