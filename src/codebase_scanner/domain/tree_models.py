from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable node type produced by the tree builder and consumed
by both rendering passes.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterator, Optional, Tuple

from pyuca import Collator

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    """Filesystem entry category. The value doubles as the sort rank."""
    DIRECTORY = 0
    FILE = 1


@dataclass(frozen=True)
class TreeNode:
    """
    One filesystem entry retained after filtering.

    Attributes:
        path: Absolute filesystem path of the entry.
        name: Base name, used for ordering and display.
        kind: Directory or file.
        depth: Distance from the scan root (root = 0).
        children: Ordered child nodes. Always empty for files.
        error: Listing failure reason for an unreadable directory.
    """
    path: str
    name: str
    kind: NodeKind
    depth: int
    children: Tuple["TreeNode", ...] = ()
    error: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def iter_files(self) -> Iterator["TreeNode"]:
        """Yield every file node below this one in pre-order."""
        if self.is_file:
            yield self
            return
        for child in self.children:
            yield from child.iter_files()

    def count_directories(self) -> int:
        """Count directory nodes in this subtree, excluding this node."""
        return sum(1 + child.count_directories() for child in self.children if child.is_dir)


def collation_key(name: str) -> Tuple[Tuple[int, ...], str]:
    """
    Locale-aware ordering key for a single name.

    Unicode Collation Algorithm with the root collation, the ordering ICU
    applies when no locale is given: ``_init.py`` precedes ``1.py``,
    ``é.py`` sorts beside ``e.py``, and ``a.py`` precedes ``A.py``. The raw
    name breaks ties between names with identical collation elements.
    """
    return tuple(_collator().sort_key(name)), name


def sort_key(node: TreeNode) -> Tuple[int, Tuple[int, ...], str]:
    """Ordering key for siblings: directories first, then files, each by collated name."""
    return (node.kind.value,) + collation_key(node.name)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()
