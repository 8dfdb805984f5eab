from __future__ import annotations

"""
Markdown Tree Renderer.

Converts a TreeNode hierarchy into the two document sections: an indented
structure listing and the verbatim source content of every file, each in a
fenced code block tagged for syntax highlighting.
"""

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from codebase_scanner.core.analysis.classifier import get_language_tag
from codebase_scanner.core.pipeline.components.reader import read_text_file
from codebase_scanner.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

INDENT = "  "
DIR_ICON = "📁"
FILE_ICON = "📄"

_BACKTICK_RUN_RX = re.compile(r"`{3,}")

# Content read outcome: (text, None) on success, (None, reason) on failure
ReadOutcome = Tuple[Optional[str], Optional[str]]

# -----------------------------------------------------------------------------
# STRUCTURE PASS
# -----------------------------------------------------------------------------

def render_structure(node: Optional[TreeNode]) -> str:
    """
    Render the directory listing in depth-first pre-order.

    The scan root itself is not labeled; every other directory is shown as
    ``📁 name/`` and every file as ``📄 name``, indented two spaces per
    depth level.
    """
    if node is None:
        return ""
    lines: List[str] = []
    _render_structure_lines(node, lines)
    return "".join(f"{line}\n" for line in lines)


def _render_structure_lines(node: TreeNode, lines: List[str]) -> None:
    indent = INDENT * node.depth

    if node.is_file:
        lines.append(f"{indent}{FILE_ICON} {node.name}")
        return

    if node.depth > 0:
        label = f"{indent}{DIR_ICON} {node.name}/"
        if node.error:
            label += f" (unreadable: {node.error})"
        lines.append(label)

    for child in node.children:
        _render_structure_lines(child, lines)

# -----------------------------------------------------------------------------
# CONTENT PASS
# -----------------------------------------------------------------------------

def render_contents(
        node: Optional[TreeNode],
        base_dir: Optional[str] = None,
        max_workers: int = 1,
) -> str:
    """
    Render every file's content as a heading plus a fenced code block.

    Files are emitted in the same pre-order as the structure pass. With
    ``max_workers > 1`` reads run in a thread pool; results are still
    assembled in traversal order so the output is identical.

    Args:
        node: Tree root (None renders nothing).
        base_dir: Directory headings are made relative to (default: cwd).
        max_workers: Number of concurrent readers.

    Returns:
        str: The concatenated source-code section body.
    """
    if node is None:
        return ""

    files = list(node.iter_files())
    base = base_dir or os.getcwd()

    if max_workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="ContentReader") as executor:
            outcomes = list(executor.map(_read_outcome, [f.path for f in files]))
    else:
        outcomes = [_read_outcome(f.path) for f in files]

    parts: List[str] = []
    for file_node, (content, error) in zip(files, outcomes):
        if error is not None:
            parts.append(f"## {file_node.path}\n\nError reading file: {error}\n\n")
            continue
        parts.append(render_file_block(file_node.path, content or "", base))
    return "".join(parts)


def render_file_block(file_path: str, content: str, base_dir: str) -> str:
    """Render one file section with its relative-path heading."""
    fence = choose_fence(content)
    tag = get_language_tag(file_path)
    heading = display_path(file_path, base_dir)
    return f"## {heading}\n\n{fence}{tag}\n{content}\n{fence}\n\n"


def choose_fence(content: str) -> str:
    """
    Pick a backtick fence that cannot be closed by the content.

    Returns the standard triple fence unless the content itself contains a
    run of three or more backticks, in which case the fence is one
    backtick longer than the longest such run.
    """
    runs = _BACKTICK_RUN_RX.findall(content)
    if not runs:
        return "```"
    return "`" * (max(len(r) for r in runs) + 1)


def display_path(file_path: str, base_dir: str) -> str:
    """Path relative to ``base_dir`` with forward slashes."""
    try:
        rel = os.path.relpath(file_path, base_dir)
    except ValueError:
        # Different drive on Windows
        rel = file_path
    return rel.replace(os.sep, "/")


def _read_outcome(file_path: str) -> ReadOutcome:
    try:
        return read_text_file(file_path), None
    except OSError as e:
        logger.debug(f"Error reading file {file_path}: {e}")
        return None, str(e)
