from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one scan run:
1. Validates the configuration and the root directory.
2. Analyzes solution and project manifests (unless skipped).
3. Builds the filtered directory tree.
4. Renders the structure and source-code sections.
5. Optionally estimates the document's token count.
6. Writes the document atomically.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from codebase_scanner.core.analysis.manifest_analyzer import analyze_solution, find_manifests
from codebase_scanner.core.analysis.tree_generator import build_tree
from codebase_scanner.core.analysis.tree_renderer import render_contents, render_structure
from codebase_scanner.core.pipeline.components.filters import PathFilter
from codebase_scanner.core.pipeline.components.writer import write_document
from codebase_scanner.core.pipeline.validator import validate_config
from codebase_scanner.core.processing.tokenizer import count_tokens
from codebase_scanner.domain.config import ScanConfiguration
from codebase_scanner.domain.constants import SOLUTION_SUFFIX
from codebase_scanner.domain.errors import ScanError
from codebase_scanner.domain.pipeline_models import (
    ScanResult,
    create_error_result,
    create_success_result,
)
from codebase_scanner.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

TITLE = "# Codebase Structure\n\n"
SOLUTION_HEADING = "## Solution Structure\n\n"
STRUCTURE_HEADING = "\n## Directory Structure\n\n"
SOURCE_HEADING = "\n# Source Code\n\n"


@dataclass(frozen=True)
class ScanDocument:
    """Assembled document plus the artifacts it was rendered from."""
    markdown: str
    tree: Optional[TreeNode]
    solution_count: int


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_markdown(config: ScanConfiguration, base_dir: Optional[str] = None) -> str:
    """
    Scan the configured root and return the markdown document.

    Args:
        config: Resolved scan configuration.
        base_dir: Directory source headings are relative to (default: cwd).

    Raises:
        ScanError: If the root is missing, not a directory, or unreadable.
    """
    return build_document(config, base_dir=base_dir).markdown


def build_document(config: ScanConfiguration, base_dir: Optional[str] = None) -> ScanDocument:
    """Run the scan stages and assemble the document in section order."""
    root = config.root_path
    if not os.path.exists(root):
        raise ScanError(f"Input path does not exist: {root}")
    if not os.path.isdir(root):
        raise ScanError(f"Input path is not a directory: {root}")

    path_filter = PathFilter.from_config(config)
    markdown = TITLE

    # 1. Manifest analysis (independent of the tree)
    solutions: List[str] = []
    if config.skip_manifest_analysis:
        logger.debug("Solution analysis skipped by configuration.")
    else:
        solutions = find_manifests(root, SOLUTION_SUFFIX, path_filter)
        logger.debug(f"Found {len(solutions)} solution file(s).")
        if solutions:
            markdown += SOLUTION_HEADING
            for solution in solutions:
                markdown += analyze_solution(solution)

    # 2. Tree construction
    tree = build_tree(root, path_filter)

    # 3. Rendering
    markdown += STRUCTURE_HEADING
    markdown += render_structure(tree)
    markdown += SOURCE_HEADING
    markdown += render_contents(tree, base_dir=base_dir, max_workers=config.max_workers)

    return ScanDocument(markdown=markdown, tree=tree, solution_count=len(solutions))


def run_scan(
        config: Union[ScanConfiguration, Dict[str, Any]],
        *,
        write: bool = True,
        base_dir: Optional[str] = None,
) -> ScanResult:
    """
    Execute the full scan and report the outcome as a ScanResult.

    Expected failures (invalid root, unwritable destination) are returned
    as ``ok=False`` results instead of raised.

    Args:
        config: Resolved configuration or a raw dictionary to validate.
        write: Persist the document to ``config.output_path``.
        base_dir: Directory source headings are relative to (default: cwd).

    Returns:
        ScanResult: Outcome, statistics, and the generated document.
    """
    warnings: List[str] = []
    if isinstance(config, dict):
        config, warnings = validate_config(config)

    root = config.root_path
    logger.info(f"Scanning codebase: {root}")

    try:
        doc = build_document(config, base_dir=base_dir)
    except ScanError as e:
        logger.error(str(e))
        return create_error_result(str(e), root, warnings)

    tokens = 0
    if config.count_tokens:
        tokens = count_tokens(doc.markdown, config.token_model)
        logger.info(f"Estimated tokens ({config.token_model}): {tokens}")

    output_path = ""
    if write:
        try:
            output_path = write_document(config.output_path, doc.markdown)
        except OSError as e:
            msg = f"Failed to write documentation to '{config.output_path}': {e}"
            logger.error(msg)
            return create_error_result(msg, root, warnings)

    file_count = len(list(doc.tree.iter_files())) if doc.tree else 0
    dir_count = doc.tree.count_directories() if doc.tree else 0
    logger.info(f"Scan complete: {file_count} file(s), {dir_count} director(ies), {doc.solution_count} solution(s).")

    return create_success_result(
        root_path=root,
        markdown=doc.markdown,
        output_path=output_path,
        file_count=file_count,
        directory_count=dir_count,
        solution_count=doc.solution_count,
        token_count=tokens,
        warnings=warnings,
    )
