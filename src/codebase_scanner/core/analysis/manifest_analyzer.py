from __future__ import annotations

"""
Build Manifest Analyzer.

Locates solution manifests, extracts the project manifests they reference,
and summarizes each project's target framework and package references.

Solution files are read with a tolerant line-pattern strategy rather than a
grammar: a line is a project declaration if it carries the declaration
marker and a quoted path ending in the project suffix. Every read or parse
failure is rendered as an inline note so one broken manifest never aborts
the scan or the analysis of its siblings.
"""

import logging
import os
import re
import xml.etree.ElementTree as ET
from typing import List, Optional

from codebase_scanner.core.analysis.classifier import get_extension
from codebase_scanner.core.pipeline.components.filters import PathFilter
from codebase_scanner.core.pipeline.components.reader import read_text_file
from codebase_scanner.domain.constants import PROJECT_DECLARATION_MARKER, PROJECT_SUFFIX
from codebase_scanner.domain.errors import ManifestError
from codebase_scanner.domain.manifest_models import ManifestProject, PackageReference
from codebase_scanner.domain.tree_models import collation_key

logger = logging.getLogger(__name__)

_PROJECT_PATH_RX = re.compile(r'"([^"]+' + re.escape(PROJECT_SUFFIX) + r')"')

# -----------------------------------------------------------------------------
# DISCOVERY
# -----------------------------------------------------------------------------

def find_manifests(root: str, suffix: str, path_filter: PathFilter) -> List[str]:
    """
    Recursively collect files whose extension equals ``suffix``.

    Traversal mirrors the tree builder: ignored directory names are pruned
    at any depth (the root included), symlinks are not followed, and
    siblings are visited directories first, then files, by collated name.

    Args:
        root: Directory to search.
        suffix: Literal extension, e.g. ``.sln``.
        path_filter: Supplies the directory ignore rule.

    Returns:
        List[str]: Matching file paths in traversal order.
    """
    found: List[str] = []
    if path_filter.should_skip_directory(os.path.basename(os.path.abspath(root))):
        logger.debug(f"Manifest search skipped ignored directory: {root}")
        return found

    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        logger.warning(f"Manifest search skipped unreadable directory: {root} ({e.strerror or e})")
        return found

    entries.sort(key=lambda e: (not e.is_dir(follow_symlinks=False),) + collation_key(e.name))

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            found.extend(find_manifests(entry.path, suffix, path_filter))
        elif entry.is_file(follow_symlinks=False) and get_extension(entry.name) == suffix:
            found.append(entry.path)

    return found

# -----------------------------------------------------------------------------
# SOLUTION MANIFESTS
# -----------------------------------------------------------------------------

def extract_project_paths(solution_text: str) -> List[str]:
    """
    Pull the quoted project-manifest paths out of solution text.

    Lines lacking the declaration marker or a quoted project path are
    ignored; only the first quoted project path on a line is used.
    """
    paths: List[str] = []
    for line in solution_text.splitlines():
        if PROJECT_DECLARATION_MARKER not in line:
            continue
        match = _PROJECT_PATH_RX.search(line)
        if match:
            paths.append(match.group(1))
    return paths


def resolve_project_path(solution_path: str, relative_path: str) -> str:
    """Resolve a solution-relative path, accepting either separator style."""
    normalized = relative_path.replace("\\", os.sep).replace("/", os.sep)
    return os.path.normpath(os.path.join(os.path.dirname(solution_path), normalized))


def analyze_solution(solution_path: str) -> str:
    """
    Render the markdown fragment for one solution manifest.

    Args:
        solution_path: Path to the solution file.

    Returns:
        str: Heading plus one fragment per existing referenced project, or
        an inline error note if the solution could not be read.
    """
    markdown = f"### Solution: {os.path.basename(solution_path)}\n\n"
    try:
        content = read_text_file(solution_path)
        for rel_path in extract_project_paths(content):
            project_path = resolve_project_path(solution_path, rel_path)
            if not os.path.isfile(project_path):
                logger.debug(f"Referenced project not found: {project_path}")
                continue
            markdown += analyze_project(project_path)
    except OSError as e:
        logger.warning(f"Failed to analyze solution '{solution_path}': {e}")
        markdown += f"Error analyzing solution file: {e}\n\n"
    return markdown

# -----------------------------------------------------------------------------
# PROJECT MANIFESTS
# -----------------------------------------------------------------------------

def parse_project_manifest(project_path: str) -> ManifestProject:
    """
    Parse a project manifest into its summary model.

    Only the first property group and the first item group are inspected.
    Element names are matched without their XML namespace, so both SDK
    style and legacy namespaced manifests are understood.

    Raises:
        ManifestError: If the file cannot be read or is not well-formed.
    """
    try:
        root = ET.fromstring(read_text_file(project_path))
    except ET.ParseError as e:
        raise ManifestError(str(e)) from e
    except OSError as e:
        raise ManifestError(e.strerror or str(e)) from e

    if _local_name(root.tag) != "Project":
        return ManifestProject(file_path=project_path)

    target_framework: Optional[str] = None
    property_group = _first_child(root, "PropertyGroup")
    if property_group is not None:
        tf = _first_child(property_group, "TargetFramework")
        if tf is not None and tf.text and tf.text.strip():
            target_framework = tf.text.strip()

    references: List[PackageReference] = []
    item_group = _first_child(root, "ItemGroup")
    if item_group is not None:
        for ref in _children(item_group, "PackageReference"):
            references.append(_package_reference(ref))

    return ManifestProject(
        file_path=project_path,
        target_framework=target_framework,
        package_references=tuple(references),
    )


def format_project(project: ManifestProject) -> str:
    """Render a parsed project as its markdown fragment."""
    markdown = f"#### Project: {os.path.basename(project.file_path)}\n\n"
    if project.target_framework:
        markdown += f"- Target Framework: {project.target_framework}\n"
    if project.package_references:
        markdown += "- Package References:\n"
        for pkg in project.package_references:
            markdown += f"  - {pkg.name} ({pkg.version})\n"
    return markdown + "\n"


def analyze_project(project_path: str) -> str:
    """
    Render the markdown fragment for one project manifest.

    A malformed manifest yields the heading followed by an inline error
    note instead of raising.
    """
    try:
        return format_project(parse_project_manifest(project_path))
    except ManifestError as e:
        logger.warning(f"Failed to analyze project '{project_path}': {e}")
        return (
            f"#### Project: {os.path.basename(project_path)}\n\n"
            f"Error analyzing project file: {e}\n\n"
        )

# -----------------------------------------------------------------------------
# XML HELPERS
# -----------------------------------------------------------------------------

def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _first_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    matches = _children(element, name)
    return matches[0] if matches else None


def _package_reference(element: ET.Element) -> PackageReference:
    name = element.get("Include") or element.get("Update") or "unknown"
    version = element.get("Version")
    if not version:
        nested = _first_child(element, "Version")
        if nested is not None and nested.text and nested.text.strip():
            version = nested.text.strip()
    return PackageReference(name=name, version=version or "unspecified")
