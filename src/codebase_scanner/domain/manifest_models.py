from __future__ import annotations

"""
Build Manifest Data Models.

Value objects extracted from project manifests referenced by a solution.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PackageReference:
    """A single external package dependency declared by a project."""
    name: str
    version: str


@dataclass(frozen=True)
class ManifestProject:
    """
    Summary of one project manifest discovered through a solution.

    Attributes:
        file_path: Location of the project manifest.
        target_framework: Build target from the first property group, if any.
        package_references: Dependencies from the first item group.
    """
    file_path: str
    target_framework: Optional[str] = None
    package_references: Tuple[PackageReference, ...] = ()
