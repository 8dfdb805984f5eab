from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object exchanged between the scan engine and the
interface layer, plus factories for the success and failure shapes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a complete scan run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Directory that was scanned.
        output_path: Where the document was written ("" if not persisted).
        markdown: The assembled document.
        file_count: Number of files embedded in the source section.
        directory_count: Number of directories listed below the root.
        solution_count: Number of solution manifests analyzed.
        token_count: Estimated token size of the document (0 if disabled).
        warnings: Non-fatal notes collected during the run.
    """
    ok: bool
    error: str
    root_path: str
    output_path: str = ""
    markdown: str = ""
    file_count: int = 0
    directory_count: int = 0
    solution_count: int = 0
    token_count: int = 0
    warnings: List[str] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        """Return the result without the document body."""
        return {
            "ok": self.ok,
            "error": self.error,
            "root_path": self.root_path,
            "output_path": self.output_path,
            "file_count": self.file_count,
            "directory_count": self.directory_count,
            "solution_count": self.solution_count,
            "token_count": self.token_count,
            "warnings": list(self.warnings),
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        warnings: Optional[List[str]] = None,
) -> ScanResult:
    """Create a failed scan result."""
    return ScanResult(ok=False, error=error, root_path=root_path, warnings=warnings or [])


def create_success_result(
        root_path: str,
        markdown: str,
        output_path: str = "",
        file_count: int = 0,
        directory_count: int = 0,
        solution_count: int = 0,
        token_count: int = 0,
        warnings: Optional[List[str]] = None,
) -> ScanResult:
    """Create a successful scan result."""
    return ScanResult(
        ok=True,
        error="",
        root_path=root_path,
        output_path=output_path,
        markdown=markdown,
        file_count=file_count,
        directory_count=directory_count,
        solution_count=solution_count,
        token_count=token_count,
        warnings=warnings or [],
    )
