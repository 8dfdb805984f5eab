from __future__ import annotations

"""
Path Filtering Engine.

Name-based directory exclusion and extension-based file inclusion. The
filter is built from an immutable configuration so independent scans never
share state.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from codebase_scanner.core.analysis.classifier import get_extension, is_tracked_extension
from codebase_scanner.domain.config import ScanConfiguration

# -----------------------------------------------------------------------------
# FILTER
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathFilter:
    """
    Pure predicates over the ignore set and the include set.

    Attributes:
        ignored_directory_names: Basenames whose subtree is never visited.
        included_extensions: Dot-prefixed extensions that qualify a file.
    """
    ignored_directory_names: FrozenSet[str]
    included_extensions: FrozenSet[str]

    @classmethod
    def from_config(cls, config: ScanConfiguration) -> "PathFilter":
        return cls(
            ignored_directory_names=frozenset(config.ignored_directory_names),
            included_extensions=frozenset(config.included_extensions),
        )

    def should_skip_directory(self, basename: str) -> bool:
        """True if the directory name is ignored, at any depth."""
        return basename in self.ignored_directory_names

    def should_include_file(self, extension: str) -> bool:
        """True if the extension is in the include set."""
        return is_tracked_extension(extension, self.included_extensions)

    def should_include_name(self, file_name: str) -> bool:
        return self.should_include_file(get_extension(file_name))


# -----------------------------------------------------------------------------
# NORMALIZATION HELPERS
# -----------------------------------------------------------------------------

def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """
    Ensure every extension carries a leading dot.

    Blank entries are discarded; ``py`` and ``.py`` both become ``.py``.
    """
    out = set()
    for ext in extensions:
        e = ext.strip()
        if not e:
            continue
        out.add(e if e.startswith(".") else f".{e}")
    return frozenset(out)


def normalize_directory_names(names: Iterable[str]) -> FrozenSet[str]:
    """Strip whitespace and trailing separators from ignore entries."""
    out = set()
    for name in names:
        n = name.strip().rstrip("/\\")
        if n:
            out.add(n)
    return frozenset(out)
