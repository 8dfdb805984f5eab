from __future__ import annotations

"""
Configuration Domain Management.

Defines the immutable scan configuration consumed by the pipeline, the
dict-based defaults it is validated against, and loading of optional JSON
configuration files.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet

from codebase_scanner.domain.constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORED_DIRS,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_TOKEN_MODEL,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanConfiguration:
    """
    Resolved, immutable input to the whole scan pipeline.

    Attributes:
        root_path: Absolute directory to scan.
        ignored_directory_names: Directory basenames excluded with their subtree.
        included_extensions: Dot-prefixed extensions that qualify a file.
        skip_manifest_analysis: Disable the solution/project manifest pass.
        output_path: Destination of the generated markdown document.
        verbose: Emit diagnostic messages at DEBUG level.
        max_workers: Parallel readers for the content pass (1 = sequential).
        count_tokens: Estimate the token size of the generated document.
        token_model: Model identifier used to pick the token encoding.
    """
    root_path: str
    ignored_directory_names: FrozenSet[str] = field(default=DEFAULT_IGNORED_DIRS)
    included_extensions: FrozenSet[str] = field(default=DEFAULT_EXTENSIONS)
    skip_manifest_analysis: bool = False
    output_path: str = DEFAULT_OUTPUT_FILE
    verbose: bool = False
    max_workers: int = 1
    count_tokens: bool = False
    token_model: str = DEFAULT_TOKEN_MODEL

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly view with sets rendered as sorted lists."""
        data = asdict(self)
        data["ignored_directory_names"] = sorted(self.ignored_directory_names)
        data["included_extensions"] = sorted(self.included_extensions)
        return data


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration as a plain dictionary.

    Returns:
        Dict[str, Any]: Default configuration values keyed by field name.
    """
    return {
        # IO Paths
        "root_path": os.getcwd(),
        "output_path": DEFAULT_OUTPUT_FILE,

        # Filtering
        "ignored_directory_names": sorted(DEFAULT_IGNORED_DIRS),
        "included_extensions": sorted(DEFAULT_EXTENSIONS),

        # Analysis
        "skip_manifest_analysis": False,

        # Runtime
        "verbose": False,
        "max_workers": 1,

        # Metrics
        "count_tokens": False,
        "token_model": DEFAULT_TOKEN_MODEL,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        Dict[str, Any]: Raw key/value pairs, to be validated by the caller.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file '{path}' must contain a JSON object.")

    logger.debug(f"Loaded {len(data)} configuration keys from {path}")
    return data
