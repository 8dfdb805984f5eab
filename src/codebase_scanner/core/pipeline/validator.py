from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI, JSON files,
callers) and the pipeline. Coerces loosely typed values, normalizes paths
and extensions, fills missing keys with defaults, and produces the
immutable ScanConfiguration.
"""

import logging
from typing import Any, Dict, List, Tuple

from codebase_scanner.core.pipeline.components.filters import (
    normalize_directory_names,
    normalize_extensions,
)
from codebase_scanner.domain.config import ScanConfiguration, get_default_config
from codebase_scanner.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["root_path", "output_path", "token_model"]
_BOOL_FIELDS = ["skip_manifest_analysis", "verbose", "count_tokens"]
_INT_FIELDS = ["max_workers"]
_LIST_FIELDS = ["ignored_directory_names", "included_extensions"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[ScanConfiguration, List[str]]:
    """
    Validate a raw configuration mapping and build a ScanConfiguration.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[ScanConfiguration, List[str]]: The resolved configuration and
        a list of human-readable coercion warnings.

    Raises:
        TypeError: In strict mode, on a wrongly typed value.
        ValueError: In strict mode, on an out-of-range value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    unknown = sorted(k for k in config if k not in defaults)
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for name in _STRING_FIELDS:
        merged[name] = _as_str(merged.get(name), defaults[name], name, warnings, strict)

    for name in _BOOL_FIELDS:
        merged[name] = _as_bool(merged.get(name), defaults[name], name, warnings, strict)

    for name in _INT_FIELDS:
        merged[name] = _as_positive_int(merged.get(name), defaults[name], name, warnings, strict)

    for name in _LIST_FIELDS:
        merged[name] = _as_list_str(merged.get(name), defaults[name], name, warnings, strict)

    # Domain-Specific Normalization
    extensions = normalize_extensions(merged["included_extensions"])
    if not extensions:
        extensions = normalize_extensions(defaults["included_extensions"])
        warnings.append("Field 'included_extensions' is empty. Using defaults.")

    cfg = ScanConfiguration(
        root_path=normalize_path(merged["root_path"], defaults["root_path"]),
        ignored_directory_names=normalize_directory_names(merged["ignored_directory_names"]),
        included_extensions=extensions,
        skip_manifest_analysis=merged["skip_manifest_analysis"],
        output_path=merged["output_path"],
        verbose=merged["verbose"],
        max_workers=merged["max_workers"],
        count_tokens=merged["count_tokens"],
        token_model=merged["token_model"],
    )
    return cfg, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback

    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, str) and not strict and value.strip().isdigit():
        number = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
    else:
        number = None

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < 1:
        msg = f"Invalid field '{field}': must be >= 1, received {number}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using 1.")
        return 1
    return number


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    if value is None:
        return list(fallback)

    # CSV strings are accepted for CLI and config-file convenience
    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (list, tuple, set, frozenset)):
        out: List[str] = []
        for i, item in enumerate(sorted(value, key=str) if isinstance(value, (set, frozenset)) else value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)
