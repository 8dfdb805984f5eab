from __future__ import annotations

"""
Extension Classifier.

Static lookups from a file extension to tracking membership and to the
markdown syntax-highlighting tag used in fenced code blocks.
"""

import os
from typing import AbstractSet

from codebase_scanner.domain.constants import LANGUAGE_TAGS

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_extension(file_name: str) -> str:
    """
    Extract the extension of a file name, including the leading dot.

    Dotfiles without a further suffix (e.g. ``.gitignore``) have no
    extension, matching ``os.path.splitext`` semantics.
    """
    return os.path.splitext(file_name)[1]


def is_tracked_extension(extension: str, included_extensions: AbstractSet[str]) -> bool:
    """Exact, case-sensitive membership test against the included set."""
    return extension in included_extensions


def get_language_tag(file_path: str) -> str:
    """
    Resolve the highlighting tag for a file.

    Args:
        file_path: File name or path.

    Returns:
        str: Tag such as ``python`` or ``csharp``; empty when unrecognized.
    """
    return LANGUAGE_TAGS.get(get_extension(file_path), "")
