from __future__ import annotations

"""
Document Persistence.

Writes the assembled markdown atomically: the content goes to a temporary
file beside the destination and replaces it only once fully written, so a
failed run never leaves a truncated document behind.
"""

import logging
import os
import tempfile

from codebase_scanner.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_document(output_path: str, markdown: str) -> str:
    """
    Persist the document as UTF-8 text.

    Args:
        output_path: Destination file.
        markdown: Full document content.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the destination cannot be written.
    """
    target = os.path.abspath(output_path)
    parent = ensure_parent_dir(target)

    fd, tmp_path = tempfile.mkstemp(prefix=".codebase-scanner-", suffix=".tmp", dir=parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(markdown)
        os.replace(tmp_path, target)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.info(f"Documentation written to: {target}")
    return target
