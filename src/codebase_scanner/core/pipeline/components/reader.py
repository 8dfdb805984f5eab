from __future__ import annotations

"""
Resilient File Reading Component.

Reads whole text files for embedding. Undecodable byte sequences are
replaced rather than raised, so binary artifacts or mixed encodings never
interrupt a scan; only genuine I/O failures surface as OSError.
"""

# -----------------------------------------------------------------------------
# READING OPERATIONS
# -----------------------------------------------------------------------------

def read_text_file(file_path: str) -> str:
    """
    Read a file as UTF-8 text, substituting undecodable bytes.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: Full file content with newlines preserved verbatim.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()
