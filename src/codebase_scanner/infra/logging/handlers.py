from __future__ import annotations

"""
Logging Handler Factories.

Builds the stderr and rotating-file handlers and tags them, so the
configuration layer can tell its own handlers apart from ones installed
by the host application or by pytest.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from codebase_scanner.infra.fs import ensure_parent_dir

HANDLER_TAG_ATTR: str = "_codebase_scanner_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    return tag_handler(sh)


def create_rotating_file_handler(
        log_file: str,
        level: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a rotating log file.

    A log file that cannot be opened must not stop a scan, so the failure
    is reported on stderr and None is returned.
    """
    try:
        ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level)
    fh.setFormatter(formatter)
    tag_handler(fh)
    return fh
