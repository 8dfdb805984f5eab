from __future__ import annotations

"""
Logging Core Orchestrator.

Idempotent setup of the root logger. Records are pushed through a single
QueueHandler and written by a QueueListener thread, so file I/O never
blocks the scan. Re-configuration removes only the handlers this module
installed.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from codebase_scanner.infra.logging.config import LoggingConfig, parse_level
from codebase_scanner.infra.logging.handlers import (
    HANDLER_TAG_ATTR,
    create_console_handler,
    create_rotating_file_handler,
    is_own_handler,
    tag_handler,
)

CONFIGURED_FLAG_ATTR: str = "_codebase_scanner_configured"
QUEUE_LISTENER_ATTR: str = "_codebase_scanner_queue_listener"

__all__ = [
    "configure_logging",
    "get_logger",
    "reset_logging",
    "HANDLER_TAG_ATTR",
    "QUEUE_LISTENER_ATTR",
]

# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        cfg: Logging settings.
        force: Tear down and rebuild an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = parse_level(cfg.level)
    root.setLevel(level)
    reset_logging()

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(create_console_handler(level, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)

    if not handlers:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = tag_handler(QueueHandler(log_queue))

    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_stop_listener, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def reset_logging() -> None:
    """
    Detach this module's handlers and stop its listener.

    Handlers installed by anyone else are left untouched.
    """
    root = logging.getLogger()

    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_own_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, CONFIGURED_FLAG_ATTR, False)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
        for h in listener.handlers:
            h.close()
