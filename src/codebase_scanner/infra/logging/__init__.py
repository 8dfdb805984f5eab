from __future__ import annotations

from .config import LoggingConfig
from .core import (
    HANDLER_TAG_ATTR,
    QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "HANDLER_TAG_ATTR",
    "QUEUE_LISTENER_ATTR",
]
