from __future__ import annotations

from .config import SUCCESS, LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    log_success,
    shutdown_logging,
)
from .formatters import SymbolFormatter
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "SUCCESS",
    "LoggingConfig",
    "SymbolFormatter",
    "configure_logging",
    "get_logger",
    "log_success",
    "shutdown_logging",
]
