from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Implements a
Queue architecture so that handler I/O (terminal and rotating file) runs on
a listener thread instead of the thread mutating the filesystem.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from tree2fs.infra.logging.config import _LEVEL_MAP, SUCCESS, LoggingConfig
from tree2fs.infra.logging.formatters import SymbolFormatter, stream_supports_color
from tree2fs.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_tree2fs_configured"
_QUEUE_LISTENER_ATTR: str = "_tree2fs_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the root logger.

    Checks internal flags to avoid redundant handler attachments unless
    explicit re-configuration is requested.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    # 1. Idempotency Check
    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _stop_existing_listener(root)
    _remove_our_handlers(root)

    # 2. Handler Definition
    handlers_list: List[logging.Handler] = []

    if cfg.console:
        stream = sys.stderr
        sh = logging.StreamHandler(stream)
        sh.setLevel(level_int)
        sh.setFormatter(SymbolFormatter(
            cfg.console_fmt,
            use_color=cfg.color and stream_supports_color(stream),
        ))
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        file_formatter = logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt)
        fh = _create_rotating_file_handler(
            cfg.log_file,
            logging.DEBUG,
            file_formatter,
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            # The file keeps full detail regardless of console verbosity
            root.setLevel(logging.DEBUG)
            handlers_list.append(fh)

    if not handlers_list:
        return root

    # 3. Queue-Based Orchestration
    log_queue: "queue.Queue[logging.LogRecord]" = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Ensure queued records are flushed on shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """Flush pending records and detach every internally-managed handler."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def log_success(logger: logging.Logger, msg: str) -> None:
    """Log a completed operation at the SUCCESS level."""
    logger.log(SUCCESS, msg)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers from the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    QueueListener.stop() joins its thread and resets it to None; calling it
    twice (atexit after an explicit reset) must be a no-op.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
