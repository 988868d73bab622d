from __future__ import annotations

"""
Handler factories for the tree2fs logging setup.

Every handler built here is tagged, so that re-configuring logging (each CLI
invocation, or each test) removes exactly the handlers tree2fs attached and
leaves pytest's or an embedding application's handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from tree2fs.infra.fs import safe_mkdir

_HANDLER_TAG_ATTR: str = "_tree2fs_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the --log-file target, creating its directory first.

    A log file that cannot be opened must not stop the scaffold itself, so
    the problem is reported on stderr and the run continues console-only.

    Returns:
        Optional[RotatingFileHandler]: The tagged handler, or None.
    """
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(log_file)))
    if ok:
        try:
            fh = RotatingFileHandler(
                log_file,
                maxBytes=int(max_bytes),
                backupCount=int(backup_count),
                encoding="utf-8",
            )
        except OSError as e:
            err = str(e)
        else:
            fh.setLevel(level_int)
            fh.setFormatter(formatter)
            _tag_handler(fh)
            return fh

    sys.stderr.write(f"WARNING: --log-file '{log_file}' ignored: {err}\n")
    return None
