from __future__ import annotations

"""
Console Formatters.

Renders console records with a status symbol per severity (ℹ ✔ ⚠ ✖ and an
indented ↳ for debug steps), optionally colored with ANSI escapes.
"""

import logging
import os
from typing import Dict, TextIO, Tuple

from tree2fs.infra.logging.config import SUCCESS

_RESET = "\x1b[0m"

# level -> (symbol, ANSI color code)
_STYLES: Dict[int, Tuple[str, str]] = {
    logging.DEBUG: ("↳", "90"),
    logging.INFO: ("ℹ", "36"),
    SUCCESS: ("✔", "32"),
    logging.WARNING: ("⚠", "33"),
    logging.ERROR: ("✖", "31"),
    logging.CRITICAL: ("✖", "31"),
}


class SymbolFormatter(logging.Formatter):
    """
    Prefix each console record with its severity symbol.

    Debug records are rendered as indented steps, the rest as a symbol
    followed by the message. Levels without an exact style use the style
    of the closest lower level.
    """

    def __init__(self, fmt: str = "%(message)s", use_color: bool = False) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        symbol, color = _style_for(record.levelno)

        if record.levelno <= logging.DEBUG:
            text = f"{symbol} {message}"
            return f"  {self._paint(text, color)}"

        return f"{self._paint(symbol, color)} {message}"

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"\x1b[{color}m{text}{_RESET}"


def stream_supports_color(stream: TextIO) -> bool:
    """Return True if ANSI colors should be written to the stream."""
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _style_for(levelno: int) -> Tuple[str, str]:
    """Pick the style of the closest defined level at or below levelno."""
    candidates = [lvl for lvl in _STYLES if lvl <= levelno]
    return _STYLES[max(candidates)] if candidates else _STYLES[logging.DEBUG]
