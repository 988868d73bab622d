from __future__ import annotations

"""
Indentation Measurement.

Converts the leading run of whitespace and box-drawing glyphs of a tree line
into a normalized nesting depth. Uses the raw-width model: widths are
divided by an indentation unit auto-detected over the whole input, so trees
indented with 2 or 4 columns (or drawn with connectors) parse alike.
"""

import math
import re
from typing import Iterable, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

TREE_GLYPHS = "│├─└┬┴┼┌┐┘┤"
TAB_WIDTH = 4
DEFAULT_INDENT_UNIT = 2

_INDENT_RX = re.compile(r"^[\s" + re.escape(TREE_GLYPHS) + r"]*")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_indent(line: str) -> Tuple[str, str]:
    """
    Separate the indentation prefix of a line from its remainder.

    Args:
        line: One raw line of tree text.

    Returns:
        Tuple[str, str]: (prefix of whitespace/glyphs, rest of the line).
    """
    match = _INDENT_RX.match(line)
    prefix = match.group(0) if match else ""
    return prefix, line[len(prefix):]


def indent_width(prefix: str) -> int:
    """Count the columns of an indentation prefix, expanding tabs."""
    return sum(TAB_WIDTH if ch == "\t" else 1 for ch in prefix)


def common_margin(widths: Iterable[int]) -> int:
    """
    Return the left margin shared by every line.

    Trees pasted from a quoted or indented block carry the same leading
    width on every line; it must be removed before depths are computed.
    """
    return min(widths, default=0)


def detect_indent_unit(widths: Iterable[int], default: int = DEFAULT_INDENT_UNIT) -> int:
    """
    Derive the indentation unit of a text.

    The unit is the smallest non-zero width observed. When nothing is
    indented the default is returned, so callers never divide by zero.

    Args:
        widths: Indentation widths of every label-bearing line.
        default: Fallback unit.

    Returns:
        int: A strictly positive indentation unit.
    """
    positive = [w for w in widths if w > 0]
    if not positive:
        return default if default > 0 else DEFAULT_INDENT_UNIT
    return min(positive)


def to_depth(width: int, unit: int) -> int:
    """
    Normalize a raw width into a nesting level (round half up).

    Args:
        width: Raw indentation width in columns.
        unit: Indentation unit; non-positive values fall back to the default.

    Returns:
        int: The nesting depth.
    """
    if width <= 0:
        return 0
    if unit <= 0:
        unit = DEFAULT_INDENT_UNIT
    return int(math.floor(width / unit + 0.5))
