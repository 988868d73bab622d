from __future__ import annotations

"""
Tree-Text Parser.

Turns an indifferently formatted ASCII-art directory tree (mixed indent
widths, optional box-drawing connectors, blank lines, inconsistent trailing
slashes) into an ordered, depth-correct list of Nodes with resolved paths.

The parse is pure path algebra: it reads no shared state and never touches
the filesystem.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from tree2fs.core.parsing.indentation import (
    common_margin,
    detect_indent_unit,
    indent_width,
    split_indent,
    to_depth,
)
from tree2fs.core.parsing.labels import (
    SEPARATOR,
    classify,
    clean_label,
    storage_name,
    strip_inline_comment,
)
from tree2fs.domain.config import POLICY_DOT
from tree2fs.domain.tree_models import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOptions:
    """
    Tunables of a single parse.

    Attributes:
        policy: Classification policy for labels without a trailing '/'.
        indent_unit: Fixed indentation unit; None or 0 auto-detects it.
        strip_comments: Remove '# comment' suffixes before reading labels.
    """
    policy: str = POLICY_DOT
    indent_unit: Optional[int] = None
    strip_comments: bool = False


# (line_no, indent width, cleaned label)
_Entry = Tuple[int, int, str]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse(text: str, base_dir: str, options: Optional[ParseOptions] = None) -> List[Node]:
    """
    Parse tree text into nodes using the depth-stack method.

    Every line is popped against a stack of open ancestors: entries whose
    depth is greater than or equal to the current one are closed, so equal
    depths are siblings and a dedent of several levels closes all of them.

    Args:
        text: Multi-line tree text.
        base_dir: Directory that top-level entries resolve against.
        options: Parsing tunables.

    Returns:
        List[Node]: Nodes in input line order.

    Raises:
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Tree text must be str, received {type(text).__name__}.")

    opts = options or ParseOptions()
    base = os.path.abspath(base_dir)

    # First pass: collect label-bearing lines, drop the shared margin and
    # derive the indent unit
    entries = list(_scan_lines(text, opts.strip_comments))
    margin = common_margin(width for _, width, _ in entries)
    if opts.indent_unit and opts.indent_unit > 0:
        unit = opts.indent_unit
    else:
        unit = detect_indent_unit(width - margin for _, width, _ in entries)

    # Second pass: depth stack
    nodes: List[Node] = []
    stack: List[Node] = []

    for line_no, width, label in entries:
        depth = to_depth(width - margin, unit)

        while stack and stack[-1].depth >= depth:
            stack.pop()

        parent_path = stack[-1].path if stack else base
        name = storage_name(label)

        node = Node(
            name=name,
            path=resolve_path(parent_path, name),
            depth=depth,
            kind=classify(label, opts.policy),
            level=len(stack),
            line_no=line_no,
        )
        stack.append(node)
        nodes.append(node)

    logger.debug(f"Parsed {len(nodes)} nodes (indent unit: {unit}).")
    return nodes


def resolve_path(parent_path: str, name: str) -> str:
    """
    Join a label onto its parent path.

    Leading separators are dropped so a label can never re-root the path.
    """
    relative = name.lstrip(SEPARATOR)
    return os.path.normpath(os.path.join(parent_path, relative))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _scan_lines(text: str, strip_comments: bool) -> Iterator[_Entry]:
    """Yield (line_no, width, label) for each line that carries a label."""
    for line_no, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue

        prefix, rest = split_indent(raw)
        if strip_comments:
            rest = strip_inline_comment(rest)

        label = clean_label(rest)
        if not storage_name(label):
            continue

        yield line_no, indent_width(prefix), label
