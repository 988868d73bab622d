from __future__ import annotations

"""
Tree Renderer.

Re-renders a node sequence as canonical tree text. Handles connector
selection (├── / └──) and continuation columns (│ / blank) from the
structural nesting of each node, restoring the trailing '/' of directories.
"""

from typing import List

from tree2fs.domain.config import STYLE_INDENT, STYLE_TREE
from tree2fs.domain.tree_models import Node

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "
INDENT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_tree(nodes: List[Node], style: str = STYLE_TREE) -> List[str]:
    """
    Render nodes as tree text lines.

    Root-level nodes carry no connector; each nested node gets the
    continuation columns of its ancestors followed by its own connector.

    Args:
        nodes: Parser output, in sequence order.
        style: 'tree' for box-drawing connectors, 'indent' for plain
            two-space indentation.

    Returns:
        List[str]: Rendered lines.

    Raises:
        ValueError: If the style is unknown.
    """
    if style == STYLE_INDENT:
        return [f"{INDENT * n.level}{display_name(n)}" for n in nodes]
    if style != STYLE_TREE:
        raise ValueError(f"Unknown format style: {style!r}")

    last_flags = _last_sibling_flags(nodes)
    lines: List[str] = []
    continuation: List[str] = []

    for node, is_last in zip(nodes, last_flags):
        if node.level == 0:
            lines.append(display_name(node))
            continuation = []
            continue

        # Ancestors at levels 1..level-1 contribute their continuation column
        del continuation[node.level - 1:]
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append("".join(continuation) + connector + display_name(node))
        continuation.append(BLANK if is_last else PIPE)

    return lines


def display_name(node: Node) -> str:
    """Return the node name with a trailing '/' for directories."""
    return f"{node.name}/" if node.is_dir else node.name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _last_sibling_flags(nodes: List[Node]) -> List[bool]:
    """
    Flag the nodes that have no later sibling.

    Walks the sequence backwards tracking which levels already have a later
    sibling; meeting a node resets every deeper level, since those belong
    to an earlier subtree.
    """
    flags = [False] * len(nodes)
    seen_at_level: List[bool] = []

    for i in range(len(nodes) - 1, -1, -1):
        level = nodes[i].level
        if len(seen_at_level) <= level:
            seen_at_level.extend([False] * (level + 1 - len(seen_at_level)))

        flags[i] = not seen_at_level[level]
        seen_at_level[level] = True
        del seen_at_level[level + 1:]

    return flags
