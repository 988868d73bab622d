from __future__ import annotations

"""
Path Flattener.

Emits the resolved path of every node, one per line, in sequence order.
"""

import os
from typing import List, Optional

from tree2fs.domain.tree_models import Node


def flatten_paths(nodes: List[Node], base_dir: Optional[str] = None, relative: bool = False) -> List[str]:
    """
    Flatten nodes into path lines.

    Args:
        nodes: Parser output.
        base_dir: Base directory used for relative output.
        relative: Print paths relative to base_dir, marking directories
            with a trailing '/'.

    Returns:
        List[str]: One path per node.
    """
    if not relative:
        return [n.path for n in nodes]

    base = os.path.abspath(base_dir or os.getcwd())
    lines: List[str] = []
    for n in nodes:
        rel = os.path.relpath(n.path, base).replace(os.sep, "/")
        lines.append(rel + "/" if n.is_dir else rel)
    return lines
