from __future__ import annotations

"""
Dry-Run Previewer.

Lists what the creator would produce, with a kind indicator per node,
without touching the filesystem.
"""

from typing import Dict, List

from tree2fs.domain.tree_models import Node

FILE_ICON = "📄"
DIR_ICON = "📁"


def preview_nodes(nodes: List[Node]) -> List[str]:
    """Render one indicator line per node."""
    return [f"  {FILE_ICON if n.is_file else DIR_ICON} {n.path}" for n in nodes]


def summarize_kinds(nodes: List[Node]) -> Dict[str, int]:
    """Count planned directories and files."""
    files = sum(1 for n in nodes if n.is_file)
    return {"directories": len(nodes) - files, "files": files}
