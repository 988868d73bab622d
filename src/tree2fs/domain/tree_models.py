from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node types produced by the tree-text parser and consumed by
every command (create, validate, format, flatten, preview).
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Filesystem classification of a parsed entry."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Node:
    """
    One parsed entry of a tree text.

    Attributes:
        name: Label as written, without glyphs, whitespace or trailing '/'.
        path: Absolute, normalized filesystem path of the entry.
        depth: Normalized indentation level (comparable within one parse only).
        kind: File or Directory.
        level: Number of open ancestors when the entry was parsed.
        line_no: 1-based line number in the source text.
    """
    name: str
    path: str
    depth: int
    kind: NodeKind
    level: int = 0
    line_no: int = 0

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY
