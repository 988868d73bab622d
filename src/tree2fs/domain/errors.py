from __future__ import annotations

"""
Domain Error Taxonomy.

Exceptions raised by the I/O collaborators (input resolution and scaffold
creation). The parser itself never raises; every error here is caught at
the CLI boundary and translated into a process exit code.
"""

from typing import Optional

from tree2fs.domain.tree_models import Node


class Tree2FSError(Exception):
    """Base class for every user-facing tree2fs failure."""

    exit_code: int = 1


class InputMissingError(Tree2FSError):
    """No tree text was supplied and none could be discovered."""

    exit_code = 2


class InputUnreadableError(Tree2FSError):
    """
    The named input file does not exist or cannot be read.

    Attributes:
        source: The path that was requested.
    """

    exit_code = 2

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        msg = f"Cannot read input file '{source}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ScaffoldError(Tree2FSError):
    """
    A filesystem mutation failed while materializing a node.

    Attributes:
        node: The node being created when the failure happened.
        cause: The underlying OS error, if any.
    """

    def __init__(self, node: Node, message: str, cause: Optional[BaseException] = None) -> None:
        self.node = node
        self.cause = cause
        super().__init__(f"{message} (line {node.line_no}: {node.path})")
