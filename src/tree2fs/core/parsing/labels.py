from __future__ import annotations

"""
Label Extraction and Classification.

Cleans the textual part of a tree line and decides whether it names a file
or a directory. A trailing '/' is always authoritative; otherwise the
configured classification policy applies.
"""

import posixpath
import re

from tree2fs.core.parsing.indentation import TREE_GLYPHS
from tree2fs.domain.config import POLICY_DOT, POLICY_EXTENSION
from tree2fs.domain.tree_models import NodeKind

SEPARATOR = "/"

_GLYPH_RX = re.compile("[" + re.escape(TREE_GLYPHS) + "]")
_COMMENT_RX = re.compile(r"(?:^|\s)#.*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def clean_label(text: str) -> str:
    """Remove every tree-drawing glyph and the surrounding whitespace."""
    return _GLYPH_RX.sub("", text).strip()


def strip_inline_comment(text: str) -> str:
    """
    Drop a '# comment' suffix.

    The hash must start the text or follow whitespace, so names such as
    'C#/' or 'issue#12.md' are preserved.
    """
    return _COMMENT_RX.sub("", text)


def storage_name(label: str) -> str:
    """Return the label without its trailing separators."""
    return label.rstrip(SEPARATOR)


def classify(label: str, policy: str = POLICY_DOT) -> NodeKind:
    """
    Classify a cleaned label as a file or a directory.

    Policies:
        dot: File iff the final path segment contains a '.'.
        extension: File iff the final segment has an extension according
            to splitext, which leaves dotfiles such as '.gitignore' as
            directories.

    The segments '.' and '..' are always directories.

    Args:
        label: Cleaned label, possibly ending with '/'.
        policy: One of the classification policies.

    Returns:
        NodeKind: The resulting classification.

    Raises:
        ValueError: If the policy is unknown.
    """
    if label.endswith(SEPARATOR):
        return NodeKind.DIRECTORY

    segment = storage_name(label).rsplit(SEPARATOR, 1)[-1]
    if segment in ("", ".", ".."):
        return NodeKind.DIRECTORY

    if policy == POLICY_DOT:
        is_file = "." in segment
    elif policy == POLICY_EXTENSION:
        is_file = bool(posixpath.splitext(segment)[1])
    else:
        raise ValueError(f"Unknown classification policy: {policy!r}")

    return NodeKind.FILE if is_file else NodeKind.DIRECTORY
