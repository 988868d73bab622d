from __future__ import annotations

"""
Scaffold Validator.

Checks that every node of a parsed tree exists on disk. A mismatch is an
expected outcome reported through ValidationReport, never an exception.
"""

import logging
import os
from typing import List, Set

from tree2fs.domain.result_models import ValidationReport
from tree2fs.domain.tree_models import Node

logger = logging.getLogger(__name__)


def validate_structure(nodes: List[Node], *, strict: bool = False) -> ValidationReport:
    """
    Compare the node sequence with the filesystem.

    Args:
        nodes: Parser output.
        strict: Also report entries that exist with the wrong kind.

    Returns:
        ValidationReport: Missing (and, in strict mode, mismatched) paths.
    """
    missing: List[str] = []
    mismatched: List[str] = []
    seen: Set[str] = set()

    for node in nodes:
        if node.path in seen:
            continue
        seen.add(node.path)

        if not os.path.exists(node.path):
            missing.append(node.path)
            continue

        if strict and os.path.isdir(node.path) != node.is_dir:
            mismatched.append(node.path)

    logger.debug(f"Validated {len(seen)} paths: {len(missing)} missing, {len(mismatched)} mismatched.")
    return ValidationReport(checked=len(seen), missing=missing, mismatched=mismatched)
