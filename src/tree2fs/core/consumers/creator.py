from __future__ import annotations

"""
Scaffold Creator.

Materializes a parsed node sequence on disk, one node at a time and in
sequence order. Directories are created recursively and idempotently;
files are created empty, and existing files are only truncated under force.
"""

import logging
import os
from typing import List, Set

from tree2fs.domain.errors import ScaffoldError
from tree2fs.domain.result_models import CreationReport
from tree2fs.domain.tree_models import Node
from tree2fs.infra.fs import ensure_directory, is_within, write_empty_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_structure(
        nodes: List[Node],
        base_dir: str,
        *,
        force: bool = False,
        keep_going: bool = False,
) -> CreationReport:
    """
    Create every node of the sequence below base_dir.

    The immediate parent of a file node is always ensured before the file is
    written, so no step depends on a sibling having run first.

    Args:
        nodes: Parser output.
        base_dir: Directory the nodes were resolved against.
        force: Truncate files that already exist.
        keep_going: Record failures and continue instead of aborting.

    Returns:
        CreationReport: Created, skipped and failed entries.

    Raises:
        ScaffoldError: On the first failure when keep_going is False.
    """
    report = CreationReport()
    seen_files: Set[str] = set()

    for node in nodes:
        try:
            _create_node(node, base_dir, force, seen_files, report)
        except ScaffoldError as e:
            if not keep_going:
                raise
            logger.error(str(e))
            report.failures.append(str(e))

    logger.debug(
        f"Creation finished: {len(report.created_dirs)} dirs, "
        f"{len(report.created_files)} files, {len(report.skipped_files)} skipped."
    )
    return report

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _create_node(
        node: Node,
        base_dir: str,
        force: bool,
        seen_files: Set[str],
        report: CreationReport,
) -> None:
    """Apply a single node, translating OS errors into ScaffoldError."""
    if not is_within(node.path, base_dir):
        raise ScaffoldError(node, "Refusing to write outside the base directory")

    if node.is_dir:
        try:
            created = ensure_directory(node.path)
        except OSError as e:
            raise ScaffoldError(node, f"Cannot create directory: {e}", e) from e

        if created:
            report.created_dirs.append(node.path)
            logger.debug(f"Dir: {node.name}")
        else:
            report.existing_dirs.append(node.path)
        return

    if node.path in seen_files:
        report.duplicates.append(node.path)
        if not force:
            logger.debug(f"Duplicate entry ignored: {node.name}")
            return
        # Last write wins under force
        try:
            write_empty_file(node.path)
        except OSError as e:
            raise ScaffoldError(node, f"Cannot write file: {e}", e) from e
        logger.debug(f"Duplicate entry rewritten: {node.name}")
        return
    seen_files.add(node.path)

    try:
        ensure_directory(os.path.dirname(node.path))
    except OSError as e:
        raise ScaffoldError(node, f"Cannot create parent directory: {e}", e) from e

    if os.path.isdir(node.path):
        raise ScaffoldError(node, "A directory already exists where a file is expected")

    if os.path.exists(node.path) and not force:
        report.skipped_files.append(node.path)
        logger.debug(f"Skipped: {node.name}")
        return

    try:
        write_empty_file(node.path)
    except OSError as e:
        raise ScaffoldError(node, f"Cannot write file: {e}", e) from e

    report.created_files.append(node.path)
    logger.info(f"Created: {node.name}")
