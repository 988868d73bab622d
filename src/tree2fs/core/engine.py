from __future__ import annotations

"""
Core orchestration engine.

Runs one command end to end:
1. Parses the tree text against the configured base directory.
2. Hands the node sequence to the selected consumer.
3. Wraps the consumer outcome into a CommandResult.

Input resolution happens before (interface layer); exceptions raised by the
creator propagate to the caller, which owns exit-code translation.
"""

import logging
from typing import Callable, Dict, List

from tree2fs.core.consumers.creator import create_structure
from tree2fs.core.consumers.flattener import flatten_paths
from tree2fs.core.consumers.formatter import format_tree
from tree2fs.core.consumers.previewer import preview_nodes, summarize_kinds
from tree2fs.core.consumers.validator import validate_structure
from tree2fs.core.parsing.tree_parser import ParseOptions, parse
from tree2fs.domain.config import RunConfig
from tree2fs.domain.result_models import (
    CommandResult,
    create_error_result,
    create_success_result,
)
from tree2fs.domain.tree_models import Node

logger = logging.getLogger(__name__)

_Handler = Callable[[RunConfig, List[Node]], CommandResult]


def parse_options_from(config: RunConfig) -> ParseOptions:
    """Derive the parser tunables of a run."""
    return ParseOptions(
        policy=config.policy,
        indent_unit=config.indent_unit,
        strip_comments=config.strip_comments,
    )


def run_command(config: RunConfig, text: str) -> CommandResult:
    """
    Execute the configured command over a tree text.

    Args:
        config: Validated run configuration.
        text: Tree text to parse.

    Returns:
        CommandResult: Status, stdout payload and statistics.

    Raises:
        ScaffoldError: If creation fails and keep_going is disabled.
    """
    logger.debug(f"Running '{config.command}' against {config.base_dir}")

    nodes = parse(text, config.base_dir, parse_options_from(config))
    if not nodes:
        logger.warning("The tree text contains no entries.")

    handler = _HANDLERS[config.command]
    return handler(config, nodes)

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _run_create(config: RunConfig, nodes: List[Node]) -> CommandResult:
    report = create_structure(
        nodes,
        config.base_dir,
        force=config.force,
        keep_going=config.keep_going,
    )
    summary = {
        "created_dirs": report.created_dirs,
        "existing_dirs": report.existing_dirs,
        "created_files": report.created_files,
        "skipped_files": report.skipped_files,
        "duplicates": report.duplicates,
        "failures": report.failures,
    }
    if not report.ok:
        return create_error_result(
            f"{len(report.failures)} entries could not be created.",
            config.command, config.base_dir, len(nodes), summary_extra=summary,
        )
    return create_success_result(config.command, config.base_dir, len(nodes), summary_extra=summary)


def _run_validate(config: RunConfig, nodes: List[Node]) -> CommandResult:
    report = validate_structure(nodes, strict=config.strict)
    summary = {
        "checked": report.checked,
        "missing": report.missing,
        "mismatched": report.mismatched,
    }
    if not report.ok:
        problems = len(report.missing) + len(report.mismatched)
        return create_error_result(
            f"Missing {problems} items.",
            config.command, config.base_dir, len(nodes), summary_extra=summary,
        )
    return create_success_result(config.command, config.base_dir, len(nodes), summary_extra=summary)


def _run_preview(config: RunConfig, nodes: List[Node]) -> CommandResult:
    return create_success_result(
        config.command, config.base_dir, len(nodes),
        lines=preview_nodes(nodes),
        summary_extra=summarize_kinds(nodes),
    )


def _run_minify(config: RunConfig, nodes: List[Node]) -> CommandResult:
    return create_success_result(
        config.command, config.base_dir, len(nodes),
        lines=flatten_paths(nodes, config.base_dir, relative=config.relative),
    )


def _run_format(config: RunConfig, nodes: List[Node]) -> CommandResult:
    return create_success_result(
        config.command, config.base_dir, len(nodes),
        lines=format_tree(nodes, style=config.style),
    )


_HANDLERS: Dict[str, _Handler] = {
    "create": _run_create,
    "validate": _run_validate,
    "dry-run": _run_preview,
    "minify": _run_minify,
    "format": _run_format,
}
