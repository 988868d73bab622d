from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, construction of the
immutable run configuration (defaults merged with CLI overrides), logging
bootstrap, input resolution, command execution and result rendering. Every
error is caught here and translated into a non-zero exit code.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from tree2fs.core.configuration import validate_config
from tree2fs.core.engine import run_command
from tree2fs.domain.config import get_default_config
from tree2fs.domain.errors import InputMissingError, Tree2FSError
from tree2fs.domain.result_models import CommandResult
from tree2fs.infra.fs import resolve_input
from tree2fs.infra.logging import LoggingConfig, configure_logging, get_logger, log_success
from tree2fs.interface.cli import args as cli_args
from tree2fs.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 input/usage error,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration: defaults + CLI overrides, validated once
    overrides = cli_args.args_to_overrides(args)
    try:
        config, warnings = validate_config(_merge_config(get_default_config(), overrides))
    except (TypeError, ValueError) as e:
        print(f"ERROR: {i18n.t('cli.errors.bad_config', error=str(e))}", file=sys.stderr)
        return 2

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level="DEBUG" if config.verbose else "INFO",
        console=True,
        color=config.color,
        log_file=config.log_file,
    )
    configure_logging(logging_conf, force=True)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(asdict(config), ensure_ascii=False, indent=2))
        return 0

    # 4. Input resolution
    try:
        text, origin = resolve_input(args.input_file, args.source)
    except KeyboardInterrupt:
        return _report_interrupt()
    except InputMissingError:
        return _report_error(i18n.t("cli.errors.input_missing"), 2)
    except Tree2FSError as e:
        return _report_error(str(e), e.exit_code)

    logger.debug(f"Tree text read from {origin} ({len(text)} chars).")
    if config.command == "create" and not config.json_output:
        logger.info(i18n.t("cli.status.manifesting", path=config.base_dir))
    elif config.command == "validate" and not config.json_output:
        logger.info(i18n.t("cli.status.validating"))

    # 5. Command execution phase
    try:
        result = run_command(config, text)
    except KeyboardInterrupt:
        return _report_interrupt()
    except Tree2FSError as e:
        return _report_error(i18n.t("cli.errors.failed", error=str(e)), e.exit_code)
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if config.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None values never replace a default.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _report_error(msg: str, code: int) -> int:
    """Log and print a user-facing error, returning its exit code."""
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code


def _report_interrupt() -> int:
    """Report a user interruption and return the conventional exit code."""
    msg = i18n.t("cli.status.interrupted")
    logger.warning(msg)
    print(msg, file=sys.stderr)
    return 130


def _print_human_summary(result: CommandResult) -> None:
    """
    Format and print the command result to the standard output.

    Data-producing commands (minify, format) print only their lines so the
    output can be piped; the others print a structured report.

    Args:
        result: The command result to render.
    """
    summary = result.summary

    if result.command in ("minify", "format"):
        for line in result.lines:
            print(line)
        return

    if result.command == "dry-run":
        print(i18n.t("cli.status.dry_run_title"))
        for line in result.lines:
            print(line)
        print(i18n.t("cli.status.dry_run_summary", **summary))
        return

    if result.command == "validate":
        if result.ok:
            log_success(logger, i18n.t("cli.status.all_present", count=summary.get("checked", 0)))
            return
        print(f"ERROR: {result.error}", file=sys.stderr)
        _print_items("cli.status.missing", summary.get("missing", []))
        _print_items("cli.status.mismatched", summary.get("mismatched", []))
        return

    # create
    if result.ok:
        log_success(logger, i18n.t("cli.status.creation_complete"))
    else:
        print(f"ERROR: {result.error}", file=sys.stderr)
        for failure in summary.get("failures", []):
            print(f"  ↳ {failure}", file=sys.stderr)

    print(i18n.t("cli.status.dirs_created", count=len(summary.get("created_dirs", []))))
    print(i18n.t("cli.status.files_created", count=len(summary.get("created_files", []))))

    skipped = summary.get("skipped_files", [])
    if skipped:
        print(i18n.t("cli.status.files_skipped", count=len(skipped)))
        for path in skipped:
            print(f"  ↳ {path}")

    duplicates = summary.get("duplicates", [])
    if duplicates:
        print(i18n.t("cli.status.duplicates", count=len(duplicates)))


def _print_items(key: str, paths: List[str]) -> None:
    """Print an itemized path list under a counted heading."""
    if not paths:
        return
    print(i18n.t(key, count=len(paths)))
    for path in paths:
        print(f"  ↳ {path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
