from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema: one sub-command per consumer
(with the short aliases c, v, dr, min, fmt), shared input/output options,
and the translation of argparse namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict, List

from tree2fs import __version__
from tree2fs.domain.config import CLASSIFICATION_POLICIES, FORMAT_STYLES
from tree2fs.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree2fs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="t2f",
        description=i18n.t("app.description"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = _build_common_parser()
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Filesystem mutation ---
    create = sub.add_parser(
        "create", aliases=["c"], parents=[common],
        help=i18n.t("cli.commands.create"),
    )
    create.add_argument("-f", "--force", action="store_true", help=i18n.t("cli.args.force"))
    create.add_argument("--keep-going", action="store_true", help=i18n.t("cli.args.keep_going"))

    # --- Read-only consumers ---
    validate = sub.add_parser(
        "validate", aliases=["v"], parents=[common],
        help=i18n.t("cli.commands.validate"),
    )
    validate.add_argument("--strict", action="store_true", help=i18n.t("cli.args.strict"))

    sub.add_parser(
        "dry-run", aliases=["dr", "preview"], parents=[common],
        help=i18n.t("cli.commands.dry_run"),
    )

    minify = sub.add_parser(
        "minify", aliases=["min", "flatten"], parents=[common],
        help=i18n.t("cli.commands.minify"),
    )
    minify.add_argument("--relative", action="store_true", help=i18n.t("cli.args.relative"))

    fmt = sub.add_parser(
        "format", aliases=["fmt"], parents=[common],
        help=i18n.t("cli.commands.format"),
    )
    fmt.add_argument("--style", choices=FORMAT_STYLES, default=None, help=i18n.t("cli.args.style"))

    return p


def _build_common_parser() -> argparse.ArgumentParser:
    """Options shared by every sub-command."""
    c = argparse.ArgumentParser(add_help=False)

    # --- Input / Output ---
    c.add_argument("source", nargs="?", default=None, help=i18n.t("cli.args.source"))
    c.add_argument("-i", "--input", dest="input_file", default=None, help=i18n.t("cli.args.input"))
    c.add_argument("-o", "--output", dest="base_dir", default=None, help=i18n.t("cli.args.output"))

    # --- Parsing ---
    c.add_argument("--policy", choices=CLASSIFICATION_POLICIES, default=None, help=i18n.t("cli.args.policy"))
    c.add_argument("--indent-unit", dest="indent_unit", type=int, default=None, help=i18n.t("cli.args.indent_unit"))
    c.add_argument("--strip-comments", action="store_true", help=i18n.t("cli.args.strip_comments"))

    # --- Output and Diagnostics ---
    c.add_argument("-v", "--verbose", action="store_true", help=i18n.t("cli.args.verbose"))
    c.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    c.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    c.add_argument("--no-color", action="store_true", help=i18n.t("cli.args.no_color"))
    c.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    return c

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that a sub-command does not define are left out so defaults apply.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "command": args.command,
        "base_dir": args.base_dir,
        "policy": args.policy,
        "indent_unit": args.indent_unit,
    }

    for flag in _STORE_TRUE_FLAGS:
        if getattr(args, flag, False):
            overrides[flag] = True

    style = getattr(args, "style", None)
    if style:
        overrides["style"] = style
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.no_color:
        overrides["color"] = False

    return overrides


_STORE_TRUE_FLAGS: List[str] = [
    "force", "keep_going", "strict", "relative",
    "strip_comments", "verbose", "json_output",
]
