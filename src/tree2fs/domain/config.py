from __future__ import annotations

"""
Configuration Domain Models.

Holds the default runtime settings and the immutable RunConfig value object
that is built once at startup and handed to every collaborator. There is no
persisted configuration file; the session state lives only for one run.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
COMMANDS: Tuple[str, ...] = ("create", "validate", "dry-run", "minify", "format")

COMMAND_ALIASES: Dict[str, str] = {
    "c": "create",
    "v": "validate",
    "dr": "dry-run",
    "preview": "dry-run",
    "min": "minify",
    "flatten": "minify",
    "fmt": "format",
}

POLICY_DOT = "dot"
POLICY_EXTENSION = "extension"
CLASSIFICATION_POLICIES: Tuple[str, ...] = (POLICY_DOT, POLICY_EXTENSION)

STYLE_TREE = "tree"
STYLE_INDENT = "indent"
FORMAT_STYLES: Tuple[str, ...] = (STYLE_TREE, STYLE_INDENT)


# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RunConfig:
    """
    Immutable settings of a single tree2fs invocation.

    Attributes:
        command: Canonical command name (see COMMANDS).
        base_dir: Absolute directory top-level nodes resolve against.
        force: Overwrite existing files when creating.
        verbose: Emit DEBUG-level progress on the console.
        policy: File/directory classification policy for ambiguous labels.
        indent_unit: Fixed indentation unit; None enables auto-detection.
        strip_comments: Remove inline '# comment' suffixes before parsing.
        keep_going: Continue creating after a node fails instead of aborting.
        strict: Validation also fails on file/directory kind mismatches.
        relative: Flatten paths relative to base_dir.
        style: Rendering style for the format command.
        json_output: Print the CommandResult as JSON.
        log_file: Optional path of a rotating diagnostic log.
        color: Allow ANSI colors on the console.
    """
    command: str
    base_dir: str
    force: bool = False
    verbose: bool = False
    policy: str = POLICY_DOT
    indent_unit: Optional[int] = None
    strip_comments: bool = False
    keep_going: bool = False
    strict: bool = False
    relative: bool = False
    style: str = STYLE_TREE
    json_output: bool = False
    log_file: Optional[str] = None
    color: bool = True


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "command": "create",
        "base_dir": os.getcwd(),

        # Creation
        "force": False,
        "keep_going": False,

        # Parsing
        "policy": POLICY_DOT,
        "indent_unit": None,
        "strip_comments": False,

        # Consumers
        "strict": False,
        "relative": False,
        "style": STYLE_TREE,

        # Output & Diagnostics
        "verbose": False,
        "json_output": False,
        "log_file": None,
        "color": not bool(os.environ.get("NO_COLOR")),
    }
