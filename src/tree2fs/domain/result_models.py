from __future__ import annotations

"""
Command Result Data Models.

Defines the reports produced by the consumers and the unified result object
handed from the engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CONSUMER REPORTS
# -----------------------------------------------------------------------------

@dataclass
class CreationReport:
    """
    Outcome of materializing a node sequence.

    Attributes:
        created_dirs: Directories that did not exist before the run.
        existing_dirs: Directory nodes that were already present.
        created_files: Files written (new, or truncated under force).
        skipped_files: Existing files left untouched (no force).
        duplicates: File nodes repeated within the same input.
        failures: Human-readable failure descriptions (keep-going mode).
    """
    created_dirs: List[str] = field(default_factory=list)
    existing_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    skipped_files: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of checking a node sequence against the filesystem.

    Attributes:
        checked: Number of nodes inspected.
        missing: Paths absent from disk, in sequence order.
        mismatched: Paths present with the wrong kind (strict mode only).
    """
    checked: int
    missing: List[str] = field(default_factory=list)
    mismatched: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.mismatched


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Unified result of one command execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        command: Canonical command name.
        base_dir: Directory the nodes were resolved against.
        node_count: Number of parsed nodes.
        lines: Text payload destined for stdout.
        summary: Command-specific statistics.
    """
    ok: bool
    error: str
    command: str
    base_dir: str
    node_count: int = 0
    lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        command: str,
        base_dir: str,
        node_count: int,
        lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CommandResult:
    """
    Create a successful command result.

    Args:
        command: Executed command.
        base_dir: Resolution base directory.
        node_count: Number of nodes processed.
        lines: Optional stdout payload.
        summary_extra: Command statistics.

    Returns:
        CommandResult: An immutable success result.
    """
    return CommandResult(
        ok=True,
        error="",
        command=command,
        base_dir=base_dir,
        node_count=node_count,
        lines=lines or [],
        summary=summary_extra or {},
    )


def create_error_result(
        error: str,
        command: str,
        base_dir: str,
        node_count: int = 0,
        lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CommandResult:
    """
    Create a failed command result.

    Used for expected, non-exceptional failures such as a validation
    mismatch or a keep-going creation that accumulated errors.
    """
    return CommandResult(
        ok=False,
        error=error,
        command=command,
        base_dir=base_dir,
        node_count=node_count,
        lines=lines or [],
        summary=summary_extra or {},
    )
