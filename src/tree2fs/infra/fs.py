from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, input source resolution, and the low-level
mutations (idempotent directory creation, empty-file touch) used by the
creator. Acts as the only module that reads tree text from disk or stdin.
"""

import os
import sys
from typing import Optional, TextIO, Tuple

from tree2fs.domain.errors import InputMissingError, InputUnreadableError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def is_within(path: str, base_dir: str) -> bool:
    """Check whether path equals base_dir or lives below it."""
    base = os.path.abspath(base_dir)
    target = os.path.abspath(path)
    try:
        return os.path.commonpath([base, target]) == base
    except ValueError:
        # Different drives on Windows
        return False

# -----------------------------------------------------------------------------
# INPUT SOURCE API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Read a tree text file.

    Raises:
        InputUnreadableError: If the file is missing or cannot be decoded.
    """
    if not os.path.isfile(path):
        raise InputUnreadableError(path, "file does not exist")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableError(path, str(e)) from e


def resolve_input(
        input_file: Optional[str],
        source: Optional[str],
        stdin: Optional[TextIO] = None,
) -> Tuple[str, str]:
    """
    Locate the tree text of an invocation.

    Resolution order:
    1. An explicit input file, which must exist.
    2. A positional source: file contents when it names an existing file,
       otherwise the argument itself is the tree text.
    3. Piped stdin (never an interactive terminal).

    Args:
        input_file: Value of -i/--input.
        source: Positional SOURCE argument.
        stdin: Stream to fall back to (defaults to sys.stdin).

    Returns:
        Tuple[str, str]: (tree text, human description of its origin).

    Raises:
        InputMissingError: If no source is available.
        InputUnreadableError: If the named file cannot be read.
    """
    if input_file:
        return read_text_file(input_file), input_file

    if source:
        if os.path.isfile(source):
            return read_text_file(source), source
        return source, "<argument>"

    stream = stdin if stdin is not None else sys.stdin
    if stream is not None and not _is_interactive(stream):
        try:
            data = stream.read()
        except OSError as e:
            raise InputUnreadableError("<stdin>", str(e)) from e
        if data.strip():
            return data, "<stdin>"

    raise InputMissingError("No input provided. Use -i <file>, a tree string, or pipe text on stdin.")

# -----------------------------------------------------------------------------
# FILESYSTEM MUTATION API
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> bool:
    """
    Recursively create a directory.

    Args:
        path: Target directory path.

    Returns:
        bool: True if the directory did not exist before the call.

    Raises:
        OSError: If creation fails or a non-directory occupies the path.
    """
    if os.path.isdir(path):
        return False
    os.makedirs(path, exist_ok=True)
    return True


def write_empty_file(path: str) -> None:
    """
    Create (or truncate) a file with no content.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding="utf-8"):
        pass


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_interactive(stream: TextIO) -> bool:
    """Return True when the stream is attached to a terminal."""
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False
