from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "tree2fs" / "main.py"

TREE_TEXT = """\
project/
├── src/
│   ├── main.py
│   └── utils/
│       └── helpers.py
├── tests/
│   └── test_main.py
└── README.md
"""


def run_cli(args: List[str], stdin_text: Optional[str] = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        stdin_text: Text piped to the process; stdin is closed when None.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["NO_COLOR"] = "1"
    env.pop("TREE2FS_LOCALE", None)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    kwargs = {"input": stdin_text} if stdin_text is not None else {"stdin": subprocess.DEVNULL}
    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        **kwargs,
    )


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    path = tmp_path / "tree.txt"
    path.write_text(TREE_TEXT, encoding="utf-8")
    return path


def test_cli_create_then_validate(tmp_path: Path, tree_file: Path) -> None:
    """TC-01: create materializes the tree and validate confirms it (Exit Code 0)."""
    out = tmp_path / "out"

    result = run_cli(["create", "-i", str(tree_file), "-o", str(out)])
    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "Directories created: 4" in result.stdout
    assert "Files created: 4" in result.stdout

    assert (out / "project" / "src" / "utils" / "helpers.py").is_file()
    assert (out / "project" / "README.md").is_file()

    result = run_cli(["v", "-i", str(tree_file), "-o", str(out)])
    assert result.returncode == 0
    assert "All items present (8 checked)." in result.stderr


def test_cli_create_twice_skips_existing(tmp_path: Path, tree_file: Path) -> None:
    """TC-02: a second create leaves existing files untouched and reports them."""
    out = tmp_path / "out"
    (out / "project").mkdir(parents=True)
    (out / "project" / "README.md").write_text("keep me", encoding="utf-8")

    result = run_cli(["c", str(tree_file), "-o", str(out)])

    assert result.returncode == 0
    assert "Files skipped (already exist, use --force to overwrite): 1" in result.stdout
    assert (out / "project" / "README.md").read_text(encoding="utf-8") == "keep me"

    run_cli(["c", str(tree_file), "-o", str(out), "--force"])
    assert (out / "project" / "README.md").read_text(encoding="utf-8") == ""


def test_cli_validate_reports_missing(tmp_path: Path, tree_file: Path) -> None:
    """TC-03: validate against an empty directory fails with the missing paths."""
    result = run_cli(["validate", "-i", str(tree_file), "-o", str(tmp_path / "empty")])

    assert result.returncode == 1
    assert "Missing 8 items:" in result.stdout
    assert str(tmp_path / "empty" / "project" / "src" / "main.py") in result.stdout


def test_cli_reads_piped_stdin(tmp_path: Path) -> None:
    """TC-04: tree text can be piped instead of passed as a file."""
    result = run_cli(["minify", "-o", str(tmp_path), "--relative"], stdin_text="docs/\n  guide.md\n")

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["docs/", "docs/guide.md"]


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """TC-05: no file, no argument and no stdin is an input error (Exit Code 2)."""
    result = run_cli(["create", "-o", str(tmp_path)])

    assert result.returncode == 2
    assert "No input provided" in result.stderr
    assert list(tmp_path.iterdir()) == []


def test_cli_handles_missing_input_file(tmp_path: Path) -> None:
    result = run_cli(["create", "-i", str(tmp_path / "nope.txt"), "-o", str(tmp_path)])

    assert result.returncode == 2
    assert "Cannot read input file" in result.stderr


def test_cli_dry_run_simulation(tmp_path: Path, tree_file: Path) -> None:
    """TC-06: dry-run reports the plan without writing to disk."""
    out = tmp_path / "out_dry"

    result = run_cli(["dr", "-i", str(tree_file), "-o", str(out)])

    assert result.returncode == 0
    assert "Dry Run Preview:" in result.stdout
    assert "4 directories, 4 files." in result.stdout
    assert not out.exists(), "Dry run should not create output directories."


def test_cli_format_round_trip(tmp_path: Path, tree_file: Path) -> None:
    """TC-07: format re-renders the drawn tree verbatim."""
    result = run_cli(["fmt", "-i", str(tree_file), "-o", str(tmp_path)])

    assert result.returncode == 0
    assert result.stdout == TREE_TEXT


def test_cli_json_output(tmp_path: Path, tree_file: Path) -> None:
    """TC-08: --json emits a machine readable result."""
    result = run_cli(["dry-run", "-i", str(tree_file), "-o", str(tmp_path), "--json"])

    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["node_count"] == 8


def test_cli_help() -> None:
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "create" in result.stdout
    assert "validate" in result.stdout
