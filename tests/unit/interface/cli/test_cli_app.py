from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Calls main() in-process and checks exit codes and stdout payloads. Log
records go through the queue listener to stderr, so assertions stick to
stdout and return codes.
"""

import json
from pathlib import Path
from unittest.mock import patch

from tree2fs.domain.errors import InputMissingError
from tree2fs.interface.cli.app import _merge_config, main


def _write_tree(tmp_path: Path, text: str) -> Path:
    tree_file = tmp_path / "tree.txt"
    tree_file.write_text(text, encoding="utf-8")
    return tree_file


def test_create_and_validate_exit_codes(tmp_path: Path, simple_tree_text: str, capsys) -> None:
    tree_file = _write_tree(tmp_path, simple_tree_text)
    out_dir = tmp_path / "out"

    assert main(["create", "-i", str(tree_file), "-o", str(out_dir), "--no-color"]) == 0
    stdout = capsys.readouterr().out
    assert "Directories created: 2" in stdout
    assert "Files created: 2" in stdout

    assert main(["validate", str(tree_file), "-o", str(out_dir)]) == 0


def test_validate_missing_returns_one(tmp_path: Path, simple_tree_text: str, capsys) -> None:
    tree_file = _write_tree(tmp_path, simple_tree_text)

    code = main(["v", str(tree_file), "-o", str(tmp_path / "empty")])
    captured = capsys.readouterr()

    assert code == 1
    assert "Missing 4 items:" in captured.out
    assert "ERROR: Missing 4 items." in captured.err


def test_literal_tree_text_argument(tmp_path: Path, capsys) -> None:
    code = main(["min", "app/\n  main.py", "-o", str(tmp_path), "--relative"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["app/", "app/main.py"]


def test_format_prints_canonical_tree(tmp_path: Path, capsys) -> None:
    code = main(["fmt", "app/\n    src\n        x.py", "-o", str(tmp_path)])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["app/", "└── src/", "    └── x.py"]


def test_json_output(tmp_path: Path, simple_tree_text: str, capsys) -> None:
    code = main(["dr", simple_tree_text, "-o", str(tmp_path), "--json"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["ok"] is True
    assert data["command"] == "dry-run"
    assert data["node_count"] == 4
    assert data["summary"] == {"directories": 2, "files": 2}


def test_missing_input_file_returns_two(tmp_path: Path, capsys) -> None:
    code = main(["c", "-i", str(tmp_path / "nope.txt"), "-o", str(tmp_path)])
    assert code == 2
    assert "nope.txt" in capsys.readouterr().err


def test_no_input_returns_two(tmp_path: Path, capsys) -> None:
    with patch("tree2fs.interface.cli.app.resolve_input", side_effect=InputMissingError("none")):
        code = main(["c", "-o", str(tmp_path)])
    assert code == 2
    assert "No input provided" in capsys.readouterr().err


def test_scaffold_failure_returns_one(tmp_path: Path, capsys) -> None:
    (tmp_path / "blocked").write_text("", encoding="utf-8")
    code = main(["c", "blocked/", "-o", str(tmp_path)])
    assert code == 1
    assert "ERROR:" in capsys.readouterr().err


def test_unexpected_exception_returns_one(tmp_path: Path, capsys) -> None:
    with patch("tree2fs.interface.cli.app.run_command", side_effect=RuntimeError("boom")):
        code = main(["dr", "a.txt", "-o", str(tmp_path)])
    assert code == 1
    assert "boom" in capsys.readouterr().err


def test_keyboard_interrupt_returns_130(tmp_path: Path) -> None:
    with patch("tree2fs.interface.cli.app.run_command", side_effect=KeyboardInterrupt):
        assert main(["dr", "a.txt", "-o", str(tmp_path)]) == 130


def test_keyboard_interrupt_while_reading_input_returns_130(tmp_path: Path, capsys) -> None:
    with patch("tree2fs.interface.cli.app.resolve_input", side_effect=KeyboardInterrupt):
        code = main(["c", "-o", str(tmp_path)])
    assert code == 130
    assert "interrupted" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_dump_config(tmp_path: Path, capsys) -> None:
    code = main(["fmt", "-o", str(tmp_path), "--dump-config", "--indent-unit", "4"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["command"] == "format"
    assert data["indent_unit"] == 4
    assert data["base_dir"] == str(tmp_path)


def test_merge_config_ignores_unknown_and_none() -> None:
    merged = _merge_config({"force": False, "policy": "dot"}, {"force": True, "policy": None, "bogus": 1})
    assert merged == {"force": True, "policy": "dot"}
