from __future__ import annotations

"""
Unit tests for label cleaning and file/directory classification.
"""

import pytest

from tree2fs.core.parsing.labels import (
    classify,
    clean_label,
    storage_name,
    strip_inline_comment,
)
from tree2fs.domain.tree_models import NodeKind


def test_clean_label_removes_glyphs_and_whitespace() -> None:
    assert clean_label("── main.py  ") == "main.py"
    assert clean_label("│") == ""


def test_strip_inline_comment_keeps_hash_inside_names() -> None:
    assert strip_inline_comment("src/   # sources").strip() == "src/"
    assert strip_inline_comment("# heading") == ""
    assert strip_inline_comment("C#/") == "C#/"
    assert strip_inline_comment("issue#12.md") == "issue#12.md"


def test_storage_name_drops_trailing_separators() -> None:
    assert storage_name("src/") == "src"
    assert storage_name("src//") == "src"
    assert storage_name("/") == ""


@pytest.mark.parametrize(
    "label, expected",
    [
        ("index.js", NodeKind.FILE),
        ("src", NodeKind.DIRECTORY),
        ("src/", NodeKind.DIRECTORY),
        ("my.app/", NodeKind.DIRECTORY),
        (".gitignore", NodeKind.FILE),
        ("v1.2-release", NodeKind.FILE),
        ("docs/guide.md", NodeKind.FILE),
        ("..", NodeKind.DIRECTORY),
    ],
)
def test_classify_dot_policy(label: str, expected: NodeKind) -> None:
    assert classify(label, "dot") is expected


@pytest.mark.parametrize(
    "label, expected",
    [
        ("index.js", NodeKind.FILE),
        ("src", NodeKind.DIRECTORY),
        (".gitignore", NodeKind.DIRECTORY),
        ("my.app/", NodeKind.DIRECTORY),
    ],
)
def test_classify_extension_policy(label: str, expected: NodeKind) -> None:
    assert classify(label, "extension") is expected


def test_classify_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError):
        classify("file.txt", "guess")
