from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree-text fixtures used across unit and integration tests.
3. A logging reset so no test inherits handlers from another.
"""

import logging
import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_tree_text() -> str:
    """
    Return the canonical two-space indented sample tree.

    Structure:
    app/
      src/
        index.js
      README.md
    """
    return "app/\n  src/\n    index.js\n  README.md\n"


@pytest.fixture
def drawn_tree_text() -> str:
    """Return a tree as printed by the 'tree' command, with connectors."""
    return (
        "project/\n"
        "├── src/\n"
        "│   ├── main.py\n"
        "│   └── utils/\n"
        "│       └── helpers.py\n"
        "├── tests/\n"
        "│   └── test_main.py\n"
        "└── README.md\n"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach tree2fs handlers before and after each test."""
    from tree2fs.infra.logging import shutdown_logging

    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
