from __future__ import annotations

"""
Unit tests for Internationalization (i18n) consistency.

Ensures that all locale files (en.json, es.json) share the exact
same key structure and dot-notation resolution works as expected.
"""

import json
import os
from typing import Any, Dict, Set

import pytest

from tree2fs.utils.i18n import I18n

LOCALES_DIR = os.path.abspath(os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "..", "..", "..", "src", "tree2fs", "interface", "locales",
))


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def _load(name: str) -> Dict[str, Any]:
    with open(os.path.join(LOCALES_DIR, name), "r", encoding="utf-8") as f:
        return json.load(f)


def test_locales_key_parity() -> None:
    """TC-01: Verify that EN and ES locales have identical keys."""
    en_keys = _get_flat_keys(_load("en.json"))
    es_keys = _get_flat_keys(_load("es.json"))

    assert en_keys - es_keys == set(), "Keys missing in es.json"
    assert es_keys - en_keys == set(), "Keys missing in en.json"


def test_dot_notation_lookup() -> None:
    """TC-02: Nested keys resolve to their string values."""
    manager = I18n("en", locales_path=LOCALES_DIR)
    assert manager.is_loaded
    assert manager.t("cli.status.dry_run_title") == "Dry Run Preview:"


def test_interpolation() -> None:
    """TC-03: Placeholders are filled from keyword arguments."""
    manager = I18n("en", locales_path=LOCALES_DIR)
    assert manager.t("cli.status.missing", count=3) == "Missing 3 items:"


@pytest.mark.parametrize("key", ["cli.nope", "cli.status", "cli.status.missing.deeper"])
def test_unresolved_keys_fall_back(key: str) -> None:
    """TC-04: Missing or non-leaf keys return the default, then the key."""
    manager = I18n("en", locales_path=LOCALES_DIR)
    assert manager.t(key) == key
    assert manager.t(key, default="fallback") == "fallback"


def test_bad_interpolation_returns_template() -> None:
    manager = I18n("en", locales_path=LOCALES_DIR)
    assert manager.t("cli.status.missing", wrong=1) == "Missing {count} items:"


def test_unknown_locale_falls_back_to_english() -> None:
    manager = I18n("xx", locales_path=LOCALES_DIR)
    assert manager.locale == "en"
    assert manager.t("cli.status.validating") == "Validating integrity..."


def test_spanish_locale_loads() -> None:
    manager = I18n("es", locales_path=LOCALES_DIR)
    assert manager.locale == "es"
    assert manager.t("cli.status.dry_run_title") != "Dry Run Preview:"


def test_missing_locale_directory(tmp_path) -> None:
    manager = I18n("en", locales_path=str(tmp_path))
    assert not manager.is_loaded
    assert manager.t("cli.status.validating") == "cli.status.validating"
