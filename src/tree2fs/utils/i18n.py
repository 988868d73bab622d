from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a centralized singleton manager for user-facing strings.
Implements dot-notation lookup for nested JSON locale files and supports
variable interpolation for CLI help, status and error messages.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "TREE2FS_LOCALE"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Handles loading of JSON resource files from the locale directory and
    provides safe access to keys with recursive resolution.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        """
        Initialize the manager and attempt to load the requested locale.

        Args:
            locale: Standard ISO locale identifier (e.g., 'en', 'es').
            locales_path: Directory holding '<locale>.json' files.
        """
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a specific translation dictionary from the filesystem.

        Falls back to the default locale when the requested one is missing.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            if locale != DEFAULT_LOCALE:
                logger.debug(f"I18n: Locale '{locale}' not found. Falling back to '{DEFAULT_LOCALE}'.")
                self.load_locale(DEFAULT_LOCALE)
                return
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Successfully loaded locale dictionary: {locale}")
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'cli.errors.input_missing').
            default: Text used when the key cannot be resolved.
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated and formatted string. Falls back to default,
                 then to the key itself.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                current_val = None
                break
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            current_val = default if default is not None else key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for path '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(os.environ.get(LOCALE_ENV_VAR, DEFAULT_LOCALE))
