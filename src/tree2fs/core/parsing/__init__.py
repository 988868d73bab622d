from __future__ import annotations

from .labels import classify
from .tree_parser import ParseOptions, parse, resolve_path

__all__ = [
    "ParseOptions",
    "classify",
    "parse",
    "resolve_path",
]
