from __future__ import annotations

"""
tree2fs: materialize ASCII-art directory trees on disk.
"""

__version__ = "0.1.0"
