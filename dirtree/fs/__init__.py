"""Filesystem primitives consumed by the tree renderer.

This package is the narrow host interface:
- directory enumeration that skips unused slots and self/parent entries
- open-then-fstat metadata queries plus by-path child stats
- bounded child-path construction
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, EntryStat
from .paths import PATH_CAPACITY, display_name, join_child_path, path_fits
from .scan import is_skipped_entry, open_directory, read_directory, stat_child, stat_path

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "EntryStat",
    "PATH_CAPACITY",
    "display_name",
    "join_child_path",
    "path_fits",
    "is_skipped_entry",
    "open_directory",
    "read_directory",
    "stat_child",
    "stat_path",
]
