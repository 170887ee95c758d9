"""Child-path construction bounded by a fixed byte capacity."""

from __future__ import annotations

import os

from ..errors import PathTooLong

PATH_CAPACITY = 512
PATH_SEPARATOR = "/"


def path_fits(path: str, capacity: int = PATH_CAPACITY) -> bool:
    """Return whether ``path`` fits in ``capacity`` bytes once encoded."""
    return len(os.fsencode(path)) <= capacity


def join_child_path(parent: str, name: str, capacity: int = PATH_CAPACITY) -> str:
    """Return ``parent/name`` as a new string.

    The parent string is never modified, so sibling iterations always start
    from the same parent. Raises ``PathTooLong`` when the result exceeds
    ``capacity`` bytes.
    """
    if parent.endswith(PATH_SEPARATOR):
        child = parent + name
    else:
        child = parent + PATH_SEPARATOR + name
    if not path_fits(child, capacity):
        raise PathTooLong(child)
    return child


def display_name(path: str) -> str:
    """Return the last path component used as a tree label.

    Trailing separators are ignored; the filesystem root keeps its own name.
    """
    stripped = path.rstrip(PATH_SEPARATOR)
    if not stripped:
        return PATH_SEPARATOR if path else path
    return stripped.rsplit(PATH_SEPARATOR, 1)[-1]


__all__ = [
    "PATH_CAPACITY",
    "PATH_SEPARATOR",
    "path_fits",
    "join_child_path",
    "display_name",
]
