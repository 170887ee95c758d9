"""Read-only subtree checks used to decide whether a directory is worth showing."""

from __future__ import annotations

from ..errors import OpenError, PathTooLong, StatError
from ..fs import PATH_CAPACITY, join_child_path, open_directory, stat_child


def suffix_matches(name: str, extension_filter: str) -> bool:
    """Return whether ``name`` from its last ``.`` equals ``extension_filter``.

    A name without a dot never matches; ``.md`` itself matches ``.md``.
    """
    dot = name.rfind(".")
    if dot < 0:
        return False
    return name[dot:] == extension_filter


def file_passes_filter(name: str, extension_filter: str | None) -> bool:
    return extension_filter is None or suffix_matches(name, extension_filter)


def subtree_has_match(
    path: str,
    extension_filter: str | None = None,
    memo: dict[str, bool] | None = None,
    path_capacity: int = PATH_CAPACITY,
) -> bool:
    """Return whether any file under ``path`` passes ``extension_filter``.

    Without a filter any file counts. The search is depth-first and stops at
    the first match. Nothing is printed: directories that cannot be opened,
    children that cannot be stat'ed, and over-long child paths contribute no
    match. ``memo`` caches answers for directories whose search completed.
    """
    if memo is not None and path in memo:
        return memo[path]

    found = False
    try:
        with open_directory(path) as entries:
            for entry in entries:
                try:
                    child = join_child_path(path, entry.name, path_capacity)
                    child_stat = stat_child(child)
                except (PathTooLong, StatError):
                    continue
                if child_stat.is_dir:
                    if subtree_has_match(child, extension_filter, memo, path_capacity):
                        found = True
                        break
                elif file_passes_filter(entry.name, extension_filter):
                    found = True
                    break
    except OpenError:
        found = False

    if memo is not None:
        memo[path] = found
    return found


__all__ = [
    "suffix_matches",
    "file_passes_filter",
    "subtree_has_match",
]
