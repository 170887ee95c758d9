"""Directory enumeration and metadata queries over the host filesystem.

Every directory handle lives inside a ``with`` block so it is released on
every exit path, including early returns and exceptions raised by callers
while iterating. Reopening a directory starts a fresh enumeration pass.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from ..errors import OpenError, StatError
from .types import DirectoryEntry, EntryKind, EntryStat

SELF_AND_PARENT = frozenset({".", ".."})
_OPEN_FLAGS = os.O_RDONLY | getattr(os, "O_NONBLOCK", 0)


def is_skipped_entry(entry: DirectoryEntry) -> bool:
    """Return whether ``entry`` is an unused slot or a self/parent reference."""
    return entry.inode == 0 or entry.name in SELF_AND_PARENT


def _visible_entries(raw_entries: Iterable[os.DirEntry]) -> Iterator[DirectoryEntry]:
    for raw in raw_entries:
        entry = DirectoryEntry(name=raw.name, inode=int(raw.inode()))
        if is_skipped_entry(entry):
            continue
        yield entry


@contextmanager
def open_directory(path: str) -> Iterator[Iterator[DirectoryEntry]]:
    """Open ``path`` for one enumeration pass.

    Yields a lazy iterator of ``DirectoryEntry`` in native order. Raises
    ``OpenError`` when the path is missing, not a directory, or unreadable.
    """
    try:
        scanner = os.scandir(path)
    except OSError as exc:
        raise OpenError(path) from exc
    with scanner:
        yield _visible_entries(scanner)


def read_directory(path: str) -> list[DirectoryEntry]:
    """Run one full enumeration pass and return the entries in order."""
    with open_directory(path) as entries:
        return list(entries)


def _entry_stat(result: os.stat_result) -> EntryStat:
    kind = EntryKind.DIRECTORY if stat.S_ISDIR(result.st_mode) else EntryKind.FILE
    return EntryStat(kind=kind, size=int(result.st_size))


def stat_path(path: str) -> EntryStat:
    """Open ``path`` and query metadata through the open handle.

    Raises ``OpenError`` if the open fails and ``StatError`` if the handle
    cannot be queried. The handle is always closed.
    """
    try:
        fd = os.open(path, _OPEN_FLAGS)
    except OSError as exc:
        raise OpenError(path) from exc
    try:
        try:
            result = os.fstat(fd)
        except OSError as exc:
            raise StatError(path) from exc
    finally:
        os.close(fd)
    return _entry_stat(result)


def stat_child(path: str) -> EntryStat:
    """Query metadata for a directory child by path, without opening it."""
    try:
        result = os.stat(path)
    except OSError as exc:
        raise StatError(path) from exc
    return _entry_stat(result)


__all__ = [
    "SELF_AND_PARENT",
    "is_skipped_entry",
    "open_directory",
    "read_directory",
    "stat_path",
    "stat_child",
]
