"""Datatypes observed from directory enumeration and metadata queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    """One raw directory slot: child name plus inode number (0 = unused)."""

    name: str
    inode: int


@dataclass(frozen=True)
class EntryStat:
    """Type tag and byte size for a path."""

    kind: EntryKind
    size: int

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "EntryStat",
]
