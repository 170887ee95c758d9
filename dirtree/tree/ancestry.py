"""Fixed-capacity arena of per-depth last-sibling flags."""

from __future__ import annotations

from ..errors import DepthLimitExceeded

MAX_DEPTH = 128


class AncestorLastFlags:
    """Depth-indexed booleans shared by reference across one traversal.

    Slot ``d`` records whether the entry being rendered at depth ``d + 1``
    descends from the last sibling at depth ``d``. A frame at depth ``d``
    writes only slot ``d`` (before recursing) and reads slots ``0..d``.
    """

    def __init__(self, capacity: int = MAX_DEPTH) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be >= 1")
        self._slots = [False] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def mark(self, depth: int, is_last: bool) -> None:
        if depth < 0:
            raise IndexError(f"negative depth: {depth}")
        if depth >= len(self._slots):
            raise DepthLimitExceeded(f"directory nesting deeper than {len(self._slots)} levels")
        self._slots[depth] = bool(is_last)

    def __getitem__(self, depth: int) -> bool:
        return self._slots[depth]

    def __len__(self) -> int:
        return len(self._slots)

    def snapshot(self, depth: int) -> tuple[bool, ...]:
        """Return slots ``0..depth-1`` as an immutable tuple."""
        return tuple(self._slots[:depth])


__all__ = [
    "MAX_DEPTH",
    "AncestorLastFlags",
]
