"""Error taxonomy for tree traversal and command-line handling.

Per-path errors (``OpenError``, ``StatError``, ``PathTooLong``) are recovered
by the renderer frame that hits them. ``UsageError`` and
``DepthLimitExceeded`` abort the run.
"""

from __future__ import annotations

PROGRAM_NAME = "tree"


class TreeError(Exception):
    """Base class for all dirtree errors."""


class PathError(TreeError):
    """Failure tied to one filesystem path."""

    operation = "access"

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def diagnostic(self) -> str:
        """Return the one-line message written to the error stream."""
        return f"{PROGRAM_NAME}: cannot {self.operation} {self.path}"


class OpenError(PathError):
    """Path is missing, not accessible, or not openable."""

    operation = "open"


class StatError(PathError):
    """Metadata query failed after the path was opened."""

    operation = "stat"


class PathTooLong(PathError):
    """Child path would exceed the path capacity."""

    def diagnostic(self) -> str:
        return f"{PROGRAM_NAME}: path too long"


class UsageError(TreeError):
    """Malformed or missing command-line argument."""


class DepthLimitExceeded(TreeError):
    """Traversal went deeper than the ancestor-flag arena can track."""


__all__ = [
    "PROGRAM_NAME",
    "TreeError",
    "PathError",
    "OpenError",
    "StatError",
    "PathTooLong",
    "UsageError",
    "DepthLimitExceeded",
]
