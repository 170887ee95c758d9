"""Immutable traversal options built once from the command line."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UsageError


def validate_extension_filter(value: str) -> str:
    """Return ``value`` if it is a usable extension filter like ``.txt``."""
    if not value.startswith("."):
        raise UsageError(f"invalid value for -F: {value!r} must start with '.'")
    return value


def validate_max_depth(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise UsageError(f"invalid value for -L: {value!r} must be a non-negative integer")
    return value


@dataclass(frozen=True)
class TraversalConfig:
    """Filter, annotation, and depth options for one traversal.

    ``max_depth`` of ``None`` means unbounded.
    """

    extension_filter: str | None = None
    show_size: bool = False
    show_count: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.extension_filter is not None:
            validate_extension_filter(self.extension_filter)
        if self.max_depth is not None:
            validate_max_depth(self.max_depth)

    @property
    def filter_active(self) -> bool:
        return self.extension_filter is not None

    def beyond_depth_limit(self, depth: int) -> bool:
        return self.max_depth is not None and depth > self.max_depth


__all__ = [
    "TraversalConfig",
    "validate_extension_filter",
    "validate_max_depth",
]
