"""Depth-first tree rendering with filters, counts, sizes, and depth limits.

Each activation stats its path, prints its own row, lists its children once,
then recurses into them in enumeration order. The cached child listing serves
both the per-directory counts and the recursion pass, so counts and
last-sibling markers always describe the same set of entries.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from ..errors import OpenError, PathError, PathTooLong
from ..fs import PATH_CAPACITY, EntryStat, display_name, join_child_path, open_directory, path_fits, stat_child, stat_path
from ..options import TraversalConfig
from ..theme import PLAIN_THEME, TreeTheme
from .ancestry import AncestorLastFlags
from .containment import file_passes_filter, subtree_has_match
from .prefix import UNICODE_GLYPHS, BranchGlyphs, format_prefix


@dataclass(frozen=True)
class _Child:
    """One listed child: full path plus stat result or the error that blocked it."""

    name: str
    path: str | None
    stat: EntryStat | None
    error: PathError | None = None


def size_annotation(size: int) -> str:
    return f"(size: {size} bytes)"


def count_annotation(dir_count: int, file_count: int) -> str:
    return f"[{dir_count} directories, {file_count} files]"


def directory_label(name: str) -> str:
    return name if name.endswith("/") else f"{name}/"


class TreeRenderer:
    """Render one traversal to an output stream, diagnostics to an error stream."""

    def __init__(
        self,
        config: TraversalConfig,
        out: TextIO | None = None,
        err: TextIO | None = None,
        glyphs: BranchGlyphs = UNICODE_GLYPHS,
        theme: TreeTheme = PLAIN_THEME,
        path_capacity: int = PATH_CAPACITY,
    ) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.glyphs = glyphs
        self.theme = theme
        self.path_capacity = path_capacity
        self.directories_shown = 0
        self.files_shown = 0
        self.diagnostics = 0
        self._containment_memo: dict[str, bool] = {}

    def run(self, root: str, flags: AncestorLastFlags | None = None) -> None:
        """Render the whole tree rooted at ``root``."""
        if not path_fits(root, self.path_capacity):
            self._report(PathTooLong(root))
            return
        self.render(root, 0, flags if flags is not None else AncestorLastFlags())

    def render(self, path: str, depth: int, ancestor_last_flags: AncestorLastFlags) -> None:
        """Render ``path`` at ``depth`` and recurse into its children."""
        if self.config.beyond_depth_limit(depth):
            return
        try:
            entry_stat = stat_path(path)
        except PathError as exc:
            self._report(exc)
            return

        name = display_name(path)
        if entry_stat.is_dir:
            self._render_directory(path, name, depth, ancestor_last_flags)
        else:
            self._render_file(name, entry_stat, depth, ancestor_last_flags)

    def _render_directory(self, path: str, name: str, depth: int, flags: AncestorLastFlags) -> None:
        config = self.config
        should_announce = not config.show_count and (
            not config.filter_active or self._has_match(path)
        )
        if should_announce:
            self._emit(depth, flags, self.theme.paint(directory_label(name), self.theme.directory))
            if depth > 0:
                self.directories_shown += 1

        try:
            children = self._list_children(path)
        except OpenError as exc:
            self._report(exc)
            return

        dir_count = sum(1 for child in children if child.stat is not None and child.stat.is_dir)
        file_count = sum(1 for child in children if self._counts_as_file(child))

        if config.show_count:
            label = self.theme.paint(directory_label(name), self.theme.directory)
            counts = self.theme.paint(count_annotation(dir_count, file_count), self.theme.count)
            self._emit(depth, flags, f"{label} {counts}")
            if depth > 0:
                self.directories_shown += 1
            if config.show_size:
                self._emit_size_listing(children, depth, flags)

        if config.beyond_depth_limit(depth + 1):
            return

        rendered = [child for child in children if self._renders_line(child)]
        last_rendered = rendered[-1] if rendered else None
        for child in children:
            if child.error is not None:
                self._report(child.error)
                continue
            flags.mark(depth, child is last_rendered)
            self.render(child.path, depth + 1, flags)

    def _render_file(self, name: str, entry_stat: EntryStat, depth: int, flags: AncestorLastFlags) -> None:
        config = self.config
        if not file_passes_filter(name, config.extension_filter):
            return
        if config.show_count:
            return
        text = self.theme.paint(name, self.theme.file)
        if config.show_size:
            text = f"{text} {self.theme.paint(size_annotation(entry_stat.size), self.theme.size)}"
        self._emit(depth, flags, text)
        self.files_shown += 1

    def _emit_size_listing(self, children: list[_Child], depth: int, flags: AncestorLastFlags) -> None:
        # Count mode hides file rows, so sizes are listed under the count line.
        files = [child for child in children if self._counts_as_file(child)]
        if not files:
            return
        flags.mark(depth, True)
        for child in files:
            name = self.theme.paint(child.name, self.theme.file)
            size = self.theme.paint(size_annotation(child.stat.size), self.theme.size)
            self._emit(depth + 1, flags, f"{name} {size}")
            self.files_shown += 1

    def _list_children(self, path: str) -> list[_Child]:
        children: list[_Child] = []
        with open_directory(path) as entries:
            for entry in entries:
                try:
                    child_path = join_child_path(path, entry.name, self.path_capacity)
                except PathTooLong as exc:
                    children.append(_Child(name=entry.name, path=None, stat=None, error=exc))
                    continue
                try:
                    child_stat = stat_child(child_path)
                except PathError:
                    # The child's own frame reports the failure when it reopens the path.
                    child_stat = None
                children.append(_Child(name=entry.name, path=child_path, stat=child_stat))
        return children

    def _counts_as_file(self, child: _Child) -> bool:
        if child.stat is None or child.stat.is_dir:
            return False
        return file_passes_filter(child.name, self.config.extension_filter)

    def _renders_line(self, child: _Child) -> bool:
        """Return whether recursing into ``child`` prints a row at the next depth."""
        if child.stat is None:
            return False
        config = self.config
        if child.stat.is_dir:
            if config.show_count or not config.filter_active:
                return True
            return self._has_match(child.path)
        return not config.show_count and self._counts_as_file(child)

    def _has_match(self, path: str) -> bool:
        return subtree_has_match(
            path,
            self.config.extension_filter,
            memo=self._containment_memo,
            path_capacity=self.path_capacity,
        )

    def _emit(self, depth: int, flags: AncestorLastFlags, body: str) -> None:
        prefix = self.theme.paint(format_prefix(depth, flags, self.glyphs), self.theme.branch)
        self.out.write(f"{prefix}{body}\n")

    def _report(self, error: PathError) -> None:
        self.diagnostics += 1
        self.err.write(f"{error.diagnostic()}\n")

    def summary_line(self) -> str:
        return f"{self.directories_shown} directories, {self.files_shown} files"


def render(
    path: str,
    depth: int,
    ancestor_last_flags: AncestorLastFlags,
    config: TraversalConfig,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> TreeRenderer:
    """Render ``path`` at ``depth`` with a fresh renderer and return it."""
    renderer = TreeRenderer(config, out=out, err=err)
    renderer.render(path, depth, ancestor_last_flags)
    return renderer


def render_tree(
    root: str,
    config: TraversalConfig,
    out: TextIO | None = None,
    err: TextIO | None = None,
    glyphs: BranchGlyphs = UNICODE_GLYPHS,
    theme: TreeTheme = PLAIN_THEME,
) -> TreeRenderer:
    """Render the tree rooted at ``root`` and return the finished renderer."""
    renderer = TreeRenderer(config, out=out, err=err, glyphs=glyphs, theme=theme)
    renderer.run(root)
    return renderer


__all__ = [
    "TreeRenderer",
    "render",
    "render_tree",
    "size_annotation",
    "count_annotation",
    "directory_label",
]
