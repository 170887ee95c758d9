"""dirtree: print a directory subtree as a branch diagram.

``main`` runs the ``tree`` command line; the traversal itself lives in
``dirtree.tree`` and the filesystem primitives in ``dirtree.fs``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    """Run the command line, importing it only when called."""
    from .cli import main as _main

    _main(argv)

__all__ = ["__version__", "main"]
