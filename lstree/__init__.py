"""Public package surface for lstree.

Exports ``main`` for programmatic CLI invocation.
Traversal lives in ``lstree.file_tree_model``; line formatting in ``lstree.tree_model``.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "lstree contributors"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__"]
