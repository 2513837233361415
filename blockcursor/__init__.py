"""Public package surface for blockcursor.

Re-exports the location model and the four cursor moves, plus ``main`` for
programmatic CLI invocation. Implementation lives in submodules.
"""

from __future__ import annotations

from .ast_node import (
    LOCATION_TYPES,
    ASTNode,
    Coordinate,
    create_node,
    in_node,
    next_node,
    out_node,
    prev_node,
)
from .cursor import Cursor
from .errors import InconsistentTreeError


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "LOCATION_TYPES",
    "ASTNode",
    "Coordinate",
    "create_node",
    "next_node",
    "prev_node",
    "in_node",
    "out_node",
    "Cursor",
    "InconsistentTreeError",
    "main",
]
