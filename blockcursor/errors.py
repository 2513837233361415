"""Exceptions shared across cursor modules."""

from __future__ import annotations


class InconsistentTreeError(RuntimeError):
    """The block tree contradicts itself, e.g. a stack root missing from its workspace."""
