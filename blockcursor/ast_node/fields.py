"""Editable-field scanning within one input's field row."""

from __future__ import annotations

from ..block_tree_model.types import Connection, Field, Input
from .types import FieldNode


def find_parent_input(location: object) -> Input | None:
    """Return the input owning a field or socket connection, else ``None``."""
    if isinstance(location, (Field, Connection)):
        return location.get_parent_input()
    return None


def _field_index(field: Field | None, field_row: list[Field]) -> int:
    for idx, candidate in enumerate(field_row):
        if candidate is field:
            return idx
    return -1


def next_editable_field(
    field: Field | None,
    parent_input: Input,
    from_start: bool = False,
) -> FieldNode | None:
    """Return the first editable field after ``field``, or from the row start.

    A ``field`` missing from the row scans from index 0, as does ``from_start``.
    """
    field_row = parent_input.field_row
    start_idx = 0 if from_start else _field_index(field, field_row) + 1
    for idx in range(start_idx, len(field_row)):
        candidate = field_row[idx]
        if candidate.is_currently_editable():
            return FieldNode(candidate)
    return None


def previous_editable_field(
    field: Field | None,
    parent_input: Input,
    from_end: bool = False,
) -> FieldNode | None:
    """Return the last editable field before ``field``, or from the row end."""
    field_row = parent_input.field_row
    start_idx = len(field_row) - 1 if from_end else _field_index(field, field_row) - 1
    for idx in range(start_idx, -1, -1):
        candidate = field_row[idx]
        if candidate.is_currently_editable():
            return FieldNode(candidate)
    return None
