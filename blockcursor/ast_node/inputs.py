"""Input-row walking: moves between fields and sockets across a block's inputs."""

from __future__ import annotations

from ..block_tree_model.types import Connection, Field, Input
from .fields import next_editable_field, previous_editable_field
from .types import ASTNode, InputNode, wrap


def _input_index(parent_input: Input | None, inputs: list[Input]) -> int:
    for idx, candidate in enumerate(inputs):
        if candidate is parent_input:
            return idx
    return -1


def next_for_input(connection: Connection, parent_input: Input | None) -> ASTNode | None:
    """Return the first field or socket in the inputs after ``parent_input``."""
    inputs = connection.source_block.inputs
    cur_idx = _input_index(parent_input, inputs)
    if cur_idx < 0:
        return None
    for new_input in inputs[cur_idx + 1 :]:
        field_node = next_editable_field(None, new_input, from_start=True)
        if field_node is not None:
            return field_node
        if new_input.connection is not None:
            return InputNode(new_input.connection)
    return None


def next_for_field(field: Field, parent_input: Input) -> ASTNode | None:
    """Return the next editable field in the row, else the input's own socket."""
    field_node = next_editable_field(field, parent_input)
    if field_node is not None:
        return field_node
    return wrap(InputNode, parent_input.connection)


def prev_for_input(connection: Connection, parent_input: Input | None) -> ASTNode | None:
    """Walk back from ``parent_input`` (inclusive) to the nearest other socket or field.

    Within each input a socket other than ``connection`` wins over that input's
    last editable field, so from a socket the walk first lands on the fields
    sharing its input.
    """
    inputs = connection.source_block.inputs
    cur_idx = _input_index(parent_input, inputs)
    for idx in range(cur_idx, -1, -1):
        new_input = inputs[idx]
        if new_input.connection is not None and new_input.connection is not connection:
            return InputNode(new_input.connection)
        field_node = previous_editable_field(None, new_input, from_end=True)
        if field_node is not None:
            return field_node
    return None


def prev_for_field(field: Field, parent_input: Input) -> ASTNode | None:
    """Return the previous editable field in the row, else the preceding input's socket."""
    field_node = previous_editable_field(field, parent_input)
    if field_node is not None:
        return field_node
    inputs = parent_input.source_block.inputs
    cur_idx = _input_index(parent_input, inputs)
    if cur_idx - 1 < 0:
        return None
    return wrap(InputNode, inputs[cur_idx - 1].connection)
