"""Cursor moves: ``next``, ``prev``, ``in``, and ``out`` over location nodes.

Each move is a table keyed by location type. Every table covers all location
types; a handler returning ``None`` means the cursor cannot move that way.
Moves never mutate the tree and re-read its structure on every call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .fields import find_parent_input, next_editable_field
from .inputs import next_for_field, next_for_input, prev_for_field, prev_for_input
from .stacks import navigate_between_stacks, out_location_for_stack, top_ast_node
from .types import (
    BLOCK,
    FIELD,
    INPUT,
    NEXT,
    OUTPUT,
    PREVIOUS,
    STACK,
    WORKSPACE,
    ASTNode,
    BlockNode,
    InputNode,
    NextNode,
    OutputNode,
    PreviousNode,
    StackNode,
    WorkspaceNode,
    wrap,
)

# Workspace coordinate units per next/prev move.
WORKSPACE_STEP = 10

Transition = Callable[[Any, float], "ASTNode | None"]


def _boundary(_location: Any, _step: float) -> None:
    return None


def _next_workspace(coordinate, step):
    return WorkspaceNode(coordinate.shifted(step))


def _next_stack(block, _step):
    return wrap(StackNode, navigate_between_stacks(block, forward=True))


def _next_output(connection, _step):
    return wrap(BlockNode, connection.source_block)


def _next_previous(connection, _step):
    block = connection.source_block
    if block.output_connection is not None:
        return OutputNode(block.output_connection)
    return BlockNode(block)


def _next_next(connection, _step):
    target = connection.target_block()
    if target is None:
        return None
    return top_ast_node(target)


def _next_block(block, _step):
    return wrap(NextNode, block.next_connection)


def _next_field(field, _step):
    parent_input = find_parent_input(field)
    if parent_input is None:
        return None
    return next_for_field(field, parent_input)


def _next_input(connection, _step):
    return next_for_input(connection, find_parent_input(connection))


def _prev_workspace(coordinate, step):
    return WorkspaceNode(coordinate.shifted(-step))


def _prev_stack(block, _step):
    return wrap(StackNode, navigate_between_stacks(block, forward=False))


def _prev_output(connection, _step):
    return wrap(PreviousNode, connection.source_block.previous_connection)


def _prev_previous(connection, _step):
    target = connection.target_block()
    if target is None:
        return None
    return wrap(NextNode, target.next_connection)


def _prev_next(connection, _step):
    return BlockNode(connection.source_block)


def _prev_block(block, _step):
    if block.output_connection is not None:
        return OutputNode(block.output_connection)
    return wrap(PreviousNode, block.previous_connection)


def _prev_field(field, _step):
    parent_input = find_parent_input(field)
    if parent_input is None:
        return None
    return prev_for_field(field, parent_input)


def _prev_input(connection, _step):
    return prev_for_input(connection, find_parent_input(connection))


def _in_workspace(coordinate, _step):
    workspace = coordinate.workspace
    if workspace is None:
        return None
    top_blocks = workspace.get_top_blocks()
    if not top_blocks:
        return None
    return StackNode(top_blocks[0])


def _in_stack(block, _step):
    return top_ast_node(block)


def _in_block(block, _step):
    if not block.inputs:
        return None
    first_input = block.inputs[0]
    field_node = next_editable_field(None, first_input, from_start=True)
    if field_node is not None:
        return field_node
    return wrap(InputNode, first_input.connection)


def _in_input(connection, _step):
    target = connection.target_block()
    if target is None:
        return None
    return top_ast_node(target)


def _out_output(connection, _step):
    if connection.target_connection is not None:
        return InputNode(connection.target_connection)
    return StackNode(connection.source_block.get_root_block())


def _out_connection_stack(connection, _step):
    return out_location_for_stack(connection.source_block)


def _out_block(block, _step):
    output = block.output_connection
    if output is not None and output.target_connection is not None:
        return OutputNode(output.target_connection)
    if output is not None:
        return OutputNode(output)
    return out_location_for_stack(block)


def _out_field(field, _step):
    return wrap(BlockNode, field.source_block)


def _out_input(connection, _step):
    return BlockNode(connection.source_block)


NEXT_TRANSITIONS: dict[str, Transition] = {
    WORKSPACE: _next_workspace,
    STACK: _next_stack,
    OUTPUT: _next_output,
    PREVIOUS: _next_previous,
    NEXT: _next_next,
    BLOCK: _next_block,
    FIELD: _next_field,
    INPUT: _next_input,
}

PREV_TRANSITIONS: dict[str, Transition] = {
    WORKSPACE: _prev_workspace,
    STACK: _prev_stack,
    OUTPUT: _prev_output,
    PREVIOUS: _prev_previous,
    NEXT: _prev_next,
    BLOCK: _prev_block,
    FIELD: _prev_field,
    INPUT: _prev_input,
}

IN_TRANSITIONS: dict[str, Transition] = {
    WORKSPACE: _in_workspace,
    STACK: _in_stack,
    OUTPUT: _boundary,
    PREVIOUS: _boundary,
    NEXT: _boundary,
    BLOCK: _in_block,
    FIELD: _boundary,
    INPUT: _in_input,
}

OUT_TRANSITIONS: dict[str, Transition] = {
    WORKSPACE: _boundary,
    STACK: _boundary,
    OUTPUT: _out_output,
    PREVIOUS: _out_connection_stack,
    NEXT: _out_connection_stack,
    BLOCK: _out_block,
    FIELD: _out_field,
    INPUT: _out_input,
}


def _dispatch(
    transitions: dict[str, Transition],
    node: ASTNode | None,
    workspace_step: float,
) -> ASTNode | None:
    if node is None or node.location is None:
        return None
    handler = transitions[node.location_type]
    return handler(node.location, workspace_step)


def next_node(node: ASTNode | None, workspace_step: float = WORKSPACE_STEP) -> ASTNode | None:
    """Return the next sibling-level location, or ``None`` at the tree boundary."""
    return _dispatch(NEXT_TRANSITIONS, node, workspace_step)


def prev_node(node: ASTNode | None, workspace_step: float = WORKSPACE_STEP) -> ASTNode | None:
    """Return the previous sibling-level location, or ``None`` at the tree boundary."""
    return _dispatch(PREV_TRANSITIONS, node, workspace_step)


def in_node(node: ASTNode | None) -> ASTNode | None:
    """Return the first location one level deeper, or ``None``."""
    return _dispatch(IN_TRANSITIONS, node, WORKSPACE_STEP)


def out_node(node: ASTNode | None) -> ASTNode | None:
    """Return the enclosing location one level up, or ``None``."""
    return _dispatch(OUT_TRANSITIONS, node, WORKSPACE_STEP)


TRANSITIONS: dict[str, dict[str, Transition]] = {
    "next": NEXT_TRANSITIONS,
    "prev": PREV_TRANSITIONS,
    "in": IN_TRANSITIONS,
    "out": OUT_TRANSITIONS,
}
