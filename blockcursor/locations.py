"""Textual location addresses such as ``block:b1`` or ``field:b1:NUM``.

``format_location`` and ``parse_location`` are inverse for every node the
cursor can produce on a given workspace. That relies on two rules the tree
model enforces: block ids never contain ``:`` and field names are unique
within a block.
"""

from __future__ import annotations

from .ast_node.types import (
    BLOCK,
    FIELD,
    INPUT,
    NEXT,
    OUTPUT,
    PREVIOUS,
    STACK,
    WORKSPACE,
    ASTNode,
    Coordinate,
    create_node,
)
from .block_tree_model.types import Block, Connection, Workspace

_CONNECTION_ATTRS = {
    PREVIOUS: "previous_connection",
    NEXT: "next_connection",
    OUTPUT: "output_connection",
}


class LocationSpecError(ValueError):
    """Raised when a location address is malformed or names a missing object."""


def _format_number(value: float) -> str:
    return f"{value:g}"


def _format_connection(location_type: str, connection: Connection) -> str:
    block_id = connection.source_block.id
    if connection.parent_input is not None:
        return f"{location_type}:{block_id}:{connection.parent_input.name}"
    return f"{location_type}:{block_id}"


def format_location(node: ASTNode) -> str:
    location_type = node.location_type
    location = node.location
    if location is None:
        return location_type
    if location_type == WORKSPACE:
        return f"{WORKSPACE}:{_format_number(location.x)},{_format_number(location.y)}"
    if location_type in {STACK, BLOCK}:
        return f"{location_type}:{location.id}"
    if location_type == FIELD:
        block = location.source_block
        block_id = block.id if block is not None else "?"
        return f"{FIELD}:{block_id}:{location.name}"
    return _format_connection(location_type, location)


def _lookup_block(workspace: Workspace, block_id: str) -> Block:
    block = workspace.get_block(block_id)
    if block is None:
        raise LocationSpecError(f"no block with id {block_id!r}")
    return block


def _input_connection(block: Block, name: str) -> Connection:
    found = block.get_input(name)
    if found is None:
        raise LocationSpecError(f"block {block.id!r} has no input {name!r}")
    if found.connection is None:
        raise LocationSpecError(f"input {name!r} on block {block.id!r} has no socket")
    return found.connection


def _parse_coordinate(workspace: Workspace, text: str) -> Coordinate:
    parts = text.split(",")
    if len(parts) != 2:
        raise LocationSpecError(f"expected X,Y workspace coordinate, got {text!r}")
    try:
        x, y = (float(part) for part in parts)
    except ValueError as exc:
        raise LocationSpecError(f"invalid workspace coordinate: {text!r}") from exc
    return Coordinate(x, y, workspace)


def parse_location(workspace: Workspace, text: str) -> ASTNode:
    """Resolve ``text`` against ``workspace`` into a location node."""
    location_type, _, rest = text.strip().partition(":")
    if location_type == WORKSPACE:
        if not rest:
            return create_node(WORKSPACE, Coordinate(0, 0, workspace))
        return create_node(WORKSPACE, _parse_coordinate(workspace, rest))

    parts = rest.split(":") if rest else []
    if location_type in {STACK, BLOCK}:
        if len(parts) != 1:
            raise LocationSpecError(f"expected {location_type}:ID, got {text!r}")
        return create_node(location_type, _lookup_block(workspace, parts[0]))

    if location_type in {INPUT, FIELD}:
        if len(parts) != 2:
            raise LocationSpecError(f"expected {location_type}:ID:NAME, got {text!r}")
        block = _lookup_block(workspace, parts[0])
        if location_type == INPUT:
            return create_node(INPUT, _input_connection(block, parts[1]))
        found = block.get_field(parts[1])
        if found is None:
            raise LocationSpecError(f"block {block.id!r} has no field {parts[1]!r}")
        return create_node(FIELD, found)

    if location_type in _CONNECTION_ATTRS:
        if len(parts) not in {1, 2}:
            raise LocationSpecError(f"expected {location_type}:ID[:INPUT], got {text!r}")
        block = _lookup_block(workspace, parts[0])
        if len(parts) == 2:
            return create_node(location_type, _input_connection(block, parts[1]))
        connection = getattr(block, _CONNECTION_ATTRS[location_type])
        if connection is None:
            raise LocationSpecError(f"block {block.id!r} has no {location_type} connection")
        return create_node(location_type, connection)

    raise LocationSpecError(f"unknown location type in {text!r}")
