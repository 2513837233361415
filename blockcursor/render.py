"""Plain-text outline of a workspace with the cursor position marked.

Rows follow navigation order: a block's top connection, the block, each
input's editable and fixed fields, the input socket with its nested stack,
then the block's next connection and the rest of its stack.
"""

from __future__ import annotations

from .ast_node.types import BLOCK, FIELD, INPUT, NEXT, OUTPUT, PREVIOUS, STACK, WORKSPACE, ASTNode
from .block_tree_model.types import Block, Workspace
from .locations import format_location

CURSOR_MARK = ">"
INDENT = "  "
_CONNECTION_TYPES = (INPUT, OUTPUT, PREVIOUS, NEXT)


class _OutlineWriter:
    def __init__(self, current: ASTNode | None) -> None:
        self.current = current
        self.rows: list[str] = []

    def _is_current(self, location: object, location_types: tuple[str, ...]) -> bool:
        current = self.current
        if current is None or current.location is None:
            return False
        return current.location is location and current.location_type in location_types

    def row(self, depth: int, text: str, location: object = None, location_types: tuple[str, ...] = ()) -> None:
        marker = CURSOR_MARK if self._is_current(location, location_types) else " "
        self.rows.append(f"{marker} {INDENT * depth}{text}")

    def stack(self, block: Block, depth: int) -> None:
        current: Block | None = block
        while current is not None:
            self.block(current, depth)
            next_connection = current.next_connection
            current = next_connection.target_block() if next_connection is not None else None

    def block(self, block: Block, depth: int) -> None:
        if block.output_connection is not None:
            self.row(depth, "output", block.output_connection, _CONNECTION_TYPES)
        if block.previous_connection is not None:
            self.row(depth, "previous", block.previous_connection, _CONNECTION_TYPES)
        self.row(depth, f"block {block.id} ({block.block_type})", block, (BLOCK,))
        for block_input in block.inputs:
            for field in block_input.field_row:
                suffix = "" if field.is_currently_editable() else " (fixed)"
                self.row(depth + 1, f"field {field.name} = {field.value!r}{suffix}", field, (FIELD,))
            connection = block_input.connection
            if connection is None:
                continue
            self.row(depth + 1, f"input {block_input.name} [{block_input.kind}]", connection, _CONNECTION_TYPES)
            nested = connection.target_block()
            if nested is not None:
                self.stack(nested, depth + 2)
        if block.next_connection is not None:
            self.row(depth, "next", block.next_connection, _CONNECTION_TYPES)


def render_outline(workspace: Workspace, current: ASTNode | None = None) -> str:
    """Return the outline of ``workspace`` with ``current`` marked by ``>``."""
    writer = _OutlineWriter(current)
    header = "workspace"
    if current is not None and current.location_type == WORKSPACE and current.location is not None:
        header = format_location(current)
        writer.rows.append(f"{CURSOR_MARK} {header}")
    else:
        writer.rows.append(f"  {header}")
    for top_block in workspace.get_top_blocks():
        writer.row(1, f"stack {top_block.id}", top_block, (STACK,))
        writer.stack(top_block, 2)
    return "\n".join(writer.rows) + "\n"
