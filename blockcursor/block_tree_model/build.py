"""Build a ``Workspace`` from a JSON document.

Top-level ``blocks`` entries become stacks in document order. A nested
``block`` under an input plugs into that input's socket; ``next_block``
hangs off the owning block's next connection.
"""

from __future__ import annotations

import json
from pathlib import Path

from .types import (
    DUMMY_INPUT,
    INPUT_KINDS,
    STATEMENT_INPUT,
    VALUE_INPUT,
    Block,
    Connection,
    Workspace,
    connect,
)


class WorkspaceFormatError(ValueError):
    """Raised when a workspace document cannot be turned into a block tree."""


def _require_mapping(value: object, where: str) -> dict:
    if not isinstance(value, dict):
        raise WorkspaceFormatError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _require_list(value: object, where: str) -> list:
    if not isinstance(value, list):
        raise WorkspaceFormatError(f"{where}: expected a list, got {type(value).__name__}")
    return value


def _optional_bool(data: dict, key: str, default: bool, where: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise WorkspaceFormatError(f"{where}.{key}: expected a boolean")
    return value


def _build_block(workspace: Workspace, data: object, where: str) -> Block:
    data = _require_mapping(data, where)
    block_type = data.get("type")
    if not isinstance(block_type, str) or not block_type:
        raise WorkspaceFormatError(f"{where}.type: expected a non-empty string")
    block_id = data.get("id")
    if block_id is not None and not isinstance(block_id, str):
        raise WorkspaceFormatError(f"{where}.id: expected a string")
    output = _optional_bool(data, "output", False, where)
    try:
        block = workspace.new_block(
            block_type,
            block_id=block_id,
            previous=_optional_bool(data, "previous", not output, where),
            next=_optional_bool(data, "next", not output, where),
            output=output,
        )
    except ValueError as exc:
        raise WorkspaceFormatError(f"{where}: {exc}") from exc
    where = f"block {block.id!r}"

    for idx, input_data in enumerate(_require_list(data.get("inputs", []), f"{where}.inputs")):
        _build_input(workspace, block, input_data, f"{where}.inputs[{idx}]")

    if "next_block" in data:
        if block.next_connection is None:
            raise WorkspaceFormatError(f"{where}.next_block: block has no next connection")
        child = _build_block(workspace, data["next_block"], f"{where}.next_block")
        _link(block.next_connection, child.previous_connection, f"{where}.next_block")
    return block


def _build_input(workspace: Workspace, block: Block, data: object, where: str) -> None:
    data = _require_mapping(data, where)
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise WorkspaceFormatError(f"{where}.name: expected a non-empty string")
    kind = data.get("kind", VALUE_INPUT)
    if kind not in INPUT_KINDS:
        raise WorkspaceFormatError(f"{where}.kind: expected one of {', '.join(INPUT_KINDS)}")
    try:
        new_input = block.append_input(name, kind)
    except ValueError as exc:
        raise WorkspaceFormatError(f"{where}: {exc}") from exc

    for idx, field_data in enumerate(_require_list(data.get("fields", []), f"{where}.fields")):
        field_where = f"{where}.fields[{idx}]"
        field_data = _require_mapping(field_data, field_where)
        field_name = field_data.get("name")
        if not isinstance(field_name, str) or not field_name:
            raise WorkspaceFormatError(f"{field_where}.name: expected a non-empty string")
        value = field_data.get("value", "")
        editable = _optional_bool(field_data, "editable", True, field_where)
        try:
            new_input.append_field(field_name, value=str(value), editable=editable)
        except ValueError as exc:
            raise WorkspaceFormatError(f"{field_where}: {exc}") from exc

    if "block" not in data:
        return
    if kind == DUMMY_INPUT:
        raise WorkspaceFormatError(f"{where}.block: dummy inputs cannot hold a block")
    child = _build_block(workspace, data["block"], f"{where}.block")
    plug = child.previous_connection if kind == STATEMENT_INPUT else child.output_connection
    _link(new_input.connection, plug, f"{where}.block")


def _link(socket: Connection | None, plug: Connection | None, where: str) -> None:
    if socket is None or plug is None:
        raise WorkspaceFormatError(f"{where}: nested block has no matching connection")
    try:
        connect(socket, plug)
    except ValueError as exc:
        raise WorkspaceFormatError(f"{where}: {exc}") from exc


def build_workspace(data: object) -> Workspace:
    """Return a new workspace populated from a decoded JSON document."""
    data = _require_mapping(data, "document")
    workspace = Workspace()
    for idx, block_data in enumerate(_require_list(data.get("blocks", []), "document.blocks")):
        _build_block(workspace, block_data, f"blocks[{idx}]")
    return workspace


def load_workspace(path: Path) -> Workspace:
    """Read and build a workspace from a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise WorkspaceFormatError(f"cannot read workspace {path}: {exc}") from exc
    return build_workspace(data)
