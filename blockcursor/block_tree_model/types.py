"""In-memory block tree: workspace, blocks, inputs, fields, and connections.

These objects are the read surface consumed by the cursor in
``blockcursor.ast_node``. Linking helpers exist only so trees can be built;
the cursor never calls them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Connection kinds.
PREVIOUS = "previous"
NEXT = "next"
OUTPUT = "output"
INPUT = "input"

CONNECTION_KINDS = (PREVIOUS, NEXT, OUTPUT, INPUT)

# Input kinds.
VALUE_INPUT = "value"
STATEMENT_INPUT = "statement"
DUMMY_INPUT = "dummy"

INPUT_KINDS = (VALUE_INPUT, STATEMENT_INPUT, DUMMY_INPUT)


@dataclass(eq=False)
class Connection:
    """Typed socket on a block, optionally linked to another block's socket."""

    kind: str
    source_block: Block
    parent_input: Input | None = None
    target_connection: Connection | None = None

    def __post_init__(self) -> None:
        if self.kind not in CONNECTION_KINDS:
            raise ValueError(f"unknown connection kind: {self.kind!r}")

    def get_parent_input(self) -> Input | None:
        return self.parent_input

    def target_block(self) -> Block | None:
        if self.target_connection is None:
            return None
        return self.target_connection.source_block

    def is_connected(self) -> bool:
        return self.target_connection is not None

    def __repr__(self) -> str:
        owner = self.parent_input.name if self.parent_input is not None else self.kind
        return f"Connection({self.source_block.id}:{owner})"


@dataclass(eq=False)
class Field:
    """Atomic property in an input's field row."""

    name: str
    value: str = ""
    editable: bool = True
    parent_input: Input | None = None

    @property
    def source_block(self) -> Block | None:
        if self.parent_input is None:
            return None
        return self.parent_input.source_block

    def get_parent_input(self) -> Input | None:
        return self.parent_input

    def is_currently_editable(self) -> bool:
        return self.editable

    def __repr__(self) -> str:
        return f"Field({self.name}={self.value!r})"


@dataclass(eq=False)
class Input:
    """Named slot on a block: an ordered field row plus at most one socket."""

    name: str
    kind: str
    source_block: Block
    field_row: list[Field] = field(default_factory=list)
    connection: Connection | None = None

    def __post_init__(self) -> None:
        if self.kind not in INPUT_KINDS:
            raise ValueError(f"unknown input kind: {self.kind!r}")
        if self.kind != DUMMY_INPUT and self.connection is None:
            self.connection = Connection(INPUT, self.source_block, parent_input=self)

    def append_field(self, name: str, value: str = "", editable: bool = True) -> Field:
        if self.source_block.get_field(name) is not None:
            raise ValueError(f"block {self.source_block.id!r} already has a field named {name!r}")
        new_field = Field(name, value=value, editable=editable, parent_input=self)
        self.field_row.append(new_field)
        return new_field

    def __repr__(self) -> str:
        return f"Input({self.source_block.id}:{self.name})"


@dataclass(eq=False)
class Block:
    """One block: optional previous/next/output sockets and ordered inputs."""

    block_type: str
    workspace: Workspace | None
    id: str
    previous_connection: Connection | None = None
    next_connection: Connection | None = None
    output_connection: Connection | None = None
    inputs: list[Input] = field(default_factory=list)

    def append_input(self, name: str, kind: str = VALUE_INPUT) -> Input:
        if self.get_input(name) is not None:
            raise ValueError(f"block {self.id!r} already has an input named {name!r}")
        new_input = Input(name, kind, self)
        self.inputs.append(new_input)
        return new_input

    def get_input(self, name: str) -> Input | None:
        for candidate in self.inputs:
            if candidate.name == name:
                return candidate
        return None

    def get_field(self, name: str) -> Field | None:
        for candidate_input in self.inputs:
            for candidate in candidate_input.field_row:
                if candidate.name == name:
                    return candidate
        return None

    def get_parent(self) -> Block | None:
        """Return the block this one plugs into, through its previous or output socket."""
        for connection in (self.previous_connection, self.output_connection):
            if connection is not None and connection.target_connection is not None:
                return connection.target_connection.source_block
        return None

    def get_root_block(self) -> Block:
        root = self
        parent = root.get_parent()
        while parent is not None:
            root = parent
            parent = root.get_parent()
        return root

    def __repr__(self) -> str:
        return f"Block({self.id})"


class Workspace:
    """Canvas holding every block; top blocks are the parentless ones."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._serial = 0

    def new_block(
        self,
        block_type: str,
        *,
        block_id: str | None = None,
        previous: bool = True,
        next: bool = True,
        output: bool = False,
    ) -> Block:
        if block_id is None:
            self._serial += 1
            block_id = f"{block_type}-{self._serial}"
        if ":" in block_id:
            raise ValueError(f"block id may not contain ':': {block_id!r}")
        if self.get_block(block_id) is not None:
            raise ValueError(f"duplicate block id: {block_id!r}")
        block = Block(block_type, self, block_id)
        if previous:
            block.previous_connection = Connection(PREVIOUS, block)
        if next:
            block.next_connection = Connection(NEXT, block)
        if output:
            block.output_connection = Connection(OUTPUT, block)
        self.blocks.append(block)
        return block

    def get_block(self, block_id: str) -> Block | None:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def get_top_blocks(self) -> list[Block]:
        return [block for block in self.blocks if block.get_parent() is None]


_COMPATIBLE_KINDS = {
    (OUTPUT, INPUT),
    (PREVIOUS, NEXT),
    (PREVIOUS, INPUT),
}


def _is_compatible(a: Connection, b: Connection) -> bool:
    if (a.kind, b.kind) not in _COMPATIBLE_KINDS and (b.kind, a.kind) not in _COMPATIBLE_KINDS:
        return False
    socket = a if a.kind == INPUT else b if b.kind == INPUT else None
    if socket is None:
        return True
    plug = b if socket is a else a
    if socket.parent_input is None:
        raise ValueError(f"input connection {socket!r} has no parent input")
    if plug.kind == OUTPUT:
        return socket.parent_input.kind == VALUE_INPUT
    return socket.parent_input.kind == STATEMENT_INPUT


def _would_create_cycle(a: Connection, b: Connection) -> bool:
    """Return True when the upper block already hangs below the lower one."""
    lower, upper = (a, b) if a.kind in {PREVIOUS, OUTPUT} else (b, a)
    child = lower.source_block
    ancestor: Block | None = upper.source_block
    while ancestor is not None:
        if ancestor is child:
            return True
        ancestor = ancestor.get_parent()
    return False


def connect(a: Connection, b: Connection) -> None:
    """Link two connections, detaching any link either end already had."""
    if a is b or a.source_block is b.source_block:
        raise ValueError(f"cannot connect {a!r} to {b!r}")
    if not _is_compatible(a, b):
        raise ValueError(f"incompatible connections: {a.kind} and {b.kind}")
    if _would_create_cycle(a, b):
        raise ValueError(f"connecting {a!r} to {b!r} would make a block its own ancestor")
    disconnect(a)
    disconnect(b)
    a.target_connection = b
    b.target_connection = a


def disconnect(connection: Connection) -> None:
    other = connection.target_connection
    if other is None:
        return
    connection.target_connection = None
    if other.target_connection is connection:
        other.target_connection = None
