"""Location nodes: one immutable variant per cursor location type.

A node pairs a location-type tag with a reference into the block tree.
Nodes hold no ownership over the tree and become stale when it changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..block_tree_model.types import Block, Connection, Field, Workspace

FIELD = "field"
BLOCK = "block"
INPUT = "input"
OUTPUT = "output"
NEXT = "next"
PREVIOUS = "previous"
STACK = "stack"
WORKSPACE = "workspace"

LOCATION_TYPES = (FIELD, BLOCK, INPUT, OUTPUT, NEXT, PREVIOUS, STACK, WORKSPACE)


@dataclass(frozen=True)
class Coordinate:
    """Point on a workspace surface."""

    x: float
    y: float
    workspace: Workspace | None = field(default=None, compare=False, repr=False)

    def shifted(self, dx: float, dy: float = 0) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy, self.workspace)


@dataclass(frozen=True)
class _LocationNode:
    location_type: ClassVar[str]
    location_kind: ClassVar[type]

    location: object

    def __post_init__(self) -> None:
        if self.location is not None and not isinstance(self.location, self.location_kind):
            raise TypeError(
                f"{self.location_type} location must be a {self.location_kind.__name__}, "
                f"got {type(self.location).__name__}"
            )

    def get_location(self):
        return self.location

    def get_location_type(self) -> str:
        return self.location_type

    def has_location(self) -> bool:
        return self.location is not None

    def next(self, workspace_step: float | None = None) -> ASTNode | None:
        from .traversal import WORKSPACE_STEP, next_node

        step = WORKSPACE_STEP if workspace_step is None else workspace_step
        return next_node(self, workspace_step=step)

    def prev(self, workspace_step: float | None = None) -> ASTNode | None:
        from .traversal import WORKSPACE_STEP, prev_node

        step = WORKSPACE_STEP if workspace_step is None else workspace_step
        return prev_node(self, workspace_step=step)

    def in_(self) -> ASTNode | None:
        from .traversal import in_node

        return in_node(self)

    def out(self) -> ASTNode | None:
        from .traversal import out_node

        return out_node(self)


@dataclass(frozen=True)
class WorkspaceNode(_LocationNode):
    location_type: ClassVar[str] = WORKSPACE
    location_kind: ClassVar[type] = Coordinate

    location: Coordinate | None


@dataclass(frozen=True)
class StackNode(_LocationNode):
    """A whole stack, referenced by its top block."""

    location_type: ClassVar[str] = STACK
    location_kind: ClassVar[type] = Block

    location: Block | None


@dataclass(frozen=True)
class BlockNode(_LocationNode):
    location_type: ClassVar[str] = BLOCK
    location_kind: ClassVar[type] = Block

    location: Block | None


@dataclass(frozen=True)
class InputNode(_LocationNode):
    """An input's socket connection."""

    location_type: ClassVar[str] = INPUT
    location_kind: ClassVar[type] = Connection

    location: Connection | None


@dataclass(frozen=True)
class FieldNode(_LocationNode):
    location_type: ClassVar[str] = FIELD
    location_kind: ClassVar[type] = Field

    location: Field | None


@dataclass(frozen=True)
class OutputNode(_LocationNode):
    location_type: ClassVar[str] = OUTPUT
    location_kind: ClassVar[type] = Connection

    location: Connection | None


@dataclass(frozen=True)
class PreviousNode(_LocationNode):
    location_type: ClassVar[str] = PREVIOUS
    location_kind: ClassVar[type] = Connection

    location: Connection | None


@dataclass(frozen=True)
class NextNode(_LocationNode):
    location_type: ClassVar[str] = NEXT
    location_kind: ClassVar[type] = Connection

    location: Connection | None


ASTNode = (
    WorkspaceNode
    | StackNode
    | BlockNode
    | InputNode
    | FieldNode
    | OutputNode
    | PreviousNode
    | NextNode
)

NODE_CLASSES: dict[str, type[_LocationNode]] = {
    cls.location_type: cls
    for cls in (
        WorkspaceNode,
        StackNode,
        BlockNode,
        InputNode,
        FieldNode,
        OutputNode,
        PreviousNode,
        NextNode,
    )
}


def create_node(location_type: str, location: object) -> ASTNode:
    """Build the node variant for ``location_type``.

    A ``None`` location is accepted and yields a node without a reference;
    traversal treats such nodes as having nowhere to go.
    """
    cls = NODE_CLASSES.get(location_type)
    if cls is None:
        raise ValueError(f"unknown location type: {location_type!r}")
    return cls(location)


def wrap(cls: type[_LocationNode], location: object) -> ASTNode | None:
    """Return ``cls(location)``, or ``None`` when there is no location to wrap."""
    if location is None:
        return None
    return cls(location)
