"""Stack resolution: top connections, stack tops, and moves between stacks."""

from __future__ import annotations

from ..block_tree_model.types import Block, Connection, Field
from ..errors import InconsistentTreeError
from .types import NextNode, OutputNode, PreviousNode, StackNode


def top_connection(block: Block) -> Connection | None:
    """Return the highest connection point of ``block``.

    A previous connection sits above an output connection, so it wins when a
    block has both.
    """
    if block.previous_connection is not None:
        return block.previous_connection
    return block.output_connection


def top_ast_node(block: Block) -> PreviousNode | OutputNode | None:
    if block.previous_connection is not None:
        return PreviousNode(block.previous_connection)
    if block.output_connection is not None:
        return OutputNode(block.output_connection)
    return None


def find_top(block: Block) -> Block:
    """Walk up previous/next links to the top of ``block``'s stack.

    The walk stops below a statement input: a block nested in another block's
    statement socket only climbs to the first block of that nested stack.
    """
    top = block
    while top.previous_connection is not None:
        target = top.previous_connection.target_connection
        if target is None or target.get_parent_input() is not None:
            break
        top = target.source_block
    return top


def owning_block(location: object) -> Block | None:
    if isinstance(location, Block):
        return location
    if isinstance(location, (Connection, Field)):
        return location.source_block
    return None


def out_location_for_stack(location: Block | Connection) -> NextNode | StackNode | None:
    """Return the location one level out of the stack holding ``location``.

    For a nested stack this is the socket the stack hangs from; at the top of a
    workspace stack it is the stack itself.
    """
    block = owning_block(location)
    if block is None:
        return None
    top = find_top(block)
    previous = top.previous_connection
    if previous is not None and previous.target_connection is not None:
        return NextNode(previous.target_connection)
    return StackNode(top)


def navigate_between_stacks(location: object, forward: bool) -> Block | None:
    """Return the top block of the stack after (or before) the one holding ``location``.

    Wraps around the workspace's stack list. Raises ``InconsistentTreeError``
    when the stack root cannot be found among its workspace's top blocks.
    """
    block = owning_block(location)
    if block is None:
        return None
    root = block.get_root_block()
    workspace = root.workspace
    if workspace is None:
        raise InconsistentTreeError(f"stack root {root.id!r} does not belong to a workspace")
    top_blocks = workspace.get_top_blocks()
    for idx, top_block in enumerate(top_blocks):
        if top_block is root:
            offset = 1 if forward else -1
            return top_blocks[(idx + offset) % len(top_blocks)]
    raise InconsistentTreeError(
        f"couldn't find {'next' if forward else 'previous'} stack: "
        f"root {root.id!r} is not a top block of its workspace"
    )
