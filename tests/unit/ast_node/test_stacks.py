"""Tests for top-connection resolution, stack tops, and moves between stacks."""

from __future__ import annotations

import unittest

from blockcursor.ast_node.stacks import (
    find_top,
    navigate_between_stacks,
    out_location_for_stack,
    top_ast_node,
    top_connection,
)
from blockcursor.ast_node.types import NextNode, OutputNode, PreviousNode, StackNode
from blockcursor.block_tree_model import STATEMENT_INPUT, Block, Workspace, connect
from blockcursor.errors import InconsistentTreeError


def _chain(workspace: Workspace, *ids: str) -> list[Block]:
    blocks = [workspace.new_block("statement", block_id=block_id) for block_id in ids]
    for upper, lower in zip(blocks, blocks[1:]):
        connect(upper.next_connection, lower.previous_connection)
    return blocks


class TopConnectionTests(unittest.TestCase):
    def test_previous_connection_wins_over_output(self) -> None:
        block = Workspace().new_block("hybrid", previous=True, output=True)
        self.assertIs(top_connection(block), block.previous_connection)
        self.assertEqual(top_ast_node(block), PreviousNode(block.previous_connection))

    def test_output_connection_when_no_previous(self) -> None:
        block = Workspace().new_block("value", previous=False, next=False, output=True)
        self.assertIs(top_connection(block), block.output_connection)
        self.assertEqual(top_ast_node(block), OutputNode(block.output_connection))

    def test_no_top_connection(self) -> None:
        block = Workspace().new_block("hat", previous=False)
        self.assertIsNone(top_connection(block))
        self.assertIsNone(top_ast_node(block))


class FindTopTests(unittest.TestCase):
    def test_walks_to_top_of_workspace_stack(self) -> None:
        workspace = Workspace()
        first, _second, third = _chain(workspace, "a", "b", "c")
        self.assertIs(find_top(third), first)
        self.assertIs(find_top(first), first)

    def test_stops_at_statement_input(self) -> None:
        workspace = Workspace()
        outer = workspace.new_block("loop", block_id="loop")
        body = outer.append_input("DO", STATEMENT_INPUT)
        inner_first, inner_second = _chain(workspace, "x", "y")
        connect(body.connection, inner_first.previous_connection)

        self.assertIs(find_top(inner_second), inner_first)

    def test_block_without_previous_connection_is_its_own_top(self) -> None:
        block = Workspace().new_block("value", previous=False, output=True)
        self.assertIs(find_top(block), block)


class OutLocationForStackTests(unittest.TestCase):
    def test_nested_stack_surfaces_enclosing_socket(self) -> None:
        workspace = Workspace()
        outer = workspace.new_block("loop", block_id="loop")
        body = outer.append_input("DO", STATEMENT_INPUT)
        inner_first, inner_second = _chain(workspace, "x", "y")
        connect(body.connection, inner_first.previous_connection)

        self.assertEqual(out_location_for_stack(inner_second), NextNode(body.connection))
        self.assertEqual(
            out_location_for_stack(inner_second.next_connection),
            NextNode(body.connection),
        )

    def test_top_level_stack_surfaces_stack(self) -> None:
        workspace = Workspace()
        first, second = _chain(workspace, "a", "b")
        self.assertEqual(out_location_for_stack(second), StackNode(first))
        self.assertEqual(out_location_for_stack(first.previous_connection), StackNode(first))


class NavigateBetweenStacksTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Workspace()
        self.s0 = _chain(self.workspace, "s0", "s0-tail")
        self.s1 = _chain(self.workspace, "s1")
        self.s2 = _chain(self.workspace, "s2")

    def test_forward_and_backward_wrap_around(self) -> None:
        self.assertIs(navigate_between_stacks(self.s2[0], forward=True), self.s0[0])
        self.assertIs(navigate_between_stacks(self.s0[0], forward=False), self.s2[0])

    def test_resolves_non_block_locations_to_their_stack(self) -> None:
        tail = self.s0[1]
        self.assertIs(navigate_between_stacks(tail.next_connection, forward=True), self.s1[0])

    def test_cycles_back_after_one_lap(self) -> None:
        start = self.s1[0]
        current = start
        for _ in range(len(self.workspace.get_top_blocks())):
            current = navigate_between_stacks(current, forward=True)
        self.assertIs(current, start)

    def test_single_stack_returns_itself(self) -> None:
        workspace = Workspace()
        only = workspace.new_block("only")
        self.assertIs(navigate_between_stacks(only, forward=True), only)

    def test_root_missing_from_workspace_is_fatal(self) -> None:
        root = self.s1[0]
        self.workspace.blocks.remove(root)
        with self.assertRaises(InconsistentTreeError):
            navigate_between_stacks(root, forward=True)

    def test_block_without_workspace_is_fatal(self) -> None:
        orphan = Block("orphan", None, "orphan")
        with self.assertRaises(InconsistentTreeError):
            navigate_between_stacks(orphan, forward=False)


if __name__ == "__main__":
    unittest.main()
