"""Tests for location node construction, accessors, and equality."""

from __future__ import annotations

import unittest

from blockcursor.ast_node.types import (
    LOCATION_TYPES,
    NODE_CLASSES,
    BlockNode,
    Coordinate,
    FieldNode,
    StackNode,
    WorkspaceNode,
    create_node,
    wrap,
)
from blockcursor.block_tree_model import Workspace


class LocationNodeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Workspace()
        self.block = self.workspace.new_block("text_print", block_id="p")
        self.field = self.block.append_input("TEXT").append_field("MSG", "hi")

    def test_every_location_type_has_a_node_class(self) -> None:
        self.assertEqual(set(NODE_CLASSES), set(LOCATION_TYPES))
        for location_type, cls in NODE_CLASSES.items():
            self.assertEqual(cls.location_type, location_type)

    def test_accessors(self) -> None:
        node = create_node("field", self.field)
        self.assertIsInstance(node, FieldNode)
        self.assertIs(node.get_location(), self.field)
        self.assertEqual(node.get_location_type(), "field")
        self.assertTrue(node.has_location())

    def test_tolerates_absent_reference(self) -> None:
        node = create_node("previous", None)
        self.assertIsNone(node.get_location())
        self.assertFalse(node.has_location())

    def test_rejects_mismatched_reference_kind(self) -> None:
        with self.assertRaises(TypeError):
            create_node("block", self.field)
        with self.assertRaises(TypeError):
            create_node("input", self.block)
        with self.assertRaises(TypeError):
            WorkspaceNode(self.block)

    def test_rejects_unknown_location_type(self) -> None:
        with self.assertRaises(ValueError):
            create_node("socket", self.block)

    def test_equality_depends_on_type_and_identity(self) -> None:
        other = self.workspace.new_block("text_print", block_id="q")
        self.assertEqual(BlockNode(self.block), BlockNode(self.block))
        self.assertNotEqual(BlockNode(self.block), StackNode(self.block))
        self.assertNotEqual(BlockNode(self.block), BlockNode(other))
        self.assertEqual(len({BlockNode(self.block), BlockNode(self.block)}), 1)

    def test_nodes_are_immutable(self) -> None:
        node = BlockNode(self.block)
        with self.assertRaises(AttributeError):
            node.location = None  # type: ignore[misc]

    def test_coordinate_equality_ignores_workspace(self) -> None:
        self.assertEqual(Coordinate(1, 2, self.workspace), Coordinate(1, 2))
        self.assertEqual(Coordinate(1, 2).shifted(3), Coordinate(4, 2))

    def test_wrap_returns_none_for_absent_location(self) -> None:
        self.assertIsNone(wrap(BlockNode, None))
        self.assertEqual(wrap(BlockNode, self.block), BlockNode(self.block))


if __name__ == "__main__":
    unittest.main()
