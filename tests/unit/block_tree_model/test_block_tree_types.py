"""Tests for block tree linking, parents, roots, and top-block ordering."""

from __future__ import annotations

import unittest

from blockcursor.block_tree_model import (
    DUMMY_INPUT,
    STATEMENT_INPUT,
    Connection,
    Workspace,
    connect,
    disconnect,
)


class BlockTreeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Workspace()
        self.loop = self.workspace.new_block("repeat", block_id="loop")
        self.times = self.loop.append_input("TIMES")
        self.body = self.loop.append_input("DO", STATEMENT_INPUT)
        self.number = self.workspace.new_block("math_number", block_id="n", previous=False, next=False, output=True)
        self.step = self.workspace.new_block("text_print", block_id="step")

    def test_new_block_connections_follow_flags(self) -> None:
        self.assertIsNotNone(self.loop.previous_connection)
        self.assertIsNotNone(self.loop.next_connection)
        self.assertIsNone(self.loop.output_connection)
        self.assertIsNone(self.number.previous_connection)
        self.assertEqual(self.number.output_connection.kind, "output")

    def test_generated_ids_are_unique(self) -> None:
        first = self.workspace.new_block("x")
        second = self.workspace.new_block("x")
        self.assertNotEqual(first.id, second.id)

    def test_duplicate_id_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.workspace.new_block("repeat", block_id="loop")

    def test_input_sockets_know_their_input(self) -> None:
        self.assertIs(self.times.connection.get_parent_input(), self.times)
        self.assertIs(self.times.connection.source_block, self.loop)
        dummy = self.loop.append_input("LABEL", DUMMY_INPUT)
        self.assertIsNone(dummy.connection)

    def test_duplicate_input_name_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.loop.append_input("TIMES")

    def test_connect_links_both_ends(self) -> None:
        connect(self.times.connection, self.number.output_connection)
        self.assertIs(self.times.connection.target_block(), self.number)
        self.assertIs(self.number.output_connection.target_block(), self.loop)
        self.assertIs(self.number.get_parent(), self.loop)
        self.assertIs(self.number.get_root_block(), self.loop)

    def test_top_blocks_exclude_plugged_blocks(self) -> None:
        connect(self.body.connection, self.step.previous_connection)
        self.assertEqual(self.workspace.get_top_blocks(), [self.loop, self.number])
        disconnect(self.step.previous_connection)
        self.assertEqual(self.workspace.get_top_blocks(), [self.loop, self.number, self.step])
        self.assertFalse(self.body.connection.is_connected())

    def test_incompatible_connections_rejected(self) -> None:
        with self.assertRaises(ValueError):
            connect(self.body.connection, self.number.output_connection)
        with self.assertRaises(ValueError):
            connect(self.times.connection, self.step.previous_connection)
        with self.assertRaises(ValueError):
            connect(self.loop.next_connection, self.loop.previous_connection)

    def test_reconnect_detaches_old_link(self) -> None:
        other = self.workspace.new_block("text_print", block_id="other")
        connect(self.loop.next_connection, self.step.previous_connection)
        connect(self.loop.next_connection, other.previous_connection)
        self.assertIsNone(self.step.previous_connection.target_connection)
        self.assertIs(self.loop.next_connection.target_block(), other)

    def test_lookup_helpers(self) -> None:
        field = self.times.append_field("COUNT", "10")
        self.assertIs(self.workspace.get_block("n"), self.number)
        self.assertIsNone(self.workspace.get_block("missing"))
        self.assertIs(self.loop.get_field("COUNT"), field)
        self.assertIs(field.source_block, self.loop)
        self.assertIsNone(self.loop.get_input("MISSING"))

    def test_unknown_connection_kind_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Connection("sideways", self.loop)

    def test_connect_rejects_statement_cycle(self) -> None:
        connect(self.loop.next_connection, self.step.previous_connection)
        with self.assertRaises(ValueError):
            connect(self.step.next_connection, self.loop.previous_connection)
        self.assertIsNone(self.loop.previous_connection.target_connection)
        self.assertIs(self.step.get_root_block(), self.loop)

    def test_connect_rejects_block_inside_its_own_input(self) -> None:
        connect(self.body.connection, self.step.previous_connection)
        inner = self.workspace.new_block("repeat", block_id="inner")
        inner_body = inner.append_input("DO", STATEMENT_INPUT)
        connect(self.step.next_connection, inner.previous_connection)
        with self.assertRaises(ValueError):
            connect(inner_body.connection, self.loop.previous_connection)
        with self.assertRaises(ValueError):
            connect(self.body.connection, self.loop.previous_connection)
        self.assertEqual(self.workspace.get_top_blocks(), [self.loop, self.number])

    def test_connect_allows_moving_a_block_further_down(self) -> None:
        connect(self.loop.next_connection, self.step.previous_connection)
        other = self.workspace.new_block("text_print", block_id="other")
        connect(other.next_connection, self.step.previous_connection)
        self.assertIs(self.step.get_parent(), other)
        self.assertIsNone(self.loop.next_connection.target_connection)

    def test_socket_without_input_rejected(self) -> None:
        loose = Connection("input", self.loop)
        with self.assertRaises(ValueError):
            connect(loose, self.number.output_connection)

    def test_duplicate_field_name_rejected_across_inputs(self) -> None:
        self.times.append_field("COUNT", "10")
        with self.assertRaises(ValueError):
            self.times.append_field("COUNT", "11")
        with self.assertRaises(ValueError):
            self.body.append_field("COUNT", "12")
        self.assertEqual([f.name for f in self.times.field_row], ["COUNT"])

    def test_block_id_with_colon_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.workspace.new_block("repeat", block_id="a:b")
        self.assertIsNone(self.workspace.get_block("a:b"))


if __name__ == "__main__":
    unittest.main()
