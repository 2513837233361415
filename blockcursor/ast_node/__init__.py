"""Structural cursor over block trees.

This package contains the navigation core:
- location node variants and the ``create_node`` factory
- field-row and input-row walkers
- stack-top resolution and moves between stacks
- the ``next``/``prev``/``in``/``out`` dispatch tables
"""

from __future__ import annotations

from .types import (
    BLOCK,
    FIELD,
    INPUT,
    LOCATION_TYPES,
    NEXT,
    OUTPUT,
    PREVIOUS,
    STACK,
    WORKSPACE,
    ASTNode,
    BlockNode,
    Coordinate,
    FieldNode,
    InputNode,
    NextNode,
    OutputNode,
    PreviousNode,
    StackNode,
    WorkspaceNode,
    create_node,
)
from .fields import find_parent_input, next_editable_field, previous_editable_field
from .inputs import next_for_field, next_for_input, prev_for_field, prev_for_input
from .stacks import (
    find_top,
    navigate_between_stacks,
    out_location_for_stack,
    top_ast_node,
    top_connection,
)
from .traversal import WORKSPACE_STEP, in_node, next_node, out_node, prev_node

__all__ = [
    "FIELD",
    "BLOCK",
    "INPUT",
    "OUTPUT",
    "NEXT",
    "PREVIOUS",
    "STACK",
    "WORKSPACE",
    "LOCATION_TYPES",
    "ASTNode",
    "Coordinate",
    "WorkspaceNode",
    "StackNode",
    "BlockNode",
    "InputNode",
    "FieldNode",
    "OutputNode",
    "PreviousNode",
    "NextNode",
    "create_node",
    "find_parent_input",
    "next_editable_field",
    "previous_editable_field",
    "next_for_input",
    "next_for_field",
    "prev_for_input",
    "prev_for_field",
    "top_connection",
    "top_ast_node",
    "find_top",
    "out_location_for_stack",
    "navigate_between_stacks",
    "WORKSPACE_STEP",
    "next_node",
    "prev_node",
    "in_node",
    "out_node",
]
