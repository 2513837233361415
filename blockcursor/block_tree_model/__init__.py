"""Domain model for block trees plus JSON loading.

This package contains the tree the cursor walks:
- workspace, block, input, field, and connection datatypes
- connect/disconnect helpers used while building trees
- JSON document loading
"""

from __future__ import annotations

from .types import (
    CONNECTION_KINDS,
    DUMMY_INPUT,
    INPUT,
    INPUT_KINDS,
    NEXT,
    OUTPUT,
    PREVIOUS,
    STATEMENT_INPUT,
    VALUE_INPUT,
    Block,
    Connection,
    Field,
    Input,
    Workspace,
    connect,
    disconnect,
)
from .build import WorkspaceFormatError, build_workspace, load_workspace

__all__ = [
    "CONNECTION_KINDS",
    "PREVIOUS",
    "NEXT",
    "OUTPUT",
    "INPUT",
    "INPUT_KINDS",
    "VALUE_INPUT",
    "STATEMENT_INPUT",
    "DUMMY_INPUT",
    "Block",
    "Connection",
    "Field",
    "Input",
    "Workspace",
    "connect",
    "disconnect",
    "WorkspaceFormatError",
    "build_workspace",
    "load_workspace",
]
