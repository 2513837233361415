"""Stateful cursor: current location, directional moves, and move history.

This module intentionally has no keyboard or rendering concerns.
A move that reaches the tree boundary leaves the cursor where it was.
"""

from __future__ import annotations

from .ast_node.traversal import WORKSPACE_STEP, in_node, next_node, out_node, prev_node
from .ast_node.types import ASTNode

MAX_LOCATION_HISTORY = 256

DIRECTIONS = ("next", "prev", "in", "out")


class LocationHistory:
    def __init__(self, max_entries: int = MAX_LOCATION_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.back: list[ASTNode] = []
        self.forward: list[ASTNode] = []

    def _append_unique(self, stack: list[ASTNode], location: ASTNode) -> None:
        if stack and stack[-1] == location:
            return
        stack.append(location)
        overflow = len(stack) - self.max_entries
        if overflow > 0:
            del stack[:overflow]

    def record(self, origin: ASTNode) -> None:
        self._append_unique(self.back, origin)
        self.forward.clear()

    def go_back(self, current: ASTNode) -> ASTNode | None:
        while self.back and self.back[-1] == current:
            self.back.pop()
        if not self.back:
            return None
        target = self.back.pop()
        self._append_unique(self.forward, current)
        return target

    def go_forward(self, current: ASTNode) -> ASTNode | None:
        while self.forward and self.forward[-1] == current:
            self.forward.pop()
        if not self.forward:
            return None
        target = self.forward.pop()
        self._append_unique(self.back, current)
        return target


class Cursor:
    """Holds one location node and moves it through the block tree."""

    def __init__(
        self,
        location: ASTNode | None = None,
        workspace_step: float = WORKSPACE_STEP,
        max_history: int = MAX_LOCATION_HISTORY,
    ) -> None:
        self.location = location
        self.workspace_step = workspace_step
        self.history = LocationHistory(max_history)

    def get_location(self) -> ASTNode | None:
        return self.location

    def set_location(self, location: ASTNode | None) -> None:
        self.location = location

    def _apply(self, new_location: ASTNode | None) -> ASTNode | None:
        if new_location is None:
            return None
        if self.location is not None:
            self.history.record(self.location)
        self.location = new_location
        return new_location

    def next(self) -> ASTNode | None:
        return self._apply(next_node(self.location, self.workspace_step))

    def prev(self) -> ASTNode | None:
        return self._apply(prev_node(self.location, self.workspace_step))

    def in_(self) -> ASTNode | None:
        return self._apply(in_node(self.location))

    def out(self) -> ASTNode | None:
        return self._apply(out_node(self.location))

    def move(self, direction: str) -> ASTNode | None:
        """Move in ``direction`` (one of ``DIRECTIONS``) and return the new location."""
        if direction == "next":
            return self.next()
        if direction == "prev":
            return self.prev()
        if direction == "in":
            return self.in_()
        if direction == "out":
            return self.out()
        raise ValueError(f"unknown direction: {direction!r}")

    def back(self) -> ASTNode | None:
        """Return to the location before the last move, if any."""
        if self.location is None:
            return None
        target = self.history.go_back(self.location)
        if target is not None:
            self.location = target
        return target

    def forward(self) -> ASTNode | None:
        if self.location is None:
            return None
        target = self.history.go_forward(self.location)
        if target is not None:
            self.location = target
        return target
