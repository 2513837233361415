"""Command-line front door for blockcursor.

Loads a workspace document, seeds a cursor, and replays a list of moves.
Prints each resulting location, a JSON trace, or a marked outline.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .ast_node.traversal import in_node
from .ast_node.types import ASTNode, Coordinate, WorkspaceNode
from .block_tree_model import WorkspaceFormatError, load_workspace
from .block_tree_model.types import Workspace
from .config import load_style, load_workspace_step
from .cursor import DIRECTIONS, Cursor
from .highlight import colorize_json
from .locations import LocationSpecError, format_location, parse_location
from .render import render_outline

STAY = "(stay)"


def _positive_float(value: str) -> float:
    """argparse type for positive step sizes."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def _moves(value: str) -> list[str]:
    """argparse type for a comma-separated move list."""
    moves = [part.strip() for part in value.split(",") if part.strip()]
    for move in moves:
        if move not in DIRECTIONS:
            raise argparse.ArgumentTypeError(
                f"unknown move {move!r} (expected one of {', '.join(DIRECTIONS)})"
            )
    return moves


def default_start(workspace: Workspace) -> ASTNode:
    """Return the first stack, or the workspace origin when there are no stacks."""
    origin = WorkspaceNode(Coordinate(0, 0, workspace))
    first_stack = in_node(origin)
    return first_stack if first_stack is not None else origin


def replay_moves(cursor: Cursor, moves: list[str]) -> list[dict[str, object]]:
    """Apply ``moves`` and return one trace record per step, starting location first."""
    start = cursor.get_location()
    trace: list[dict[str, object]] = [
        {
            "move": "start",
            "moved": True,
            "type": start.location_type if start is not None else None,
            "location": format_location(start) if start is not None else None,
        }
    ]
    for move in moves:
        moved = cursor.move(move) is not None
        location = cursor.get_location()
        trace.append(
            {
                "move": move,
                "moved": moved,
                "type": location.location_type if location is not None else None,
                "location": format_location(location) if location is not None else None,
            }
        )
    return trace


def format_trace(trace: list[dict[str, object]]) -> str:
    out: list[str] = []
    for record in trace:
        line = f"{record['move']:<6}{record['location']}"
        if not record["moved"]:
            line = f"{record['move']:<6}{STAY} {record['location']}"
        out.append(line)
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, replay moves over a workspace, and print the result."""
    parser = argparse.ArgumentParser(
        description="Walk a block workspace with a structural cursor."
    )
    parser.add_argument("workspace", help="Path to a workspace JSON document.")
    parser.add_argument(
        "--start",
        default=None,
        help="Starting location, e.g. block:ID or field:ID:NAME (default: first stack).",
    )
    parser.add_argument(
        "--moves",
        type=_moves,
        default=[],
        help=f"Comma-separated moves ({', '.join(DIRECTIONS)}).",
    )
    parser.add_argument(
        "--step",
        type=_positive_float,
        default=None,
        help="Workspace step per next/prev move (default: config or 10).",
    )
    parser.add_argument("--json", action="store_true", help="Print the move trace as JSON.")
    parser.add_argument("--outline", action="store_true", help="Print the workspace outline with the final location marked.")
    parser.add_argument("--style", default=None, help="Pygments style name for --json colouring.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    args = parser.parse_args(argv)

    if args.json and args.outline:
        raise SystemExit("Cannot combine --json with --outline.")

    path = Path(args.workspace)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    try:
        workspace = load_workspace(path)
    except WorkspaceFormatError as exc:
        raise SystemExit(str(exc)) from exc

    if args.start is None:
        start = default_start(workspace)
    else:
        try:
            start = parse_location(workspace, args.start)
        except LocationSpecError as exc:
            raise SystemExit(str(exc)) from exc

    step = args.step if args.step is not None else load_workspace_step()
    cursor = Cursor(start, workspace_step=step)
    trace = replay_moves(cursor, args.moves)

    if args.outline:
        sys.stdout.write(render_outline(workspace, cursor.get_location()))
        return
    if args.json:
        text = json.dumps(trace, indent=2) + "\n"
        if not args.no_color and sys.stdout.isatty():
            text = colorize_json(text, args.style or load_style())
        sys.stdout.write(text)
        return
    sys.stdout.write(format_trace(trace))


if __name__ == "__main__":
    main()
