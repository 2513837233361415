"""Persistent JSON config helpers.

Stores the workspace step size and the CLI colour style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .ast_node.traversal import WORKSPACE_STEP

APP_NAME = "blockcursor"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored to keep a read-only config directory
    non-fatal.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_workspace_step() -> float:
    """Return the persisted workspace step, or the default for bad values.

    Booleans and non-positive numbers are rejected.
    """
    value = load_config().get("workspace_step")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return WORKSPACE_STEP
    if value <= 0:
        return WORKSPACE_STEP
    return value


def save_workspace_step(step: float) -> None:
    if step <= 0:
        raise ValueError("workspace step must be positive")
    config = load_config()
    config["workspace_step"] = step
    save_config(config)


def load_style() -> str:
    value = load_config().get("style")
    return value if isinstance(value, str) and value else DEFAULT_STYLE


def save_style(style: str) -> None:
    config = load_config()
    config["style"] = style
    save_config(config)
