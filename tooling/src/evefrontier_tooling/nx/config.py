"""Nx configuration probe: is a tasks runner configured in nx.json?"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

NX_JSON = "nx.json"


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not JSON.
    msg = f"Invalid JSON constant: {name}"
    raise ValueError(msg)


def load_nx_json(project_root: Path) -> dict[str, Any] | None:
    """Load nx.json from project_root. Returns None if missing, unreadable, or not a JSON object."""
    path = project_root / NX_JSON
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError, RecursionError) as e:
        log.debug("Could not read %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        log.debug("Ignoring %s: top level is %s, not an object", path, type(data).__name__)
        return None
    return data


def get_tasks_runner(cfg: dict[str, Any] | None) -> Any:
    """Value at tasksRunnerOptions.default.runner, or None if any level is absent."""
    node: Any = cfg
    for key in ("tasksRunnerOptions", "default", "runner"):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def is_runner_set(value: Any) -> bool:
    """Only null, false, "" and 0 count as unset; empty objects and arrays are set."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (str, int, float)):
        return value != "" and value != 0
    return True


def nx_is_configured(project_root: Path) -> bool:
    """True when nx.json sets tasksRunnerOptions.default.runner to anything but null/false/""/0."""
    return is_runner_set(get_tasks_runner(load_nx_json(project_root)))
