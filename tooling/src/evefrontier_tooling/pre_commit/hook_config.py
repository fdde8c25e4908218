"""Optional hook settings for the nx-affected pre-commit step.

Settings YAML format (all keys optional):
- with_outdated: also run `run-many --target=outdated --all` first (default false)
- base / head: revisions passed to `nx affected` (default main / HEAD)
- launcher: command used to reach nx, string or list (default "npx nx")
- targets: affected targets, in order (default [format, lint])
- outdated_target: target name for the run-many step (default outdated)

NX_BASE / NX_HEAD in the environment override base / head from the file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_NAME = ".nx-precommit.yaml"

DEFAULT_SETTINGS: dict[str, Any] = {
    "with_outdated": False,
    "base": "main",
    "head": "HEAD",
    "launcher": ["npx", "nx"],
    "targets": ["format", "lint"],
    "outdated_target": "outdated",
}


def default_settings() -> dict[str, Any]:
    """Fresh copy of DEFAULT_SETTINGS (lists are not shared)."""
    return {k: list(v) if isinstance(v, list) else v for k, v in DEFAULT_SETTINGS.items()}


def _as_str_list(value: Any, key: str, path: Path) -> list[str]:
    if isinstance(value, str):
        items = value.split()
    elif isinstance(value, list) and all(isinstance(v, str) for v in value):
        items = list(value)
    else:
        msg = f"{path}: {key} must be a string or a list of strings"
        raise ValueError(msg)
    if not items:
        msg = f"{path}: {key} must not be empty"
        raise ValueError(msg)
    return items


def load_hook_settings(config_path: Path | None) -> dict[str, Any]:
    """Load settings from YAML, filling defaults. Missing file -> defaults.

    Raises ValueError if the document is not a mapping or a value has the wrong type.
    """
    settings = default_settings()
    if config_path is None or not config_path.is_file():
        return settings

    with config_path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"{config_path}: invalid YAML: {e}"
            raise ValueError(msg) from e
    if data is None:
        return settings
    if not isinstance(data, dict):
        msg = f"{config_path}: expected a mapping at top level"
        raise ValueError(msg)

    if "with_outdated" in data:
        if not isinstance(data["with_outdated"], bool):
            msg = f"{config_path}: with_outdated must be true or false"
            raise ValueError(msg)
        settings["with_outdated"] = data["with_outdated"]
    for key in ("base", "head", "outdated_target"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value:
                msg = f"{config_path}: {key} must be a non-empty string"
                raise ValueError(msg)
            settings[key] = value
    for key in ("launcher", "targets"):
        if key in data:
            settings[key] = _as_str_list(data[key], key, config_path)
    return settings


def resolve_config_path(project_root: Path, config: str | Path | None = None) -> Path | None:
    """Explicit config (relative to project_root) or project_root/.nx-precommit.yaml if present."""
    if config is not None:
        p = Path(config)
        return p if p.is_absolute() else project_root / p
    default = project_root / DEFAULT_CONFIG_NAME
    return default if default.is_file() else None


def resolve_base_head(
    settings: Mapping[str, Any],
    base: str | None = None,
    head: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, str]:
    """Pick base/head: explicit argument, then NX_BASE / NX_HEAD, then settings."""
    env = os.environ if environ is None else environ
    resolved_base = base or env.get("NX_BASE") or settings["base"]
    resolved_head = head or env.get("NX_HEAD") or settings["head"]
    return resolved_base, resolved_head
