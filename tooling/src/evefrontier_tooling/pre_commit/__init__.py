"""Pre-commit helpers: run nx affected format/lint when an Nx tasks runner is configured."""

from evefrontier_tooling.pre_commit.hook_config import (
    DEFAULT_CONFIG_NAME,
    load_hook_settings,
    resolve_base_head,
    resolve_config_path,
)
from evefrontier_tooling.pre_commit.nx_affected import (
    SKIP_MESSAGE,
    NxStep,
    build_steps,
    run_nx_affected,
    run_nx_step,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "SKIP_MESSAGE",
    "NxStep",
    "build_steps",
    "load_hook_settings",
    "resolve_base_head",
    "resolve_config_path",
    "run_nx_affected",
    "run_nx_step",
]
