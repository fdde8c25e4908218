"""Nx workspace helpers: read nx.json and detect a configured tasks runner."""

from evefrontier_tooling.nx.config import (
    NX_JSON,
    get_tasks_runner,
    is_runner_set,
    load_nx_json,
    nx_is_configured,
)

__all__ = ["NX_JSON", "get_tasks_runner", "is_runner_set", "load_nx_json", "nx_is_configured"]
