"""CLI for pre-commit: evefrontier pre-commit nx-affected."""

from __future__ import annotations

import sys
from pathlib import Path

from evefrontier_tooling.cli.parse_common import parse_flags, path_resolver
from evefrontier_tooling.pre_commit import (
    load_hook_settings,
    resolve_config_path,
    run_nx_affected,
)

USAGE = (
    "Usage: evefrontier pre-commit nx-affected [--project-root PATH] [--config PATH] "
    "[--base REF] [--head REF] [--launcher CMD] [--with-outdated]"
)


def _usage_error(message: str | None = None) -> None:
    if message:
        print(message, file=sys.stderr)
    print(USAGE, file=sys.stderr)
    sys.exit(1)


def run_nx_affected_argv(args: list[str]) -> int:
    """Parse nx-affected options and run the dispatcher. Returns its exit code."""
    parsed, rest = parse_flags(
        args,
        ("project_root", "--project-root", Path.cwd, path_resolver),
        ("config", "--config", None, None),
        ("base", "--base", None, None),
        ("head", "--head", None, None),
        ("launcher", "--launcher", None, str.split),
    )
    for a in rest:
        if a != "--with-outdated":
            _usage_error(f"Error: Unknown argument: {a}")

    project_root = parsed["project_root"]
    config_path = resolve_config_path(project_root, parsed["config"])
    if parsed["config"] is not None and not config_path.is_file():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        return 1
    try:
        settings = load_hook_settings(config_path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return run_nx_affected(
        project_root,
        with_outdated=True if "--with-outdated" in rest else None,
        base=parsed["base"],
        head=parsed["head"],
        launcher=parsed["launcher"] or None,
        settings=settings,
    )


def run_pre_commit_argv(argv: list[str] | None = None) -> None:
    """Dispatch evefrontier pre-commit <subcommand> [options]."""
    if argv is None:
        argv = sys.argv[2:]
    if not argv:
        print("Usage: evefrontier pre-commit <subcommand> [options]", file=sys.stderr)
        print("Subcommands: nx-affected", file=sys.stderr)
        sys.exit(1)

    sub = argv[0].lower()
    if sub == "nx-affected":
        sys.exit(run_nx_affected_argv(argv[1:]))

    print(f"Error: Unknown pre-commit subcommand: {sub}", file=sys.stderr)
    sys.exit(1)
