"""Main CLI entry point for evefrontier tooling."""

import sys

from evefrontier_tooling.cli import pre_commit_cmd


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: evefrontier <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  pre-commit nx-affected - Run nx affected format/lint when an Nx runner is configured",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "pre-commit":
        pre_commit_cmd.run_pre_commit_argv(sys.argv[2:])
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
