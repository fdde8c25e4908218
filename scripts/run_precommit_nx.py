#!/usr/bin/env python3
"""Pre-commit hook: run nx affected format and lint when nx.json configures a tasks runner.

Usage (from the repository root, e.g. in .git/hooks/pre-commit or a pre-commit
`repo: local` hook):

    python scripts/run_precommit_nx.py [--with-outdated] [--base REF] [--head REF]

Equivalent to `evefrontier pre-commit nx-affected`.
"""

import sys

from evefrontier_tooling.cli.pre_commit_cmd import run_nx_affected_argv

if __name__ == "__main__":
    sys.exit(run_nx_affected_argv(sys.argv[1:]))
