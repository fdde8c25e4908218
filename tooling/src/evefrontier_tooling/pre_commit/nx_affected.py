"""Run nx affected format/lint (optionally outdated first) when an Nx tasks runner is configured.

Steps run one at a time with inherited stdio; the first failing step stops the
sequence and its exit code is returned.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from evefrontier_tooling.nx import nx_is_configured
from evefrontier_tooling.pre_commit.hook_config import default_settings, resolve_base_head

log = logging.getLogger(__name__)

SKIP_MESSAGE = "Nx runner not configured; skipping nx affected step."

DEFAULT_LAUNCHER = ("npx", "nx")


@dataclass(frozen=True)
class NxStep:
    """One nx invocation: name for messages, args appended to the launcher."""

    name: str
    args: tuple[str, ...]


def affected_steps(
    base: str = "main",
    head: str = "HEAD",
    targets: Sequence[str] = ("format", "lint"),
) -> list[NxStep]:
    return [
        NxStep(t, ("affected", f"--target={t}", f"--base={base}", f"--head={head}"))
        for t in targets
    ]


def outdated_step(target: str = "outdated") -> NxStep:
    return NxStep(target, ("run-many", f"--target={target}", "--all"))


def build_steps(
    with_outdated: bool = False,
    base: str = "main",
    head: str = "HEAD",
    targets: Sequence[str] = ("format", "lint"),
    outdated_target: str = "outdated",
) -> list[NxStep]:
    """Ordered steps: [outdated (run-many --all)] then one affected step per target."""
    steps = [outdated_step(outdated_target)] if with_outdated else []
    steps.extend(affected_steps(base, head, targets))
    return steps


def _run(cmd: Sequence[str], cwd: Path | None = None) -> subprocess.CompletedProcess[bytes]:
    # No capture: nx output goes straight to the terminal.
    return subprocess.run(list(cmd), cwd=cwd, check=False)


def run_nx_step(
    step: NxStep,
    project_root: Path,
    launcher: Sequence[str] = DEFAULT_LAUNCHER,
) -> int:
    """Run one step and return its exit code; 1 if it could not start or has no status."""
    cmd = [*launcher, *step.args]
    try:
        r = _run(cmd, cwd=project_root)
    except OSError as e:
        log.debug("Could not start %s: %s", " ".join(cmd), e)
        return 1
    if r.returncode < 0:
        # Killed by signal -N; there is no exit status to forward.
        log.debug("%s terminated by signal %d", step.name, -r.returncode)
        return 1
    return r.returncode


def run_nx_affected(
    project_root: Path,
    with_outdated: bool | None = None,
    base: str | None = None,
    head: str | None = None,
    launcher: Sequence[str] | None = None,
    targets: Sequence[str] | None = None,
    settings: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """If nx.json configures a tasks runner, run the nx steps in order.

    Explicit arguments win over settings (see hook_config.load_hook_settings);
    base/head also honour NX_BASE / NX_HEAD. Returns 0 when skipped or when every
    step passed, otherwise the exit code of the first failing step.
    """
    if not nx_is_configured(project_root):
        print(SKIP_MESSAGE)
        return 0

    cfg = default_settings()
    if settings is not None:
        cfg.update(settings)
    base, head = resolve_base_head(cfg, base, head, environ)
    steps = build_steps(
        with_outdated=cfg["with_outdated"] if with_outdated is None else with_outdated,
        base=base,
        head=head,
        targets=cfg["targets"] if targets is None else targets,
        outdated_target=cfg["outdated_target"],
    )
    launcher = cfg["launcher"] if launcher is None else launcher

    for step in steps:
        code = run_nx_step(step, project_root, launcher)
        if code != 0:
            log.debug("nx %s failed with exit code %d; skipping remaining steps", step.name, code)
            return code
    return 0
