"""
External command execution for cherry-train.

Every git invocation goes through run_command so that logging and the
handling of launch failures live in one place. The runner never raises
for a process that cannot be started or read; callers inspect the
returned CommandResult instead.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one external command.

    output holds stdout followed by stderr, or a description of why the
    process could not be run.
    """

    succeeded: bool
    output: str


def run_command(
    program: str,
    args: Sequence[str] = (),
    cwd: Optional[str] = None,
) -> CommandResult:
    """
    Run program with args and wait for it to exit.

    There is no timeout: a command that hangs blocks the caller.
    """

    cmd = [program, *args]
    LOG.debug("Running command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            errors="replace",
            capture_output=True,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        LOG.debug("failed to execute %s: %s", program, exc)
        return CommandResult(succeeded=False, output=f"failed to execute {program}: {exc}")

    output = (completed.stdout or "") + (completed.stderr or "")
    if completed.returncode != 0:
        LOG.debug("%s exited with status %d: %s", " ".join(cmd), completed.returncode, output)

    return CommandResult(succeeded=completed.returncode == 0, output=output)
