"""
Git integration for cherry-train.

GitClient maps the logical operations the processor needs onto git
CLI invocations. Each operation runs exactly one command and returns
its CommandResult; deciding what a failure means is left to the
caller.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .runner import CommandResult, run_command

Runner = Callable[..., CommandResult]

REPO_CHECK_ARGS = ["rev-parse", "--git-dir"]
RESET_ARGS = ["reset", "--hard"]
PULL_ARGS = ["pull"]
CHERRY_PICK_ABORT_ARGS = ["cherry-pick", "--abort"]
PUSH_ARGS = ["push"]


def cherry_pick_args(revision: str) -> List[str]:
    return ["cherry-pick", revision]


class GitClient:
    """
    Thin wrapper that runs git in a fixed working directory.

    The runner is injectable so the orchestration can be exercised
    without spawning git.
    """

    def __init__(
        self,
        executable: str = "git",
        cwd: Optional[str] = None,
        runner: Runner = run_command,
    ) -> None:
        self.executable = executable
        self.cwd = cwd
        self._runner = runner

    def describe(self, args: Sequence[str]) -> str:
        """Return the command line for args as a user would type it."""

        return " ".join([self.executable, *args])

    def _run(self, args: Sequence[str]) -> CommandResult:
        return self._runner(self.executable, list(args), cwd=self.cwd)

    def is_repository(self) -> CommandResult:
        return self._run(REPO_CHECK_ARGS)

    def reset_hard(self) -> CommandResult:
        return self._run(RESET_ARGS)

    def pull(self) -> CommandResult:
        return self._run(PULL_ARGS)

    def cherry_pick(self, revision: str) -> CommandResult:
        return self._run(cherry_pick_args(revision))

    def cherry_pick_abort(self) -> CommandResult:
        return self._run(CHERRY_PICK_ABORT_ARGS)

    def push(self) -> CommandResult:
        return self._run(PUSH_ARGS)


def planned_commands(revisions: Sequence[str], executable: str = "git") -> List[str]:
    """
    Return the command lines a run over revisions would execute.

    The repository check is not part of the plan; the abort that
    follows a failed cherry-pick is conditional and is left out too.
    """

    git = GitClient(executable=executable)
    commands = [git.describe(RESET_ARGS), git.describe(PULL_ARGS)]
    for revision in revisions:
        commands.append(git.describe(cherry_pick_args(revision)))
        commands.append(git.describe(PUSH_ARGS))
    return commands
