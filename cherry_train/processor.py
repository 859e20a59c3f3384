"""
Revision processing for cherry-train.

The processor is responsible for:
  - checking that git is running inside a repository,
  - hard-resetting and pulling before any revision is touched,
  - cherry-picking each revision in order and pushing after each pick,
  - aborting a failed cherry-pick so the next revision starts clean, and
  - recording every revision as either successful or failed.

Failures before the loop raise; failures inside the loop are recorded
and processing continues with the next revision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .config import Config
from .errors import GitCommandError, NotARepositoryError
from .git_adapter import PULL_ARGS, RESET_ARGS, GitClient, Runner
from .runner import run_command

LOG = logging.getLogger(__name__)


@dataclass
class ProcessingOutcome:
    """
    Ordered results of one processing pass.

    Each processed revision is appended to exactly one of the lists,
    in the order it was processed.
    """

    successful: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successful) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


class RevisionProcessor:
    def __init__(self, git: GitClient) -> None:
        self.git = git

    def prepare(self) -> None:
        """
        Bring the repository to a clean, up-to-date state.

        Raises NotARepositoryError or GitCommandError; nothing after the
        failing step is run.
        """

        checked = self.git.is_repository()
        if not checked.succeeded:
            location = self.git.cwd or "the current directory"
            message = f"{location} is not inside a git repository"
            if checked.output.strip():
                message = f"{message}: {checked.output.strip()}"
            raise NotARepositoryError(message)

        LOG.info("Running %s", self.git.describe(RESET_ARGS))
        result = self.git.reset_hard()
        if not result.succeeded:
            raise GitCommandError(self.git.describe(RESET_ARGS), result.output)
        LOG.info("Reset completed")

        LOG.info("Running %s", self.git.describe(PULL_ARGS))
        result = self.git.pull()
        if not result.succeeded:
            raise GitCommandError(self.git.describe(PULL_ARGS), result.output)
        LOG.info("Pull completed")

    def process(self, revisions: Sequence[str]) -> ProcessingOutcome:
        """
        Cherry-pick and push each revision in order.

        This never stops early: a failed revision is recorded and the
        next one is processed.
        """

        outcome = ProcessingOutcome()
        count = len(revisions)
        LOG.info("Processing %d revisions", count)

        for index, revision in enumerate(revisions, start=1):
            LOG.info("Processing revision %d/%d: %s", index, count, revision)
            if self._process_one(revision):
                outcome.successful.append(revision)
            else:
                outcome.failed.append(revision)

        return outcome

    def run(self, revisions: Sequence[str]) -> ProcessingOutcome:
        self.prepare()
        return self.process(revisions)

    def _process_one(self, revision: str) -> bool:
        picked = self.git.cherry_pick(revision)
        if not picked.succeeded:
            LOG.error("Cherry-pick failed for %s: %s", revision, picked.output.strip())
            self._abort_cherry_pick()
            return False
        LOG.info("Cherry-picked %s", revision)

        pushed = self.git.push()
        if not pushed.succeeded:
            # The local pick is kept; only the push is reported as failed.
            LOG.error(
                "Cherry-pick succeeded but push failed for %s: %s",
                revision,
                pushed.output.strip(),
            )
            return False

        LOG.info("Pushed %s", revision)
        return True

    def _abort_cherry_pick(self) -> None:
        """
        Best-effort cleanup after a failed cherry-pick.
        """

        LOG.info("Aborting cherry-pick")
        result = self.git.cherry_pick_abort()
        if not result.succeeded:
            LOG.warning("Failed to abort cherry-pick: %s", result.output.strip())


def run_revisions(
    revisions: Sequence[str],
    config: Config,
    runner: Runner = run_command,
) -> ProcessingOutcome:
    """
    Run the full reset, pull and cherry-pick sequence for config.
    """

    git = GitClient(executable=config.git, cwd=config.repo, runner=runner)
    return RevisionProcessor(git).run(revisions)
