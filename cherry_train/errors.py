"""
Custom exception types used across cherry-train.

Only the CLI turns these into exit statuses. Per-revision failures are
not exceptions; they are recorded in the processing outcome.
"""

from __future__ import annotations


class CherryTrainError(Exception):
    """Base class for all cherry-train specific errors."""


class RevisionFileError(CherryTrainError):
    """Raised when a revision file is missing, unreadable or unparsable."""


class NotARepositoryError(CherryTrainError):
    """Raised when the working directory is not inside a git repository."""


class GitCommandError(CherryTrainError):
    """Raised when a git command that the run depends on fails."""

    def __init__(self, command: str, output: str) -> None:
        self.command = command
        self.output = output
        message = f"{command} failed"
        if output.strip():
            message = f"{message}: {output.strip()}"
        super().__init__(message)
