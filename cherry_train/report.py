"""
Human-readable output for cherry-train.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, TextIO

from .git_adapter import planned_commands
from .processor import ProcessingOutcome

RULE = "=" * 60


def format_summary(outcome: ProcessingOutcome) -> List[str]:
    """
    Render the end-of-run summary.

    Failed revisions are listed before successful ones, each in the
    order they were processed.
    """

    lines = [RULE, "CHERRY-PICK SUMMARY", RULE]

    if outcome.all_succeeded:
        lines.append("SUCCESS: all revisions were cherry-picked and pushed")
        lines.append(f"Total successful revisions: {len(outcome.successful)}")
    else:
        lines.append("COMPLETED WITH ERRORS")
        lines.append(f"Successful revisions: {len(outcome.successful)}")
        lines.append(f"Failed revisions: {len(outcome.failed)}")
        lines.append("")
        lines.append("Failed revisions:")
        lines.extend(f"  - {revision}" for revision in outcome.failed)

    if outcome.successful:
        lines.append("")
        lines.append("Successful revisions:")
        lines.extend(f"  - {revision}" for revision in outcome.successful)

    return lines


def format_plan(revisions: Sequence[str], executable: str = "git") -> List[str]:
    lines = ["DRY RUN - commands that would be executed:"]
    lines.extend(planned_commands(revisions, executable=executable))
    return lines


def print_lines(lines: Sequence[str], stream: Optional[TextIO] = None) -> None:
    for line in lines:
        print(line, file=stream)
