"""
Command-line interface for cherry-train.

This module is responsible for argument parsing, resolving the list of
revisions, and delegating to the processor. It is the only place that
decides the process exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .errors import CherryTrainError
from .logging_utils import configure_logging
from .processor import run_revisions
from .report import format_plan, format_summary, print_lines
from .revisions import load_revision_file, normalize_revisions

LOG = logging.getLogger(__name__)

EPILOG = """\
examples:
  cherry-train abc123 def456 ghi789
  cherry-train --file revisions.txt
  cherry-train --file revisions.json
  cherry-train --dry-run abc123 def456

file formats:
  text, one revision per line:
    abc123
    def456

  JSON array of strings:
    ["abc123", "def456"]

When --file is given, its revisions replace any given on the command line.
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cherry-train",
        description=(
            "Reset the repository, pull, then cherry-pick and push each "
            "revision in order, reporting which ones failed."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "revisions",
        nargs="*",
        metavar="REVISION",
        help="Commit hash, tag or ref to cherry-pick, in order.",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="revision_file",
        metavar="PATH",
        help="Load revisions from a file (JSON array or one per line).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the commands that would be executed without running them.",
    )
    parser.add_argument(
        "-C",
        "--repo",
        metavar="PATH",
        help="Run git in PATH instead of the current directory.",
    )
    parser.add_argument(
        "--git",
        default="git",
        metavar="EXECUTABLE",
        help="Git executable to run (default: git).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings, errors and the final summary.",
    )

    return parser


def resolve_revisions(args: argparse.Namespace) -> List[str]:
    """
    Return the revisions to process.

    File contents replace positional revisions. Raises
    RevisionFileError when the file cannot be loaded.
    """

    revisions = normalize_revisions(args.revisions)
    if args.revision_file is None:
        return revisions

    from_file = load_revision_file(args.revision_file)
    if revisions:
        LOG.warning(
            "Ignoring %d revision(s) given on the command line; using %s",
            len(revisions),
            args.revision_file,
        )
    return from_file


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    if not argv:
        parser.print_help()
        return 0

    try:
        args, unknown = parser.parse_known_intermixed_args(argv)
    except SystemExit as exc:
        # --help and usage errors; argparse has already printed the message.
        return exc.code if isinstance(exc.code, int) else 0

    config = Config(
        revision_file=args.revision_file,
        dry_run=args.dry_run,
        repo=args.repo,
        git=args.git,
        verbosity=-1 if args.quiet else args.verbose,
    )

    configure_logging(verbosity=config.verbosity)

    for option in unknown:
        LOG.warning("Ignoring unknown option %s", option)

    try:
        config.revisions = resolve_revisions(args)
    except CherryTrainError as exc:
        print(f"cherry-train: error: {exc}", file=sys.stderr)
        return 1

    if not config.revisions:
        print("cherry-train: error: no revisions provided", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if config.dry_run:
        print_lines(format_plan(config.revisions, executable=config.git))
        return 0

    try:
        outcome = run_revisions(config.revisions, config)
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except CherryTrainError as exc:
        print(f"cherry-train: error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        print(f"cherry-train: unexpected error: {exc}", file=sys.stderr)
        return 1

    print_lines(format_summary(outcome))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
