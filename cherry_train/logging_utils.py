"""
Logging helpers for cherry-train.

Progress is reported through the standard logging module; the summary
and dry-run plan are printed separately by the CLI.
"""

from __future__ import annotations

import logging


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger based on a verbosity count.

    verbosity <  0 -> WARNING
    verbosity == 0 -> INFO
    verbosity >= 1 -> DEBUG
    """

    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
