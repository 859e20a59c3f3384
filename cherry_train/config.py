"""
Configuration model for cherry-train.

The CLI constructs a Config instance and passes it down into the
processor so behavior can be adjusted without relying on global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Config:
    """
    Top-level configuration for a cherry-train run.
    """

    revisions: List[str] = field(default_factory=list)
    revision_file: Optional[str] = None
    dry_run: bool = False
    repo: Optional[str] = None
    git: str = "git"
    verbosity: int = 0
