"""
Loading revision identifiers for cherry-train.

A revision file is either a JSON array of strings or plain text with
one revision per line. Identifiers are trimmed and blank entries are
dropped; order and duplicates are preserved.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from .errors import RevisionFileError


def normalize_revisions(values: Iterable[str]) -> List[str]:
    """
    Trim each identifier and drop the ones that end up empty.
    """

    return [value.strip() for value in values if value.strip()]


def load_revision_file(path: str) -> List[str]:
    """
    Load revision identifiers from path.

    JSON is tried first. A JSON array of strings is used as-is and JSON
    null is rejected. Any other content, including a JSON array with
    non-string items, is read as text.
    """

    file_path = Path(path)
    if not file_path.is_file():
        raise RevisionFileError(f"file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise RevisionFileError(f"error reading file {path}: {exc}") from exc

    try:
        parsed = json.loads(content)
    except ValueError:
        return _parse_text(content)

    if parsed is None:
        raise RevisionFileError(f"could not parse file content: {path}")

    if isinstance(parsed, list) and all(isinstance(item, str) for item in parsed):
        return normalize_revisions(parsed)

    return _parse_text(content)


def _parse_text(content: str) -> List[str]:
    return normalize_revisions(content.splitlines())
