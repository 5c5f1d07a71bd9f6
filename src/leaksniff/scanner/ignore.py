# SPDX-License-Identifier: MIT
"""
Gitignore-style path suppression.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_FILENAME = ".secret-scan-ignore"


class IgnoreMatcher:
    """Compiled ignore rules; read-only once built so tasks can share it."""

    def __init__(self, spec: pathspec.PathSpec) -> None:
        self._spec = spec

    @classmethod
    def from_lines(cls, lines) -> "IgnoreMatcher":
        # pathspec drops blank lines and '#' comments itself
        return cls(pathspec.GitIgnoreSpec.from_lines(lines))

    def matches(self, relative_path: str) -> bool:
        """True when *relative_path* (forward slashes, root-relative) is ignored."""
        return self._spec.match_file(relative_path)


def build_ignore_matcher(ignore_file_path: Optional[str] = None) -> Optional[IgnoreMatcher]:
    """
    Build a matcher from an ignore file.

    Returns None when no path is given or the file does not exist.
    """
    if not ignore_file_path:
        return None
    path = Path(ignore_file_path)
    if not path.exists():
        logger.debug(f"Ignore file not found, nothing suppressed: {path}")
        return None

    content = path.read_text(encoding="utf-8")
    matcher = IgnoreMatcher.from_lines(content.splitlines())
    logger.debug(f"Loaded ignore file: {path}")
    return matcher


def should_ignore_path(relative_path: str, matcher: Optional[IgnoreMatcher]) -> bool:
    if matcher is None:
        return False
    return matcher.matches(relative_path)
