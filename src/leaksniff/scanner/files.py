# SPDX-License-Identifier: MIT
"""
Candidate file enumeration.
"""
from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

# Filename globs a file must match to be considered at all
INCLUDE_GLOBS = (
    "*.js",
    "*.ts",
    "*.tsx",
    "*.jsx",
    "*.json",
    "*.env",
    ".env",
    ".env.*",
    "*.yml",
    "*.yaml",
    "*.toml",
    "*.py",
    "*.rb",
    "*.go",
    "*.java",
    "*.kt",
    "*.swift",
    "*.php",
    "*.html",
    "*.css",
    "*.md",
    "*.txt",
)

# Dependency caches, build output, VCS metadata and IDE derived data
EXCLUDE_DIRS = {
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    ".turbo",
    ".expo",
    "coverage",
    ".cache",
    "vendor",
    "pods",
    "DerivedData",
}


def _matches_include(name: str) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in INCLUDE_GLOBS)


def list_files(root: Path | str) -> List[Path]:
    """
    Collect candidate files under *root*.

    Dotfiles are included. Symbolic links are never followed, neither for
    directories nor for files.

    Returns:
        Sorted absolute paths
    """
    root_path = Path(root).resolve()
    if root_path.is_file():
        return [root_path] if _matches_include(root_path.name) else []

    def _on_error(err: OSError) -> None:
        logger.debug(f"Cannot access {err.filename}: {err}")

    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, followlinks=False, onerror=_on_error):
        dirnames[:] = [d for d in dirnames if d not in EXCLUDE_DIRS]
        for name in filenames:
            if not _matches_include(name):
                continue
            path = Path(dirpath) / name
            if path.is_symlink():
                continue
            files.append(path)

    files.sort()
    return files
