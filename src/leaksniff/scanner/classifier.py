from __future__ import annotations

import os
from pathlib import Path
from typing import Union

# Basic file helpers
TEXT_EXTENSIONS = {
    ".js",
    ".ts",
    ".tsx",
    ".jsx",
    ".json",
    ".env",
    ".yml",
    ".yaml",
    ".toml",
    ".py",
    ".rb",
    ".go",
    ".java",
    ".kt",
    ".swift",
    ".php",
    ".html",
    ".css",
    ".md",
    ".txt",
}

BINARY_SAMPLE_SIZE = 8000
DEFAULT_MAX_FILE_SIZE = 2 * 1024 * 1024

PathLike = Union[str, "os.PathLike[str]"]


def looks_like_text(path: PathLike) -> bool:
    """Extension allow-list, plus dotenv basenames such as ``.env.local``."""
    p = Path(path)
    if p.suffix.lower() in TEXT_EXTENSIONS:
        return True
    base = p.name.lower()
    return base == ".env" or base.startswith(".env.")


def is_binary(data: bytes) -> bool:
    """A NUL byte in the leading sample marks the content as binary."""
    return b"\x00" in data[:BINARY_SAMPLE_SIZE]


def is_text_candidate(path: PathLike, size: int, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> bool:
    """Checks that need only the name and the stat size, so no read happens."""
    if not looks_like_text(path):
        return False
    return size <= max_file_size


def is_scannable(
    path: PathLike, size: int, data: bytes, max_file_size: int = DEFAULT_MAX_FILE_SIZE
) -> bool:
    """
    Decide whether a file is worth handing to the line matcher.

    Args:
        path: File path, used for the extension check
        size: File size in bytes as reported by stat
        data: File content already read by the caller
        max_file_size: Files strictly larger than this are rejected

    Returns:
        True for known-text, small enough, non-binary files
    """
    return is_text_candidate(path, size, max_file_size) and not is_binary(data)
