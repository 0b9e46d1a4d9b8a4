"""Filesystem reads for directory listings and per-entry metadata.

Nothing here caches: every call goes back to the filesystem, so results may be
stale only between two calls. Read failures never escape as exceptions.
"""

from __future__ import annotations

import os
from pathlib import Path


def list_entries(directory: Path) -> list[Path]:
    """Return the direct children of ``directory`` in filesystem order.

    Missing, unreadable, and non-directory paths produce an empty list.
    """
    try:
        with os.scandir(directory) as children:
            return [Path(child.path) for child in children]
    except OSError:
        return []


def safe_is_dir(path: Path) -> bool:
    """Return whether ``path`` is a directory, ``False`` on stat failure."""
    try:
        return path.is_dir()
    except OSError:
        return False


def is_browsable_dir(path: Path) -> bool:
    """Return whether ``path`` is a directory the process may list and enter."""
    if not safe_is_dir(path):
        return False
    return os.access(path, os.R_OK | os.X_OK)


def safe_mtime_ns(path: Path) -> int | None:
    """Return ``st_mtime_ns`` for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_mtime_ns)
    except OSError:
        return None


def safe_file_size(path: Path) -> int | None:
    """Return file size for regular files, otherwise ``None``."""
    try:
        if path.is_dir():
            return None
        return int(path.stat().st_size)
    except OSError:
        return None


def is_ancestor_or_self(candidate: Path, path: Path) -> bool:
    """Return whether ``candidate`` equals ``path`` or one of its ancestors."""
    return candidate == path or candidate in path.parents


__all__ = [
    "list_entries",
    "safe_is_dir",
    "is_browsable_dir",
    "safe_mtime_ns",
    "safe_file_size",
    "is_ancestor_or_self",
]
