"""Sort-then-filter pipeline applied to every raw directory listing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from .fs import safe_mtime_ns

SORT_LEXICAL_ASC = "lexical_asc"
SORT_LEXICAL_DESC = "lexical_desc"
SORT_NEWEST = "newest"
SORT_ORDERS: tuple[str, ...] = (SORT_LEXICAL_ASC, SORT_LEXICAL_DESC, SORT_NEWEST)

FILTER_DOTFILES = "dotfiles"
FILTERS: tuple[str, ...] = (FILTER_DOTFILES,)


def is_dotfile(path: Path) -> bool:
    """Return whether the final path component starts with ``.``."""
    return path.name.startswith(".")


def filter_matches(filter_name: str, path: Path) -> bool:
    """Return ``True`` when ``filter_name`` excludes ``path`` from listings."""
    if filter_name == FILTER_DOTFILES:
        return is_dotfile(path)
    raise ValueError(f"unknown filter: {filter_name!r}")


def _newest_first_key(path: Path) -> tuple[bool, int, str]:
    # Unreadable metadata sorts after every readable timestamp.
    mtime_ns = safe_mtime_ns(path)
    return (mtime_ns is None, -(mtime_ns or 0), str(path))


def sort_entries(entries: Iterable[Path], sort_order: str) -> list[Path]:
    """Return ``entries`` sorted by ``sort_order``."""
    if sort_order == SORT_LEXICAL_ASC:
        return sorted(entries, key=str)
    if sort_order == SORT_LEXICAL_DESC:
        return sorted(entries, key=str, reverse=True)
    if sort_order == SORT_NEWEST:
        return sorted(entries, key=_newest_first_key)
    raise ValueError(f"unknown sort order: {sort_order!r}")


def order(entries: Iterable[Path], sort_order: str, filters: Sequence[str]) -> list[Path]:
    """Sort ``entries`` then drop any entry matched by one of ``filters``.

    Filters are OR'd: one match is enough to exclude an entry. The result
    depends only on the inputs, and ordering an ordered list is a no-op.
    """
    ordered = sort_entries(entries, sort_order)
    for filter_name in filters:
        ordered = [path for path in ordered if not filter_matches(filter_name, path)]
    return ordered


__all__ = [
    "SORT_LEXICAL_ASC",
    "SORT_LEXICAL_DESC",
    "SORT_NEWEST",
    "SORT_ORDERS",
    "FILTER_DOTFILES",
    "FILTERS",
    "is_dotfile",
    "filter_matches",
    "sort_entries",
    "order",
]
