"""Domain model for directory listings.

This package contains non-UI listing primitives:
- filesystem reads (children, directory checks, stat helpers)
- the sort-then-filter ordering pipeline
"""

from __future__ import annotations

from .fs import (
    is_ancestor_or_self,
    is_browsable_dir,
    list_entries,
    safe_file_size,
    safe_is_dir,
    safe_mtime_ns,
)
from .ordering import (
    FILTER_DOTFILES,
    FILTERS,
    SORT_LEXICAL_ASC,
    SORT_LEXICAL_DESC,
    SORT_NEWEST,
    SORT_ORDERS,
    filter_matches,
    is_dotfile,
    order,
    sort_entries,
)

__all__ = [
    "list_entries",
    "safe_is_dir",
    "is_browsable_dir",
    "safe_mtime_ns",
    "safe_file_size",
    "is_ancestor_or_self",
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
