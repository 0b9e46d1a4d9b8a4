"""Directory cursor state machine.

``Navigator`` owns the working directory, focus, marks, filters, and sort
order for one browsing session. Every operation is total: filesystem errors
degrade to empty listings or no-ops and never raise.

Operations that may move focus return the new focus index within
``list_current()`` (or ``None``) so a UI can keep its cursor in sync.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .file_model import (
    FILTER_DOTFILES,
    FILTERS,
    SORT_LEXICAL_ASC,
    SORT_ORDERS,
    is_browsable_dir,
    list_entries,
    order,
    safe_is_dir,
)

logger = logging.getLogger(__name__)

ROOT_DIR = Path("/")


def _absolute(path: Path) -> Path:
    """Make ``path`` absolute without resolving symlinks."""
    return Path(os.path.abspath(path))


def initial_directory() -> Path:
    """Return ``$HOME`` when browsable, else the filesystem root."""
    home = os.environ.get("HOME", "").strip()
    if home:
        candidate = _absolute(Path(home))
        if is_browsable_dir(candidate):
            return candidate
        logger.warning("HOME=%s is not a readable directory, starting at /", home)
    return ROOT_DIR


class Navigator:
    """Working directory, focus, and selection state for one session."""

    def __init__(
        self,
        start_dir: Path | None = None,
        *,
        sort_order: str = SORT_LEXICAL_ASC,
        filters: Iterable[str] = (FILTER_DOTFILES,),
    ) -> None:
        if sort_order not in SORT_ORDERS:
            raise ValueError(f"unknown sort order: {sort_order!r}")
        self._filters: list[str] = []
        for filter_name in filters:
            if filter_name not in FILTERS:
                raise ValueError(f"unknown filter: {filter_name!r}")
            if filter_name not in self._filters:
                self._filters.append(filter_name)
        self._sort_order = sort_order
        self._marked: set[Path] = set()
        self._exit = False

        if start_dir is not None and is_browsable_dir(_absolute(start_dir)):
            self._current_dir = _absolute(start_dir)
        else:
            self._current_dir = initial_directory()
        listing = self.list_current()
        self._focus: Path | None = listing[0] if listing else None

    # -- read-only views -------------------------------------------------

    @property
    def current_dir(self) -> Path:
        return self._current_dir

    @property
    def focus(self) -> Path | None:
        return self._focus

    @property
    def sort_order(self) -> str:
        return self._sort_order

    @property
    def filters(self) -> tuple[str, ...]:
        return tuple(self._filters)

    @property
    def marked(self) -> tuple[Path, ...]:
        """Marked paths in a stable (sorted) order."""
        return tuple(sorted(self._marked, key=str))

    def is_marked(self, path: Path) -> bool:
        return path in self._marked

    def is_filter_active(self, filter_name: str) -> bool:
        return filter_name in self._filters

    def is_exit(self) -> bool:
        return self._exit

    # -- listings --------------------------------------------------------

    def _order(self, entries: Iterable[Path]) -> list[Path]:
        return order(entries, self._sort_order, self._filters)

    def list_current(self) -> list[Path]:
        """Ordered listing of the working directory."""
        return self._order(list_entries(self._current_dir))

    def list_sibling(self, depth: int) -> list[Path]:
        """Ordered listing of the ancestor ``depth`` levels above the working directory.

        Depth 0 lists the working directory itself; walking past the
        filesystem root yields an empty list.
        """
        directory = self._current_dir
        for _ in range(max(0, depth)):
            parent = directory.parent
            if parent == directory:
                return []
            directory = parent
        if not safe_is_dir(directory):
            return []
        return self._order(list_entries(directory))

    def list_next(self) -> list[Path]:
        """Ordered children of the focused entry when it is a directory."""
        if self._focus is None or not safe_is_dir(self._focus):
            return []
        return self._order(list_entries(self._focus))

    def focus_index(self) -> int | None:
        """Return the position of focus in ``list_current()``, if present."""
        if self._focus is None:
            return None
        try:
            return self.list_current().index(self._focus)
        except ValueError:
            return None

    def _settle_focus(self, listing: list[Path]) -> int | None:
        """Drop focus when it is not in ``listing``; return its index otherwise."""
        if self._focus is None:
            return None
        try:
            return listing.index(self._focus)
        except ValueError:
            logger.debug("dropping stale focus %s", self._focus)
            self._focus = None
            return None

    # -- movement --------------------------------------------------------

    def _step(self, delta: int) -> int | None:
        listing = self.list_current()
        if not listing:
            return None
        if self._focus is None:
            new_idx = 0
        else:
            try:
                position = listing.index(self._focus)
            except ValueError:
                # Stale focus counts as absent, nothing to move relative to.
                self._focus = None
                return None
            new_idx = (position + delta) % len(listing)
        self._focus = listing[new_idx]
        return new_idx

    def move_up(self) -> int | None:
        """Move focus one entry up, wrapping from the first entry to the last."""
        return self._step(-1)

    def move_down(self) -> int | None:
        """Move focus one entry down, wrapping from the last entry to the first."""
        return self._step(1)

    def _enter_directory(self, directory: Path) -> int | None:
        self._current_dir = directory
        listing = self.list_current()
        self._focus = listing[0] if listing else None
        return 0 if listing else None

    def move_in(self) -> int | None:
        """Enter the focused directory and focus its first entry."""
        if self._focus is None or not is_browsable_dir(self._focus):
            return None
        return self._enter_directory(self._focus)

    def move_out(self) -> int | None:
        """Go to the parent directory, focusing the directory just left.

        At the filesystem root, or when the parent cannot be listed, nothing
        changes.
        """
        parent = self._current_dir.parent
        if parent == self._current_dir or not is_browsable_dir(parent):
            return None
        self._focus = self._current_dir
        self._current_dir = parent
        return self._settle_focus(self.list_current())

    def jump_to(self, path: Path) -> int | None:
        """Browse ``path`` when it is a directory, otherwise focus it in its parent.

        Paths that do not exist, unreadable directories, and paths without a
        parent leave the state untouched.
        """
        target = _absolute(path)
        if safe_is_dir(target):
            if not is_browsable_dir(target):
                logger.info("jump target %s is not readable", target)
                return None
            return self._enter_directory(target)
        if not os.path.lexists(target):
            logger.info("jump target %s does not exist", target)
            return None
        parent = target.parent
        if parent == target or not is_browsable_dir(parent):
            return None
        self._current_dir = parent
        self._focus = target
        return self._settle_focus(self.list_current())

    def refresh(self) -> int | None:
        """Re-validate state after the filesystem changed underneath it.

        A working directory that vanished is replaced by its closest
        browsable ancestor, and focus is dropped when no longer listed.
        """
        directory = self._current_dir
        while not is_browsable_dir(directory):
            parent = directory.parent
            if parent == directory:
                break
            directory = parent
        if directory != self._current_dir:
            logger.info("working directory %s is gone, moving to %s", self._current_dir, directory)
            self._focus = None
            return self._enter_directory(directory)
        return self._settle_focus(self.list_current())

    # -- marks -----------------------------------------------------------

    def mark_current(self) -> int | None:
        """Mark the focused entry, then move down."""
        if self._focus is not None:
            self._marked.add(self._focus)
        return self.move_down()

    def unmark_current(self) -> int | None:
        """Unmark the focused entry, then move down."""
        if self._focus is not None:
            self._marked.discard(self._focus)
        return self.move_down()

    def mark_all(self) -> None:
        self._marked.update(self.list_current())

    def unmark_all(self) -> None:
        self._marked.clear()

    # -- listing configuration -------------------------------------------

    def toggle_filter(self, filter_name: str) -> None:
        """Add ``filter_name``, or clear every filter when it is already active."""
        if filter_name not in FILTERS:
            raise ValueError(f"unknown filter: {filter_name!r}")
        if filter_name in self._filters:
            self._filters = []
        else:
            self._filters.append(filter_name)
        self._settle_focus(self.list_current())

    def set_sort_order(self, sort_order: str) -> None:
        if sort_order not in SORT_ORDERS:
            raise ValueError(f"unknown sort order: {sort_order!r}")
        self._sort_order = sort_order

    def exit(self) -> None:
        """Latch the exit flag; it is never cleared."""
        self._exit = True


__all__ = ["Navigator", "initial_directory", "ROOT_DIR"]
