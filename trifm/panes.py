"""Renderer-agnostic pane contents built from navigator state.

A ``Frame`` is everything a renderer needs for one redraw: the ancestor
panes, the current listing, the preview, the focused row, and status text.
Building a frame only reads state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .file_model import (
    FILTER_DOTFILES,
    SORT_LEXICAL_ASC,
    SORT_LEXICAL_DESC,
    SORT_NEWEST,
    is_ancestor_or_self,
    is_dotfile,
    safe_file_size,
    safe_is_dir,
)
from .navigator import Navigator

STYLE_ANCESTOR = "ancestor"
STYLE_MARKED = "marked"
STYLE_DOTFILE = "dotfile"
STYLE_DIRECTORY = "directory"
STYLE_FILE = "file"

PREVIEW_MAX_BYTES = 64 * 1024

_SORT_LABELS = {
    SORT_LEXICAL_ASC: "a-z",
    SORT_LEXICAL_DESC: "z-a",
    SORT_NEWEST: "newest",
}


@dataclass(frozen=True)
class DirListing:
    """Ordered ``(path, style)`` rows of one directory."""

    rows: tuple[tuple[Path, str], ...] = ()


@dataclass(frozen=True)
class TextContent:
    """Raw text, with the file it came from when there is one."""

    text: str
    path: Path | None = None


@dataclass(frozen=True)
class NoContent:
    pass


PaneContent = DirListing | TextContent | NoContent


@dataclass(frozen=True)
class Frame:
    parents: tuple[PaneContent, ...]
    current: DirListing
    preview: PaneContent
    selected: int | None
    status: str


def entry_style(navigator: Navigator, path: Path) -> str:
    """Return the display style of ``path``, most specific first."""
    if is_ancestor_or_self(path, navigator.current_dir):
        return STYLE_ANCESTOR
    if navigator.is_marked(path):
        return STYLE_MARKED
    if is_dotfile(path):
        return STYLE_DOTFILE
    if safe_is_dir(path):
        return STYLE_DIRECTORY
    return STYLE_FILE


def styled_listing(navigator: Navigator, entries: list[Path]) -> DirListing:
    return DirListing(tuple((path, entry_style(navigator, path)) for path in entries))


def read_preview_text(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> str | None:
    """Return the leading text of ``path``, or ``None`` for binary/unreadable files."""
    try:
        with path.open("rb") as handle:
            data = handle.read(max_bytes)
    except OSError:
        return None
    if b"\x00" in data:
        return None
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1")


def preview_content(navigator: Navigator) -> PaneContent:
    """Children of a focused directory, text of a focused file, or nothing."""
    focus = navigator.focus
    if focus is None:
        return NoContent()
    if safe_is_dir(focus):
        return styled_listing(navigator, navigator.list_next())
    text = read_preview_text(focus)
    if text is None:
        return NoContent()
    return TextContent(text, focus)


def human_size(size: int) -> str:
    """Format a byte count with binary unit suffixes (``1.5K``, ``12M``)."""
    value = float(size)
    for unit in ("B", "K", "M", "G", "T"):
        if value < 1024 or unit == "T":
            if unit == "B":
                return f"{int(value)}B"
            return f"{value:.1f}{unit}" if value < 10 else f"{int(value)}{unit}"
        value /= 1024
    return f"{size}B"


def build_status(navigator: Navigator, pending_count: int = 0, message: str = "") -> str:
    """Compose the one-line status summary shown under the panes."""
    parts = [str(navigator.current_dir)]
    focus = navigator.focus
    if focus is not None:
        size = safe_file_size(focus)
        if size is not None:
            parts.append(human_size(size))
    marked = len(navigator.marked)
    if marked:
        parts.append(f"{marked} marked")
    parts.append(f"sort:{_SORT_LABELS.get(navigator.sort_order, navigator.sort_order)}")
    if not navigator.is_filter_active(FILTER_DOTFILES):
        parts.append("hidden:shown")
    if pending_count:
        parts.append(f"count:{pending_count}")
    if message:
        parts.append(message)
    return "  ".join(parts)


def build_frame(
    navigator: Navigator,
    parent_panes: int = 1,
    pending_count: int = 0,
    message: str = "",
) -> Frame:
    """Snapshot navigator state into pane contents for one redraw.

    Ancestor panes are ordered outermost first, so the pane next to the
    current listing is always the direct parent.
    """
    parents = tuple(
        styled_listing(navigator, navigator.list_sibling(depth))
        for depth in range(max(0, parent_panes), 0, -1)
    )
    return Frame(
        parents=parents,
        current=styled_listing(navigator, navigator.list_current()),
        preview=preview_content(navigator),
        selected=navigator.focus_index(),
        status=build_status(navigator, pending_count, message),
    )


__all__ = [
    "STYLE_ANCESTOR",
    "STYLE_MARKED",
    "STYLE_DOTFILE",
    "STYLE_DIRECTORY",
    "STYLE_FILE",
    "PREVIEW_MAX_BYTES",
    "DirListing",
    "TextContent",
    "NoContent",
    "PaneContent",
    "Frame",
    "entry_style",
    "styled_listing",
    "read_preview_text",
    "preview_content",
    "human_size",
    "build_status",
    "build_frame",
]
