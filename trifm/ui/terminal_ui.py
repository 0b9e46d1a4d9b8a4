"""Column-layout terminal renderer and line prompt.

Draws ancestor panes, the current listing, and the preview side by side with
a status row underneath. Output is written straight to the stdout file
descriptor as ANSI sequences; input comes from ``read_key``.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..input import read_key
from ..panes import STYLE_ANCESTOR, DirListing, Frame, PaneContent, TextContent
from ..runtime.terminal import TerminalController
from .ansi import fit_ansi_line
from .highlight import DEFAULT_STYLE, colorize_source, sanitize_terminal_text
from .ops import UIOps
from .theme import DEFAULT_THEME, UITheme

CURRENT_MARKER = " >"
PARENT_SHARE = 20
CURRENT_SHARE = 30
PREVIEW_SHARE = 50


def pane_widths(total_width: int, parent_count: int) -> list[int]:
    """Split ``total_width`` between panes, leaving one column per divider.

    Ancestor panes share 20% of the width, the current listing gets 30% and
    the preview the remainder.
    """
    pane_count = parent_count + 2
    usable = max(pane_count, total_width - (pane_count - 1))
    if parent_count:
        shares = [PARENT_SHARE / parent_count] * parent_count + [CURRENT_SHARE, PREVIEW_SHARE]
    else:
        shares = [40, 60]
    total_share = sum(shares)
    widths = [max(1, int(usable * share / total_share)) for share in shares[:-1]]
    widths.append(max(1, usable - sum(widths)))
    return widths


def scroll_start(selected: int | None, start: int, rows: int, total: int) -> int:
    """Return a scroll offset that keeps ``selected`` within ``rows`` visible rows."""
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + rows:
            start = selected - rows + 1
    return max(0, min(start, max(0, total - rows)))


class TerminalUI:
    """Terminal implementation of ``UIOps``."""

    def __init__(
        self,
        terminal: TerminalController,
        *,
        theme: UITheme = DEFAULT_THEME,
        style: str = DEFAULT_STYLE,
        no_color: bool = False,
    ) -> None:
        self.terminal = terminal
        self.theme = theme
        self.style = style
        self.no_color = no_color
        self._list_start = 0
        self._needs_clear = True

    def ops(self) -> UIOps:
        return UIOps(
            next_key=self.next_key,
            prompt=self.prompt,
            render=self.render,
            disable_tui_mode=self.terminal.disable_tui_mode,
            enable_tui_mode=self.terminal.enable_tui_mode,
            request_redraw=self.request_redraw,
        )

    # -- input -------------------------------------------------------------

    def next_key(self) -> str:
        """Block for one key token; raise ``EOFError`` once stdin is closed."""
        key = read_key(self.terminal.stdin_fd)
        if not key:
            raise EOFError("stdin closed")
        return key

    def prompt(self, label: str) -> str | None:
        """Read one line on the status row; ``Esc`` cancels and returns ``None``."""
        text = ""
        while True:
            self._draw_prompt(label, text)
            key = self.next_key()
            if key == "ENTER":
                break
            if key == "ESC":
                self._needs_clear = True
                return None
            if key == "BACKSPACE":
                text = text[:-1]
            elif key == "CTRL_U":
                text = ""
            elif len(key) == 1 and key.isprintable():
                text += key
        self._needs_clear = True
        return text

    # -- output ------------------------------------------------------------

    def request_redraw(self) -> None:
        self._needs_clear = True

    def _write(self, chunks: list[str]) -> None:
        os.write(self.terminal.stdout_fd, "".join(chunks).encode("utf-8", errors="replace"))

    def _draw_prompt(self, label: str, text: str) -> None:
        term = shutil.get_terminal_size((80, 24))
        theme = self.theme
        line = f"{theme.prompt}{label}{theme.reset}{text}{theme.reverse} {theme.reset}"
        self._write([f"\033[{term.lines};1H", fit_ansi_line(line, max(1, term.columns - 1))])

    def render(self, frame: Frame) -> None:
        term = shutil.get_terminal_size((80, 24))
        rows = max(1, term.lines - 1)
        widths = pane_widths(term.columns, len(frame.parents))

        self._list_start = scroll_start(frame.selected, self._list_start, rows, len(frame.current.rows))
        columns: list[list[str]] = []
        for pane, width in zip(frame.parents, widths):
            columns.append(self._pane_lines(pane, width, rows, cursor=None, start=None))
        current_width, preview_width = widths[-2], widths[-1]
        columns.append(
            self._pane_lines(frame.current, current_width, rows, cursor=frame.selected, start=self._list_start)
        )
        columns.append(self._pane_lines(frame.preview, preview_width, rows, cursor=None, start=0))

        theme = self.theme
        divider = f"{theme.divider}│{theme.reset}"
        out: list[str] = []
        if self._needs_clear:
            out.append("\033[2J")
            self._needs_clear = False
        out.append("\033[H")
        for row in range(rows):
            out.append(f"\033[{row + 1};1H")
            out.append(divider.join(column[row] for column in columns))
        status = f"{theme.status}{sanitize_terminal_text(frame.status)}{theme.reset}"
        out.append(f"\033[{rows + 1};1H")
        out.append(fit_ansi_line(status, max(1, term.columns - 1)))
        self._write(out)

    def _pane_lines(
        self,
        pane: PaneContent,
        width: int,
        rows: int,
        *,
        cursor: int | None,
        start: int | None,
    ) -> list[str]:
        if isinstance(pane, DirListing):
            lines = self._listing_lines(pane, width, rows, cursor=cursor, start=start)
        elif isinstance(pane, TextContent):
            lines = self._text_lines(pane, width, rows)
        else:
            lines = []
        blank = " " * width
        return lines + [blank] * (rows - len(lines))

    def _listing_lines(
        self,
        pane: DirListing,
        width: int,
        rows: int,
        *,
        cursor: int | None,
        start: int | None,
    ) -> list[str]:
        theme = self.theme
        show_marker = cursor is not None
        if not pane.rows:
            return [fit_ansi_line(f"{theme.empty_hint} (empty){theme.reset}", width)]
        if start is None:
            # Ancestor panes keep the entry leading to the working directory in view.
            anchor = next((idx for idx, (_path, style) in enumerate(pane.rows) if style == STYLE_ANCESTOR), 0)
            start = scroll_start(anchor, max(0, anchor - rows // 2), rows, len(pane.rows))
        lines: list[str] = []
        for idx in range(start, min(len(pane.rows), start + rows)):
            path, style = pane.rows[idx]
            name = sanitize_terminal_text(path.name or str(path))
            selected = cursor is not None and idx == cursor
            marker = ""
            if show_marker:
                marker = CURRENT_MARKER if selected else " " * len(CURRENT_MARKER)
            color = theme.entry_color(style)
            if selected:
                marker = f"{theme.cursor_marker}{marker}{theme.reset}"
            text = f"{color}{marker}{color} {name}"
            line = fit_ansi_line(text, width)
            if selected:
                line = theme.reverse + line.replace(theme.reset, theme.reset + theme.reverse) + theme.reset
            lines.append(line)
        return lines

    def _text_lines(self, pane: TextContent, width: int, rows: int) -> list[str]:
        source_lines = pane.text.splitlines()[:rows]
        source = "\n".join(source_lines)
        if self.no_color:
            rendered = sanitize_terminal_text(source)
        else:
            rendered = colorize_source(source, pane.path or Path("preview.txt"), self.style)
        return [fit_ansi_line(line, width) for line in rendered.splitlines()[:rows]]


__all__ = ["TerminalUI", "pane_widths", "scroll_start", "CURRENT_MARKER"]
