"""Operations the core needs from a user interface."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..panes import Frame


@dataclass(frozen=True)
class UIOps:
    """Injected UI capabilities used by the dispatcher and the main loop.

    ``next_key`` blocks for one key token. ``prompt`` returns a line of text,
    or ``None`` when the user cancels. ``render`` draws a frame without
    touching navigator state. ``disable_tui_mode``/``enable_tui_mode`` bracket
    an interactive child program, after which ``request_redraw`` forces a
    full repaint.
    """

    next_key: Callable[[], str]
    prompt: Callable[[str], str | None]
    render: Callable[[Frame], None]
    disable_tui_mode: Callable[[], None]
    enable_tui_mode: Callable[[], None]
    request_redraw: Callable[[], None]


__all__ = ["UIOps"]
