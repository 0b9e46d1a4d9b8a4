"""Runtime composition layer for trifm.

Wires the terminal controller, the terminal UI, and the browsing session,
then runs the loop inside raw alternate-screen mode.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..ui.highlight import normalize_style
from ..ui.terminal_ui import TerminalUI
from ..ui.theme import resolve_theme
from .config import AppConfig
from .loop import build_session, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_browser(
    config: AppConfig,
    start_path: Path | None = None,
    style: str | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
) -> None:
    """Run an interactive browsing session until the user quits.

    ``style`` and ``theme_name`` override the configured values. Raises
    ``EOFError`` when stdin closes before the user quits.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    ui = TerminalUI(
        terminal,
        theme=resolve_theme(theme_name or config.theme, no_color=no_color),
        style=normalize_style(style or config.style),
        no_color=no_color,
    )
    ops = ui.ops()
    session = build_session(config, ops, start_path)
    logger.debug("session started in %s", session.navigator.current_dir)
    with terminal.raw_mode():
        run_main_loop(session, ops)


__all__ = ["run_browser"]
