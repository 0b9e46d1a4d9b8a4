"""Main interactive event loop.

One iteration renders a frame, blocks for one key, and applies every action
the key resolves to, in order. The loop ends after the iteration in which the
navigator's exit latch was set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..file_model import FILTER_DOTFILES
from ..input import KeyResolver
from ..navigator import Navigator
from ..panes import Frame, build_frame
from ..ui.ops import UIOps
from .config import AppConfig
from .dispatch import ActionDispatcher

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """All mutable state of one browsing session."""

    navigator: Navigator
    resolver: KeyResolver
    dispatcher: ActionDispatcher
    parent_panes: int = 1
    message: str = ""


def build_session(config: AppConfig, ui: UIOps, start_path: Path | None = None) -> Session:
    """Create navigator, resolver, and dispatcher from ``config``.

    ``start_path`` is jumped to after the navigator starts in ``$HOME``.
    """
    filters = () if config.show_hidden else (FILTER_DOTFILES,)
    navigator = Navigator(sort_order=config.sort_order, filters=filters)
    if start_path is not None:
        navigator.jump_to(start_path)
    message = ""
    if config.warnings:
        message = f"{len(config.warnings)} config entries ignored (see log)"
    return Session(
        navigator=navigator,
        resolver=KeyResolver(config.bindings),
        dispatcher=ActionDispatcher(navigator, ui),
        parent_panes=config.parent_panes,
        message=message,
    )


def current_frame(session: Session) -> Frame:
    return build_frame(
        session.navigator,
        parent_panes=session.parent_panes,
        pending_count=session.resolver.pending_count,
        message=session.message,
    )


def handle_key(session: Session, key: str) -> int | None:
    """Resolve ``key`` and apply its actions one at a time.

    Returns the focus index reported by the last action that moved focus.
    """
    new_idx: int | None = None
    for action in session.resolver.press(key):
        result = session.dispatcher.perform(action)
        if result is not None:
            new_idx = result
    return new_idx


def run_main_loop(session: Session, ui: UIOps) -> None:
    """Render, read, and dispatch until the exit latch is set."""
    while not session.navigator.is_exit():
        ui.render(current_frame(session))
        key = ui.next_key()
        session.message = ""
        handle_key(session, key)
    logger.debug("exit requested")


__all__ = ["Session", "build_session", "current_frame", "handle_key", "run_main_loop"]
