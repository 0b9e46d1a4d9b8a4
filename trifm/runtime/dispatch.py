"""Action dispatch onto navigator operations and command launches."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..actions import (
    ACTION_TYPES,
    Action,
    Jump,
    Mark,
    MarkAll,
    MoveDown,
    MoveIn,
    MoveOut,
    MoveUp,
    Quit,
    SetSortOrder,
    ShellCommand,
    TerminalCommand,
    ToggleFilter,
    Unmark,
    UnmarkAll,
)
from ..commands import expand_command, run_command, run_interactive, split_command
from ..navigator import Navigator
from ..ui.ops import UIOps

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Apply one action at a time and report the resulting focus index.

    The handler table must cover every action type; a missing handler is a
    programming error reported when the dispatcher is built.
    """

    def __init__(self, navigator: Navigator, ui: UIOps) -> None:
        self.navigator = navigator
        self.ui = ui
        self._handlers: dict[type, Callable[..., int | None]] = {
            MoveUp: lambda _action: navigator.move_up(),
            MoveDown: lambda _action: navigator.move_down(),
            MoveIn: lambda _action: navigator.move_in(),
            MoveOut: lambda _action: navigator.move_out(),
            Quit: self._quit,
            Mark: lambda _action: navigator.mark_current(),
            Unmark: lambda _action: navigator.unmark_current(),
            MarkAll: self._mark_all,
            UnmarkAll: self._unmark_all,
            Jump: lambda action: navigator.jump_to(action.path),
            ToggleFilter: self._toggle_filter,
            SetSortOrder: self._set_sort_order,
            ShellCommand: self._run_shell_command,
            TerminalCommand: self._run_terminal_command,
        }
        missing = [action_type.__name__ for action_type in ACTION_TYPES if action_type not in self._handlers]
        if missing:
            raise TypeError(f"no dispatch handler for: {', '.join(missing)}")

    def perform(self, action: Action) -> int | None:
        """Apply ``action`` and return the new focus index, if it changed."""
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"unsupported action: {action!r}")
        return handler(action)

    def _quit(self, _action: Quit) -> None:
        self.navigator.exit()
        return None

    def _mark_all(self, _action: MarkAll) -> None:
        self.navigator.mark_all()
        return None

    def _unmark_all(self, _action: UnmarkAll) -> None:
        self.navigator.unmark_all()
        return None

    def _toggle_filter(self, action: ToggleFilter) -> int | None:
        self.navigator.toggle_filter(action.filter_name)
        return self.navigator.focus_index()

    def _set_sort_order(self, action: SetSortOrder) -> int | None:
        self.navigator.set_sort_order(action.sort_order)
        return self.navigator.focus_index()

    def _run_shell_command(self, action: ShellCommand) -> int | None:
        commands = expand_command(action.template, self.navigator, self.ui.prompt)
        if not commands:
            return None
        for command in commands:
            logger.info("running %r", command)
            run_command(split_command(command), self.navigator.current_dir)
        return self.navigator.refresh()

    def _run_terminal_command(self, action: TerminalCommand) -> int | None:
        commands = expand_command(action.template, self.navigator, self.ui.prompt)
        if not commands:
            return None
        for command in commands:
            logger.info("launching %r", command)
            run_interactive(
                split_command(command),
                self.navigator.current_dir,
                self.ui.disable_tui_mode,
                self.ui.enable_tui_mode,
            )
        self.ui.request_redraw()
        return self.navigator.refresh()


__all__ = ["ActionDispatcher"]
