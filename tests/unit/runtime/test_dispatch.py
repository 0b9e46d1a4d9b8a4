"""Action dispatcher tests with a recorded fake UI."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from trifm.actions import (
    ACTION_TYPES,
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
from trifm.file_model import FILTER_DOTFILES, SORT_LEXICAL_DESC
from trifm.navigator import Navigator
from trifm.runtime.dispatch import ActionDispatcher
from trifm.ui.ops import UIOps


def make_ui(events: list[str] | None = None, prompt_text: str | None = "typed") -> UIOps:
    events = events if events is not None else []
    return UIOps(
        next_key=mock.Mock(side_effect=EOFError),
        prompt=mock.Mock(return_value=prompt_text),
        render=mock.Mock(),
        disable_tui_mode=lambda: events.append("disable"),
        enable_tui_mode=lambda: events.append("enable"),
        request_redraw=lambda: events.append("redraw"),
    )


class ActionDispatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "a.txt").write_text("a\n", encoding="utf-8")
        (self.root / "b").mkdir()
        (self.root / "b" / "inner.txt").write_text("inner\n", encoding="utf-8")
        (self.root / ".dot").write_text("d\n", encoding="utf-8")
        self.nav = Navigator(self.root)
        self.events: list[str] = []
        self.ui = make_ui(self.events)
        self.dispatcher = ActionDispatcher(self.nav, self.ui)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_movement_actions(self) -> None:
        self.assertEqual(self.dispatcher.perform(MoveDown()), 1)
        self.assertEqual(self.dispatcher.perform(MoveIn()), 0)
        self.assertEqual(self.nav.current_dir, self.root / "b")
        self.assertEqual(self.dispatcher.perform(MoveOut()), 1)
        self.assertEqual(self.dispatcher.perform(MoveUp()), 0)

    def test_quit_sets_exit_latch(self) -> None:
        self.assertIsNone(self.dispatcher.perform(Quit()))
        self.assertTrue(self.nav.is_exit())

    def test_mark_actions(self) -> None:
        self.assertEqual(self.dispatcher.perform(Mark()), 1)
        self.assertEqual(self.nav.marked, (self.root / "a.txt",))
        self.dispatcher.perform(Unmark())
        self.assertEqual(self.nav.marked, (self.root / "a.txt",))
        self.assertIsNone(self.dispatcher.perform(MarkAll()))
        self.assertEqual(len(self.nav.marked), 2)
        self.assertIsNone(self.dispatcher.perform(UnmarkAll()))
        self.assertEqual(self.nav.marked, ())

    def test_jump_action(self) -> None:
        self.assertEqual(self.dispatcher.perform(Jump(self.root / "b")), 0)
        self.assertEqual(self.nav.current_dir, self.root / "b")

    def test_toggle_filter_and_sort_report_focus_index(self) -> None:
        self.assertEqual(self.dispatcher.perform(ToggleFilter(FILTER_DOTFILES)), 1)
        self.assertIn(self.root / ".dot", self.nav.list_current())
        self.assertEqual(self.dispatcher.perform(SetSortOrder(SORT_LEXICAL_DESC)), 1)
        self.assertEqual(self.nav.list_current()[0], self.root / "b")

    def test_shell_command_runs_in_working_directory(self) -> None:
        with mock.patch("trifm.runtime.dispatch.run_command", return_value=0) as run:
            self.dispatcher.perform(ShellCommand("touch %f.bak"))

        run.assert_called_once_with(["touch", "a.txt.bak"], self.root)
        self.assertEqual(self.events, [])

    def test_shell_command_runs_once_per_mark(self) -> None:
        self.nav.mark_all()
        with mock.patch("trifm.runtime.dispatch.run_command", return_value=0) as run:
            self.dispatcher.perform(ShellCommand("rm %D/%F"))

        self.assertEqual(
            [call.args[0] for call in run.call_args_list],
            [["rm", f"{self.root}/a.txt"], ["rm", f"{self.root}/b"]],
        )

    def test_shell_command_with_unfilled_placeholder_runs_nothing(self) -> None:
        with mock.patch("trifm.runtime.dispatch.run_command") as run:
            self.assertIsNone(self.dispatcher.perform(ShellCommand("rm %F")))
        run.assert_not_called()

    def test_shell_command_refreshes_after_filesystem_change(self) -> None:
        def delete_focus(argv, cwd):
            (cwd / argv[1]).unlink()
            return 0

        with mock.patch("trifm.runtime.dispatch.run_command", side_effect=delete_focus):
            self.assertIsNone(self.dispatcher.perform(ShellCommand("rm %f")))

        self.assertIsNone(self.nav.focus)
        self.assertEqual(self.dispatcher.perform(MoveDown()), 0)

    def test_shell_command_prompts_for_input(self) -> None:
        with mock.patch("trifm.runtime.dispatch.run_command", return_value=0) as run:
            self.dispatcher.perform(ShellCommand("mkdir %i"))

        run.assert_called_once_with(["mkdir", "typed"], self.root)
        self.ui.prompt.assert_called_once()

    def test_terminal_command_suspends_tui_and_requests_redraw(self) -> None:
        def fake_run(argv, cwd, disable, enable):
            disable()
            self.events.append(f"run {' '.join(argv)}")
            enable()
            return 0

        with mock.patch("trifm.runtime.dispatch.run_interactive", side_effect=fake_run):
            self.dispatcher.perform(TerminalCommand("vi %a"))

        self.assertEqual(
            self.events,
            ["disable", f"run vi {self.root / 'a.txt'}", "enable", "redraw"],
        )

    def test_terminal_command_with_cancelled_input_does_nothing(self) -> None:
        dispatcher = ActionDispatcher(self.nav, make_ui(self.events, prompt_text=None))
        with mock.patch("trifm.runtime.dispatch.run_interactive") as run:
            self.assertIsNone(dispatcher.perform(TerminalCommand("vi %i")))
        run.assert_not_called()
        self.assertEqual(self.events, [])

    def test_every_action_type_has_a_handler(self) -> None:
        handled = set(self.dispatcher._handlers)
        self.assertTrue(set(ACTION_TYPES) <= handled)

    def test_unknown_action_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            self.dispatcher.perform(object())


if __name__ == "__main__":
    unittest.main()
