"""Frame building tests: entry styles, previews, and status text."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from trifm.file_model import FILTER_DOTFILES
from trifm.navigator import Navigator
from trifm.panes import (
    STYLE_ANCESTOR,
    STYLE_DIRECTORY,
    STYLE_DOTFILE,
    STYLE_FILE,
    STYLE_MARKED,
    DirListing,
    NoContent,
    TextContent,
    build_frame,
    build_status,
    entry_style,
    human_size,
    read_preview_text,
)


class FrameTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.work = self.root / "work"
        self.work.mkdir()
        (self.work / "a.py").write_text("print('hi')\n", encoding="utf-8")
        (self.work / "blob.bin").write_bytes(b"\x00\x01\x02")
        (self.work / "dir").mkdir()
        (self.work / "dir" / "x.txt").write_text("x\n", encoding="utf-8")
        (self.work / ".env").write_text("A=1\n", encoding="utf-8")
        self.nav = Navigator(self.work, filters=())

    def tearDown(self) -> None:
        self._tmp.cleanup()


class EntryStyleTests(FrameTestCase):
    def test_style_precedence(self) -> None:
        self.nav.mark_all()

        self.assertEqual(entry_style(self.nav, self.root), STYLE_ANCESTOR)
        self.assertEqual(entry_style(self.nav, self.work), STYLE_ANCESTOR)
        self.assertEqual(entry_style(self.nav, self.work / ".env"), STYLE_MARKED)

        self.nav.unmark_all()
        self.assertEqual(entry_style(self.nav, self.work / ".env"), STYLE_DOTFILE)
        self.assertEqual(entry_style(self.nav, self.work / "dir"), STYLE_DIRECTORY)
        self.assertEqual(entry_style(self.nav, self.work / "a.py"), STYLE_FILE)


class PreviewTests(FrameTestCase):
    def test_text_file_preview_carries_path(self) -> None:
        self.nav.jump_to(self.work / "a.py")

        frame = build_frame(self.nav)

        self.assertEqual(frame.preview, TextContent("print('hi')\n", self.work / "a.py"))

    def test_binary_file_has_no_preview(self) -> None:
        self.nav.jump_to(self.work / "blob.bin")

        self.assertEqual(build_frame(self.nav).preview, NoContent())

    def test_directory_preview_lists_children(self) -> None:
        self.nav.jump_to(self.work / "dir" / "x.txt")
        self.nav.move_out()

        preview = build_frame(self.nav).preview

        self.assertEqual(preview, DirListing(((self.work / "dir" / "x.txt", STYLE_FILE),)))

    def test_preview_text_is_truncated(self) -> None:
        target = self.work / "big.txt"
        target.write_text("x" * 100, encoding="utf-8")

        self.assertEqual(read_preview_text(target, max_bytes=10), "x" * 10)

    def test_latin1_fallback(self) -> None:
        target = self.work / "latin.txt"
        target.write_bytes("café".encode("latin-1"))

        self.assertEqual(read_preview_text(target), "café")


class FrameLayoutTests(FrameTestCase):
    def test_parents_are_outermost_first(self) -> None:
        frame = build_frame(self.nav, parent_panes=2)

        self.assertEqual(len(frame.parents), 2)
        direct_parent = frame.parents[-1]
        self.assertIn((self.work, STYLE_ANCESTOR), direct_parent.rows)
        outer = frame.parents[0]
        self.assertIn((self.root, STYLE_ANCESTOR), outer.rows)

    def test_zero_parent_panes(self) -> None:
        self.assertEqual(build_frame(self.nav, parent_panes=0).parents, ())

    def test_selected_tracks_focus(self) -> None:
        self.nav.move_down()

        frame = build_frame(self.nav)

        self.assertEqual(frame.selected, 1)
        self.assertEqual(len(frame.current.rows), 4)


class StatusTests(FrameTestCase):
    def test_status_summarizes_state(self) -> None:
        self.nav.jump_to(self.work / "a.py")
        self.nav.mark_all()

        status = build_status(self.nav, pending_count=4, message="hello")

        self.assertIn(str(self.work), status)
        self.assertIn("12B", status)
        self.assertIn("4 marked", status)
        self.assertIn("sort:a-z", status)
        self.assertIn("hidden:shown", status)
        self.assertIn("count:4", status)
        self.assertTrue(status.endswith("hello"))

    def test_hidden_marker_absent_when_filter_active(self) -> None:
        self.nav.toggle_filter(FILTER_DOTFILES)

        self.assertNotIn("hidden:shown", build_status(self.nav))

    def test_human_size(self) -> None:
        self.assertEqual(human_size(0), "0B")
        self.assertEqual(human_size(1536), "1.5K")
        self.assertEqual(human_size(20 * 1024 * 1024), "20M")


if __name__ == "__main__":
    unittest.main()
