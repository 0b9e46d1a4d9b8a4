"""Terminal presentation layer.

``UIOps`` is the narrow interface the runtime depends on; ``TerminalUI`` is
the terminal implementation built from themes, ANSI helpers, and Pygments
highlighting.
"""

from __future__ import annotations

from .ops import UIOps
from .terminal_ui import TerminalUI
from .theme import UITheme, available_theme_names, resolve_theme

__all__ = ["UIOps", "TerminalUI", "UITheme", "available_theme_names", "resolve_theme"]
