"""Shell-command templating against navigator state, plus naive execution.

Placeholders, resolved in this order and substituted in one pass over the
template:

``%f`` / ``%a``
    focused entry's file name / absolute path
``%d``
    working directory
``%i``
    one line of text read from the user
``%F`` / ``%D``
    file name / parent directory of each marked entry; the template is
    instantiated once per mark

Expansion fails closed: when a placeholder has no data, no command is
produced at all. Commands are split on whitespace only, with no quoting or
escaping support.
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Callable
from pathlib import Path

from .navigator import Navigator

logger = logging.getLogger(__name__)

INPUT_PROMPT_LABEL = "input: "
_PLACEHOLDER_RE = re.compile(r"%[faidFD]")
_FOCUS_PLACEHOLDERS = frozenset({"%f", "%a", "%d"})
_MARK_PLACEHOLDERS = frozenset({"%F", "%D"})


def _substitute(template: str, values: dict[str, str]) -> str:
    """Replace every placeholder of ``template`` in a single scan.

    Substituted text is never scanned again, so a ``%`` sequence inside a
    file name or typed input stays literal.
    """
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(0)], template)


def expand_command(
    template: str,
    navigator: Navigator,
    read_input: Callable[[str], str | None],
) -> list[str]:
    """Expand ``template`` into zero or more command strings."""
    placeholders = set(_PLACEHOLDER_RE.findall(template))
    focus = navigator.focus
    if focus is None and placeholders & _FOCUS_PLACEHOLDERS:
        logger.debug("no focused entry for %r", template)
        return []

    values = {"%d": str(navigator.current_dir)}
    if focus is not None:
        values["%f"] = focus.name
        values["%a"] = str(focus)

    if "%i" in placeholders:
        text = read_input(INPUT_PROMPT_LABEL)
        if text is None:
            logger.debug("input cancelled for %r", template)
            return []
        values["%i"] = text

    if not placeholders & _MARK_PLACEHOLDERS:
        return [_substitute(template, values)]

    marked = navigator.marked
    if not marked:
        logger.debug("no marked entries for %r", template)
        return []
    return [
        _substitute(template, {**values, "%F": path.name, "%D": str(path.parent)})
        for path in marked
    ]


def split_command(command: str) -> list[str]:
    """Split ``command`` into program and arguments on runs of whitespace."""
    return command.split()


def run_command(argv: list[str], cwd: Path) -> int | None:
    """Run ``argv`` detached from the terminal and wait for it.

    Returns the exit status, or ``None`` when the program could not start.
    """
    if not argv:
        return None
    try:
        completed = subprocess.run(
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        logger.warning("failed to run %s: %s", argv[0], exc)
        return None
    if completed.returncode != 0:
        logger.warning("%s exited with status %d", argv[0], completed.returncode)
    return completed.returncode


def run_interactive(
    argv: list[str],
    cwd: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> int | None:
    """Run ``argv`` on the real terminal while the TUI screen is suspended."""
    if not argv:
        return None
    disable_tui_mode()
    try:
        completed = subprocess.run(argv, cwd=cwd, check=False)
    except OSError as exc:
        logger.warning("failed to launch %s: %s", argv[0], exc)
        return None
    finally:
        enable_tui_mode()
    if completed.returncode != 0:
        logger.warning("%s exited with status %d", argv[0], completed.returncode)
    return completed.returncode


__all__ = [
    "INPUT_PROMPT_LABEL",
    "expand_command",
    "split_command",
    "run_command",
    "run_interactive",
]
