"""Closed set of actions a key binding can resolve to.

Each action kind is its own frozen dataclass; ``Action`` is their union and
``ACTION_TYPES`` lists every kind so dispatch tables can be checked for
completeness.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class MoveIn:
    pass


@dataclass(frozen=True)
class MoveOut:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Mark:
    pass


@dataclass(frozen=True)
class Unmark:
    pass


@dataclass(frozen=True)
class MarkAll:
    pass


@dataclass(frozen=True)
class UnmarkAll:
    pass


@dataclass(frozen=True)
class Jump:
    """Browse a directory, or focus a file inside its parent."""

    path: Path


@dataclass(frozen=True)
class ToggleFilter:
    filter_name: str


@dataclass(frozen=True)
class SetSortOrder:
    sort_order: str


@dataclass(frozen=True)
class ShellCommand:
    """Command template run in the background with stdio detached."""

    template: str


@dataclass(frozen=True)
class TerminalCommand:
    """Command template run in the foreground with the TUI screen suspended."""

    template: str


Action = (
    MoveUp
    | MoveDown
    | MoveIn
    | MoveOut
    | Quit
    | Mark
    | Unmark
    | MarkAll
    | UnmarkAll
    | Jump
    | ToggleFilter
    | SetSortOrder
    | ShellCommand
    | TerminalCommand
)

ACTION_TYPES: tuple[type, ...] = (
    MoveUp,
    MoveDown,
    MoveIn,
    MoveOut,
    Quit,
    Mark,
    Unmark,
    MarkAll,
    UnmarkAll,
    Jump,
    ToggleFilter,
    SetSortOrder,
    ShellCommand,
    TerminalCommand,
)


__all__ = [
    "MoveUp",
    "MoveDown",
    "MoveIn",
    "MoveOut",
    "Quit",
    "Mark",
    "Unmark",
    "MarkAll",
    "UnmarkAll",
    "Jump",
    "ToggleFilter",
    "SetSortOrder",
    "ShellCommand",
    "TerminalCommand",
    "Action",
    "ACTION_TYPES",
]
