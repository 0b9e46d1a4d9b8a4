"""JSON configuration: key bindings and display preferences.

The file must exist and decode to an object with a ``keys`` table; anything
else raises ``ConfigError`` since there is no built-in fallback keymap.
Individual bad entries are skipped and reported through ``warnings``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..actions import (
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
from ..file_model import FILTER_DOTFILES, SORT_LEXICAL_ASC, SORT_LEXICAL_DESC, SORT_NEWEST, SORT_ORDERS
from ..input import KeyBinding, KeySpecError, is_digit_key, parse_key_expression

logger = logging.getLogger(__name__)

APP_NAME = "trifm"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

_HOME_TOKENS = frozenset({"~", "$HOME"})

BUILTIN_ACTIONS: dict[str, Action] = {
    "up": MoveUp(),
    "down": MoveDown(),
    "in": MoveIn(),
    "out": MoveOut(),
    "quit": Quit(),
    "mark": Mark(),
    "unmark": Unmark(),
    "markall": MarkAll(),
    "unmarkall": UnmarkAll(),
    "toggledotfiles": ToggleFilter(FILTER_DOTFILES),
    "sortbyinc": SetSortOrder(SORT_LEXICAL_ASC),
    "sortbydec": SetSortOrder(SORT_LEXICAL_DESC),
    "sortbynew": SetSortOrder(SORT_NEWEST),
}

DEFAULT_CONFIG: dict[str, object] = {
    "keys": {
        "j": "down",
        "k": "up",
        "l": "in",
        "h": "out",
        "down": "down",
        "up": "up",
        "right": "in",
        "left": "out",
        "q": "quit",
        " ": "mark",
        "u": "unmark",
        "A": "markall",
        "U": "unmarkall",
        ".": "toggledotfiles",
        "s": "sortbyinc",
        "S": "sortbydec",
        "n": "sortbynew",
        "e": {"shell": "vi %a", "interactive": True},
        "!": {"shell": "sh", "interactive": True},
        "~": {"jump": "~"},
    },
    "parent_panes": 1,
    "style": "monokai",
    "theme": "default",
    "show_hidden": False,
    "sort": SORT_LEXICAL_ASC,
}


class ConfigError(Exception):
    """Configuration is missing or cannot be used at all."""


@dataclass
class AppConfig:
    bindings: tuple[KeyBinding, ...] = ()
    parent_panes: int = 1
    style: str = "monokai"
    theme: str | None = None
    show_hidden: bool = False
    sort_order: str = SORT_LEXICAL_ASC
    warnings: list[str] = field(default_factory=list)


def resolve_jump_path(raw: str, home: str | None = None) -> Path:
    """Expand ``~`` and ``$HOME`` path components using the ``HOME`` variable."""
    if home is None:
        home = os.environ.get("HOME", "")
    head, *rest = raw.strip().split("/")
    if home and head in _HOME_TOKENS:
        path = Path(home)
    else:
        path = Path(head or "/")
    for part in rest:
        if home and part in _HOME_TOKENS:
            part = home.strip("/")
        path = path / part
    return path


def parse_action_value(raw: object, home: str | None = None) -> Action:
    """Turn one configured binding value into an action.

    Strings name built-in actions. Objects carry either ``shell`` (with an
    optional ``interactive`` flag) or ``jump``.
    """
    if isinstance(raw, str):
        action = BUILTIN_ACTIONS.get(raw.strip().lower())
        if action is None:
            raise ValueError(f"unknown action {raw!r}")
        return action
    if isinstance(raw, dict):
        if "shell" in raw:
            template = raw.get("shell")
            if not isinstance(template, str) or not template.strip():
                raise ValueError("shell command must be a non-empty string")
            interactive = raw.get("interactive", False)
            if not isinstance(interactive, bool):
                raise ValueError("interactive must be true or false")
            if interactive:
                return TerminalCommand(template)
            return ShellCommand(template)
        if "jump" in raw:
            target = raw.get("jump")
            if not isinstance(target, str) or not target.strip():
                raise ValueError("jump target must be a non-empty string")
            return Jump(resolve_jump_path(target, home))
    raise ValueError(f"unsupported binding value {raw!r}")


def parse_bindings(raw_keys: dict[str, object], home: str | None = None) -> tuple[list[KeyBinding], list[str]]:
    """Parse the ``keys`` table, returning bindings and per-entry warnings."""
    bindings: list[KeyBinding] = []
    warnings: list[str] = []
    for raw_key, raw_value in raw_keys.items():
        try:
            key = parse_key_expression(raw_key)
        except KeySpecError as exc:
            warnings.append(f"key {raw_key!r} ignored ({exc})")
            continue
        if is_digit_key(key):
            warnings.append(f"key {raw_key!r} ignored (digits are repeat counts)")
            continue
        try:
            action = parse_action_value(raw_value, home)
        except ValueError as exc:
            warnings.append(f"key {raw_key!r} ignored ({exc})")
            continue
        bindings.append(KeyBinding(key, action))
    for warning in warnings:
        logger.warning("config: %s", warning)
    return bindings, warnings


def _coerce_parent_panes(value: object, warnings: list[str]) -> int:
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 4:
        warnings.append("parent_panes ignored (expected an integer from 0 to 4)")
        return 1
    return value


def _coerce_optional_str(data: dict[str, object], key: str, warnings: list[str]) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        warnings.append(f"{key} ignored (expected a non-empty string)")
        return None
    return value.strip()


def parse_config(data: dict[str, object], home: str | None = None) -> AppConfig:
    """Validate decoded JSON and build an ``AppConfig``."""
    raw_keys = data.get("keys")
    if not isinstance(raw_keys, dict):
        raise ConfigError("config has no \"keys\" object")
    bindings, warnings = parse_bindings(raw_keys, home)

    parent_panes = _coerce_parent_panes(data.get("parent_panes"), warnings)
    style = _coerce_optional_str(data, "style", warnings) or "monokai"
    theme = _coerce_optional_str(data, "theme", warnings)

    show_hidden = data.get("show_hidden", False)
    if not isinstance(show_hidden, bool):
        warnings.append("show_hidden ignored (expected true or false)")
        show_hidden = False

    sort_order = _coerce_optional_str(data, "sort", warnings) or SORT_LEXICAL_ASC
    if sort_order not in SORT_ORDERS:
        warnings.append(f"sort ignored (expected one of {', '.join(SORT_ORDERS)})")
        sort_order = SORT_LEXICAL_ASC

    return AppConfig(
        bindings=tuple(bindings),
        parent_panes=parent_panes,
        style=style,
        theme=theme,
        show_hidden=show_hidden,
        sort_order=sort_order,
        warnings=warnings,
    )


def load_config(path: Path | None = None) -> dict[str, object]:
    """Read and decode the JSON config object at ``path``."""
    config_path = path if path is not None else CONFIG_PATH
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(
            f"config file not found: {config_path} (create one with --init-config)"
        ) from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config file {config_path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"cannot parse config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must contain a JSON object")
    return data


def load_app_config(path: Path | None = None, home: str | None = None) -> AppConfig:
    """Load, validate, and return the application config."""
    return parse_config(load_config(path), home)


def write_default_config(path: Path | None = None) -> Path:
    """Write ``DEFAULT_CONFIG`` to ``path`` without overwriting an existing file."""
    config_path = path if path is not None else CONFIG_PATH
    if config_path.exists():
        raise ConfigError(f"config file already exists: {config_path}")
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot write config file {config_path}: {exc}") from exc
    return config_path


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH",
    "BUILTIN_ACTIONS",
    "DEFAULT_CONFIG",
    "ConfigError",
    "AppConfig",
    "resolve_jump_path",
    "parse_action_value",
    "parse_bindings",
    "parse_config",
    "load_config",
    "load_app_config",
    "write_default_config",
]
