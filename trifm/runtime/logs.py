"""File-based logging setup.

The terminal belongs to the TUI, so records only ever go to a log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_path: Path | None = None, debug: bool = False) -> Path | None:
    """Route ``trifm`` log records to ``log_path`` and return the path used.

    Returns ``None`` when the log file cannot be opened; records are then
    discarded instead of reaching the terminal.
    """
    target = log_path if log_path is not None else DEFAULT_LOG_PATH
    level = logging.DEBUG if debug else logging.WARNING
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
        target = None
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
    return target


__all__ = ["DEFAULT_LOG_PATH", "LOG_FORMAT", "configure_logging"]
