"""Command-line front door for trifm.

Parses CLI options, sets up file logging, and loads the key configuration.
Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import run_browser
from .runtime.config import DEFAULT_CONFIG_PATH, ConfigError, load_app_config, write_default_config
from .runtime.logs import DEFAULT_LOG_PATH, configure_logging
from .ui.theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories in three panes and run shell commands on files."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory or file to open. Defaults to $HOME.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to the JSON config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Write log records here (default: {DEFAULT_LOG_PATH}).",
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the default config file and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    Configuration problems and a missing start path end the process with a
    message; a closed stdin ends it with status 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, debug=args.debug)

    if args.init_config:
        try:
            written = write_default_config(args.config)
        except ConfigError as exc:
            raise SystemExit(str(exc)) from exc
        sys.stdout.write(f"Wrote {written}\n")
        return

    try:
        config = load_app_config(args.config)
    except ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc

    start_path = None
    if args.path is not None:
        start_path = Path(args.path).expanduser().absolute()
        if not start_path.exists():
            raise SystemExit(f"Path not found: {start_path}")

    try:
        run_browser(config, start_path, args.style, args.theme, args.no_color)
    except EOFError as exc:
        logger.error("input closed: %s", exc)
        sys.stderr.write("trifm: input closed\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
