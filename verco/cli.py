"""Command-line front door for verco.

Parses CLI options, finds the enclosing repository and its backend, sets up
logging, then hands the terminal to the interactive session. ``VercoError``
failures become a one-line ``SystemExit`` message.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .backend import BACKENDS, create_backend, find_repository
from .config import (
    load_explorer_command,
    load_preferred_backend,
    load_theme_name,
    save_preferred_backend,
    save_theme_name,
)
from .errors import VercoError
from .logs import configure_logging
from .screen import Screen
from .session import SessionOptions, run_session
from .terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verco",
        description="Run version-control actions with single keystrokes.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Path inside the repository. Defaults to cwd.")
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default=None,
        help="Force a backend instead of detecting it from the repository.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember --theme and --backend in the user config.",
    )
    parser.add_argument("--debug", action="store_true", help="Write debug records to the log file.")
    parser.add_argument("--version", action="version", version=f"verco {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(debug=args.debug)

    if args.save_defaults:
        if args.theme:
            save_theme_name(args.theme)
        if args.backend:
            save_preferred_backend(args.backend)

    start = Path(args.path) if args.path is not None else Path.cwd()
    if not start.exists():
        raise SystemExit(f"Path not found: {start}")
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("verco needs an interactive terminal.")

    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)

    try:
        repo_root, detected = find_repository(start, preferred=args.backend or load_preferred_backend())
        backend = create_backend(args.backend or detected, repo_root)
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
        run_session(
            backend,
            terminal,
            Screen(sys.stdout.fileno()),
            SessionOptions(repo_root=repo_root, theme=theme, explorer_command=load_explorer_command()),
        )
    except VercoError as exc:
        raise SystemExit(f"verco: {exc}") from exc


if __name__ == "__main__":
    main()
