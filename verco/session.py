"""Main interactive loop for the terminal UI.

Holds raw mode for the whole session, probes the backend once, then reads
keys and hands them to the dispatcher until ctrl+c. Output is flushed once
per key so each action appears in a single screen update.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .backend.base import VersionControl
from .dispatcher import KeyDispatcher, SessionState
from .errors import BackendError, BackendUnavailableError
from .input import QUIT_KEY, key_press_from_token, read_key
from .prompt import LinePrompt, LineReader
from .render import format_header, format_help, format_outcome
from .screen import Screen
from .terminal import TerminalController
from .ui_theme import UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionOptions:
    repo_root: Path
    theme: UITheme
    explorer_command: str | None = None


def probe_backend_version(backend: VersionControl) -> str:
    """Return the backend's version text or raise ``BackendUnavailableError``."""
    try:
        return backend.version()
    except BackendError as exc:
        raise BackendUnavailableError(str(exc)) from exc


def run_session(
    backend: VersionControl,
    terminal: TerminalController,
    screen: Screen,
    options: SessionOptions,
    *,
    read_token: Callable[[], str] | None = None,
    line_reader: LineReader | None = None,
) -> None:
    """Run the interactive session until the quit key is pressed.

    Raises ``BackendUnavailableError`` before reading any key when the
    backend cannot report its version. Raw mode is released on every exit.
    """
    if read_token is None:
        stdin_fd = terminal.stdin_fd

        def read_token() -> str:
            return read_key(stdin_fd)

    state = SessionState(repository_name=str(options.repo_root))
    dispatcher = KeyDispatcher(
        state=state,
        backend=backend,
        screen=screen,
        prompt=LinePrompt(screen, options.theme, line_reader),
        read_key=read_token,
        theme=options.theme,
        repo_root=options.repo_root,
        explorer_command=options.explorer_command,
    )

    with terminal.raw_mode():
        try:
            screen.write(format_header(state.repository_name, screen.width(), options.theme))
            try:
                state.backend_version = probe_backend_version(backend)
            except BackendUnavailableError as exc:
                logger.error("backend version probe failed: %s", exc)
                screen.write(format_outcome(False, str(exc), options.theme))
                raise
            screen.write(format_help(state.backend_version, options.theme))
            screen.flush()
            logger.debug("session started in %s", options.repo_root)

            while True:
                token = read_token()
                if not token:
                    # stdin closed
                    break
                key = key_press_from_token(token)
                if key == QUIT_KEY:
                    break
                if key is not None:
                    dispatcher.dispatch(key)
                screen.flush()
        finally:
            screen.flush()
    logger.debug("session ended")
