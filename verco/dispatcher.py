"""Key dispatch: turn one key press into one version-control action.

The dispatcher looks the key up in the action table, draws the action
banner, collects any prompt text or file selection, calls the backend and
renders the outcome. Cancelled prompts and aborted selections stop before
the backend is reached.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .actions import COMMIT_MESSAGE_PROMPT, Action, lookup_action
from .backend.base import Outcome, VersionControl
from .errors import BackendError
from .explorer import open_explorer
from .input import KeyPress
from .prompt import LinePrompt, PromptResult, PromptStatus
from .render import (
    format_action,
    format_cancel,
    format_done,
    format_help,
    format_outcome,
)
from .screen import Screen
from .selection import SelectionResult, run_selection
from .ui_theme import UITheme

logger = logging.getLogger(__name__)


class Mode(Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    IN_SELECTION = "in_selection"


@dataclass
class SessionState:
    repository_name: str
    mode: Mode = Mode.IDLE
    last_action: str = ""
    backend_version: str = ""


def call_backend(operation: Callable[..., str], *args) -> Outcome:
    """Invoke one backend operation and normalize it into an ``Outcome``."""
    try:
        return Outcome.success(operation(*args))
    except BackendError as exc:
        return Outcome.failure(str(exc))


class KeyDispatcher:
    def __init__(
        self,
        state: SessionState,
        backend: VersionControl,
        screen: Screen,
        prompt: LinePrompt,
        read_key: Callable[[], str],
        theme: UITheme,
        repo_root: Path,
        explorer_command: str | None = None,
        launch_explorer: Callable[[Path, str | None], object] = open_explorer,
    ) -> None:
        self.state = state
        self.backend = backend
        self.screen = screen
        self.prompt = prompt
        self.read_key = read_key
        self.theme = theme
        self.repo_root = repo_root
        self.explorer_command = explorer_command
        self.launch_explorer = launch_explorer

    def dispatch(self, key: KeyPress) -> bool:
        """Run the action bound to ``key``; return ``False`` for unbound keys."""
        action = lookup_action(key)
        if action is None:
            return False
        logger.debug("dispatching %s", action.name)
        self.show_action(action.display_name)

        if action is Action.HELP:
            self.show_help()
        elif action is Action.EXPLORER:
            self.launch_explorer(self.repo_root, self.explorer_command)
            self.screen.write(format_done(self.theme))
        elif action is Action.COMMIT_SELECTED:
            self._commit_selected()
        elif action.requires_prompt:
            result = self._ask(action.prompt)
            if result.has_text:
                self.show_outcome(call_backend(getattr(self.backend, action.operation), result.text))
        else:
            self.show_outcome(call_backend(getattr(self.backend, action.operation)))
        return True

    def _ask(self, prompt: str) -> PromptResult:
        self.state.mode = Mode.AWAITING_INPUT
        try:
            result = self.prompt.ask(prompt)
        finally:
            self.state.mode = Mode.IDLE
        if result.status is PromptStatus.CANCELLED:
            self.show_cancel()
        return result

    def _commit_selected(self) -> None:
        try:
            entries = self.backend.get_files_to_commit()
        except BackendError as exc:
            self.show_outcome(Outcome.failure(str(exc)))
            return

        self.state.mode = Mode.IN_SELECTION
        try:
            selection = run_selection(
                entries,
                self.read_key,
                self.screen,
                self.theme,
                lambda: self.show_action(Action.COMMIT_SELECTED.display_name),
            )
        finally:
            self.state.mode = Mode.IDLE
        if selection is SelectionResult.ABORTED:
            self.show_cancel()
            return

        self.screen.write("\n\n")
        result = self._ask(COMMIT_MESSAGE_PROMPT)
        if result.has_text:
            self.show_outcome(call_backend(self.backend.commit_selected, result.text, entries))

    def show_action(self, action_name: str) -> None:
        self.state.last_action = action_name
        self.screen.write(
            format_action(self.state.repository_name, action_name, self.screen.width(), self.theme)
        )

    def show_help(self) -> None:
        self.screen.write(format_help(self.state.backend_version, self.theme))

    def show_outcome(self, outcome: Outcome) -> None:
        self.screen.write(format_outcome(outcome.ok, outcome.text, self.theme))

    def show_cancel(self) -> None:
        self.screen.write(format_cancel(self.theme))
