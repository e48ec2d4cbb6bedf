"""Single-line text prompt used by actions that need an argument.

Reading is delegated to a ``prompt_toolkit`` session whose history lasts for
the whole terminal session. Ctrl+C and Ctrl+D cancel; any other input error
is reported on screen and treated as "no input".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .render import format_input_error, format_prompt
from .screen import Screen
from .ui_theme import UITheme

logger = logging.getLogger(__name__)


class PromptStatus(Enum):
    TEXT = "text"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class PromptResult:
    status: PromptStatus
    text: str = ""

    @property
    def has_text(self) -> bool:
        return self.status is PromptStatus.TEXT


class LineReader(Protocol):
    def prompt(self, message: str = "") -> str: ...


def _default_reader() -> LineReader:
    from prompt_toolkit import PromptSession
    from prompt_toolkit.history import InMemoryHistory

    return PromptSession(history=InMemoryHistory())


class LinePrompt:
    """Collect one line of free text; empty input is valid input."""

    def __init__(self, screen: Screen, theme: UITheme, reader: LineReader | None = None) -> None:
        self.screen = screen
        self.theme = theme
        self._reader = reader

    @property
    def reader(self) -> LineReader:
        if self._reader is None:
            self._reader = _default_reader()
        return self._reader

    def ask(self, prompt: str) -> PromptResult:
        self.screen.write(format_prompt(prompt, self.theme))
        self.screen.flush()
        try:
            line = self.reader.prompt("")
        except (KeyboardInterrupt, EOFError):
            return PromptResult(PromptStatus.CANCELLED)
        except Exception as exc:
            logger.warning("line prompt failed: %r", exc)
            self.screen.write(format_input_error(repr(exc), self.theme))
            return PromptResult(PromptStatus.FAILED)
        return PromptResult(PromptStatus.TEXT, line)
