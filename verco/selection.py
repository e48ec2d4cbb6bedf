"""Multi-select list for choosing which files a commit includes.

``SelectionList`` is the pure state machine (current row, wraparound,
toggling). ``run_selection`` drives it from key tokens and redraws the list
after every key until the user confirms or aborts.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from .backend.base import Entry
from .render import format_selection
from .screen import Screen
from .ui_theme import UITheme


class SelectionResult(Enum):
    ACTIVE = "active"
    CONFIRMED = "confirmed"
    ABORTED = "aborted"


_NEXT_KEYS = frozenset({"j", "DOWN", "CTRL_N"})
_PREVIOUS_KEYS = frozenset({"k", "UP", "CTRL_P"})
_TOGGLE_KEYS = frozenset({" ", "TAB"})
_CONFIRM_KEYS = frozenset({"ENTER"})
_ABORT_KEYS = frozenset({"ESC", "q", "CTRL_C", "CTRL_D"})


class SelectionList:
    """Navigation and inclusion state over a fixed sequence of entries.

    Entries are never added, removed or reordered; only ``included`` changes.
    """

    def __init__(self, entries: Sequence[Entry]) -> None:
        self.entries = entries
        self.current = 0
        self.result = SelectionResult.ACTIVE

    def move(self, delta: int) -> None:
        if not self.entries:
            return
        self.current = (self.current + delta) % len(self.entries)

    def toggle_current(self) -> None:
        if not self.entries:
            return
        entry = self.entries[self.current]
        entry.included = not entry.included

    def handle_key(self, key: str) -> SelectionResult:
        if self.result is not SelectionResult.ACTIVE:
            return self.result
        if key in _NEXT_KEYS:
            self.move(1)
        elif key in _PREVIOUS_KEYS:
            self.move(-1)
        elif key in _TOGGLE_KEYS:
            self.toggle_current()
        elif key in _CONFIRM_KEYS:
            self.result = SelectionResult.CONFIRMED
        elif key in _ABORT_KEYS:
            self.result = SelectionResult.ABORTED
        return self.result

    def included_entries(self) -> list[Entry]:
        return [entry for entry in self.entries if entry.included]


def run_selection(
    entries: Sequence[Entry],
    read_key: Callable[[], str],
    screen: Screen,
    theme: UITheme,
    draw_banner: Callable[[], None],
) -> SelectionResult:
    """Run the list until confirmed or aborted and return which exit was taken.

    An empty key token means input closed, which aborts.
    """
    selection = SelectionList(entries)
    while True:
        draw_banner()
        screen.write(format_selection(selection.entries, selection.current, theme))
        screen.flush()
        key = read_key()
        if not key:
            return SelectionResult.ABORTED
        result = selection.handle_key(key)
        if result is not SelectionResult.ACTIVE:
            return result
