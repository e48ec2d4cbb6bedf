"""Stateless formatting for every banner the session draws.

Each function returns the text to write; none of them touch the terminal
or the backend. Cancel and error banners are separate functions because
they mean different things even though both stop an action.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import __version__
from .actions import HELP_GROUPS, key_label
from .backend.base import Entry
from .ui_theme import UITheme

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[1;1H"

SELECTION_HINT = "j/k move  space toggle  enter confirm  esc cancel"


def format_header(repository_name: str, width: int, theme: UITheme) -> str:
    """Clear the screen and draw the full-width title bar."""
    out = [CLEAR_SCREEN, CURSOR_HOME]
    if theme.header:
        out.append(theme.header)
        out.append(" " * max(1, width))
        out.append(CURSOR_HOME)
    out.append(f"Verco @ {repository_name}")
    out.append(theme.reset)
    out.append("\n\n")
    return "".join(out)


def format_action(repository_name: str, action_name: str, width: int, theme: UITheme) -> str:
    return format_header(repository_name, width, theme) + f"{theme.action}{action_name}{theme.reset}\n\n"


def format_outcome(ok: bool, text: str, theme: UITheme) -> str:
    """Backend output verbatim followed by a ``done`` or ``error`` marker."""
    if ok:
        return f"{text}\n\n{theme.done}done{theme.reset}\n\n"
    return f"{text}\n\n{theme.error}error{theme.reset}\n\n"


def format_done(theme: UITheme) -> str:
    return f"{theme.done}done{theme.reset}\n\n"


def format_cancel(theme: UITheme) -> str:
    return f"\n\n{theme.cancel}canceled{theme.reset}\n\n"


def format_input_error(error: object, theme: UITheme) -> str:
    return f"{theme.error}error {error}{theme.reset}\n\n"


def format_prompt(prompt: str, theme: UITheme) -> str:
    return f"{theme.entry}{prompt}{theme.reset}\n"


def format_selection(entries: Sequence[Entry], current: int, theme: UITheme) -> str:
    """Entry list with inclusion marks; the current row is shown reversed."""
    if not entries:
        return f"{theme.dim}nothing to commit{theme.reset}\n\n{theme.dim}{SELECTION_HINT}{theme.reset}\n"
    lines: list[str] = []
    for idx, entry in enumerate(entries):
        mark = "[x]" if entry.included else "[ ]"
        status = f"{entry.status:>2} " if entry.status else ""
        row = f"{mark} {status}{entry.path}"
        if idx == current:
            lines.append(f"{theme.reverse}{theme.entry}> {row}{theme.reset}")
        else:
            lines.append(f"  {row}")
    lines.append("")
    lines.append(f"{theme.dim}{SELECTION_HINT}{theme.reset}")
    return "\n".join(lines) + "\n"


def help_rows() -> list[tuple[str, str] | None]:
    """Every binding as ``(key label, help label)``; ``None`` marks a group break."""
    rows: list[tuple[str, str] | None] = []
    for group in HELP_GROUPS:
        if rows:
            rows.append(None)
        for action in group:
            rows.append((key_label(action.key), action.help_label))
    return rows


def format_help(backend_version: str, theme: UITheme) -> str:
    out = [f"Verco {__version__}\n\n"]
    if backend_version:
        out.append(f"{backend_version}\n\n")
    out.append("press a key and perform an action\n\n")
    for row in help_rows():
        if row is None:
            out.append("\n")
            continue
        shortcut, label = row
        out.append(f"\t{theme.entry}{shortcut}{theme.reset}\t\t{label}\n")
    out.append("\n")
    out.append(f"\t{theme.entry}ctrl+c{theme.reset}\t\tquit\n")
    return "".join(out)
