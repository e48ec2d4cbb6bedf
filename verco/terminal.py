"""Terminal control helpers for the interactive session.

Owns the raw-mode lifecycle. ``raw_mode`` restores the saved tty state on
every exit path, and turns ``SIGTERM``/``SIGHUP`` into ``SystemExit`` while
it is active so those exits unwind through it as well.
"""

from __future__ import annotations

import contextlib
import os
import signal
import termios
import tty

_RESTORE_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig is not None
)


def _exit_on_signal(signum, _frame) -> None:
    raise SystemExit(128 + signum)


class TerminalController:
    """Manage raw-mode transitions for one terminal session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._raw = False

    @property
    def is_raw(self) -> bool:
        return self._raw

    def enable_raw_mode(self) -> None:
        """Switch stdin to raw mode and show the cursor."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?25h")
        self._raw = True

    def disable_raw_mode(self) -> None:
        """Restore the tty state captured at construction."""
        # Reset colours and move to a fresh line so the shell prompt starts clean.
        os.write(self.stdout_fd, b"\x1b[0m\r\n")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._raw = False

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that holds raw mode for the duration of the block."""
        previous_handlers = {sig: signal.signal(sig, _exit_on_signal) for sig in _RESTORE_SIGNALS}
        try:
            self.enable_raw_mode()
            yield self
        finally:
            try:
                if self._raw:
                    self.disable_raw_mode()
            finally:
                for sig, handler in previous_handlers.items():
                    signal.signal(sig, handler)
