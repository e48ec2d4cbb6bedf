"""Buffered screen writer.

Everything the session draws goes through ``Screen.write`` and reaches the
terminal only on ``flush``. Raw mode disables output post-processing, so
line feeds are expanded to CR LF on the way out.
"""

from __future__ import annotations

import os
import re
import shutil

_BARE_LF_RE = re.compile(r"(?<!\r)\n")


class Screen:
    def __init__(self, stdout_fd: int) -> None:
        self.stdout_fd = stdout_fd
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def pending(self) -> str:
        """Return buffered text that has not been flushed yet."""
        return "".join(self._chunks)

    def flush(self) -> None:
        if not self._chunks:
            return
        payload = _BARE_LF_RE.sub("\r\n", "".join(self._chunks))
        self._chunks.clear()
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    def width(self) -> int:
        return max(1, shutil.get_terminal_size((80, 24)).columns)
