"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Printable characters come back as themselves and control bytes as
``CTRL_<x>``. Escape sequences map to named tokens such as ``UP``; an ESC
immediately followed by a character is an Alt chord, ``ALT_<x>``.
"""

from __future__ import annotations

import os
import select
from dataclasses import dataclass

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_NAMED_BYTES: dict[bytes, str] = {
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}


@dataclass(frozen=True)
class KeyPress:
    """A single character plus whether control was held."""

    char: str
    ctrl: bool = False


QUIT_KEY = KeyPress("c", ctrl=True)


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        return lead
    data = lead
    for _ in range(missing):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key and return its token, or ``""`` on timeout/EOF."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _NAMED_BYTES.get(ch)
    if named is not None:
        return named
    if b"\x01" <= ch <= b"\x1a":
        return f"CTRL_{chr(ord(ch) + 96).upper()}"

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        # ESC followed by a character is an Alt chord, never the bare character.
        if seq >= b" " and seq != b"\x7f":
            return "ALT_" + _read_utf8_tail(fd, seq).decode("utf-8", errors="replace")
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    return "ESC"


def key_press_from_token(token: str) -> KeyPress | None:
    """Map a key token to a ``KeyPress``; named non-character keys map to ``None``."""
    if token.startswith("CTRL_") and len(token) == 6:
        return KeyPress(token[-1].lower(), ctrl=True)
    if len(token) == 1:
        return KeyPress(token)
    return None
