"""Regression tests for raw-key decoding.

Covers control-byte tokens, arrow sequences, ESC timing and the mapping
from tokens to ``(character, ctrl)`` key presses.
"""

import os
import time
import unittest

from verco import input as input_mod
from verco.input import QUIT_KEY, KeyPress, key_press_from_token


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_printable_and_control_bytes(self) -> None:
        self.assertEqual(
            self._read_all(b"sD\x02\x03\x12\r\x7f", 7),
            ["s", "D", "CTRL_B", "CTRL_C", "CTRL_R", "ENTER", "BACKSPACE"],
        )

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B\x1bOA", 3), ["UP", "DOWN", "UP"])

    def test_escape_then_later_printable_key_stay_separate(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            first = input_mod.read_key(read_fd, timeout_ms=20)
            os.write(write_fd, b"s")
            second = input_mod.read_key(read_fd, timeout_ms=20)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual([first, second], ["ESC", "s"])

    def test_escape_followed_by_character_is_alt_chord(self) -> None:
        self.assertEqual(self._read_all(b"\x1bP\x1bu", 3), ["ALT_P", "ALT_u", ""])

    def test_escape_before_control_byte_keeps_both_keys(self) -> None:
        self.assertEqual(self._read_all(b"\x1b\x1b", 2), ["ESC", "ESC"])

    def test_multibyte_character_is_decoded_as_one_key(self) -> None:
        self.assertEqual(self._read_all("é".encode("utf-8"), 1), ["é"])

    def test_timeout_and_closed_input_return_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=10), "")
            os.close(write_fd)
            self.assertEqual(input_mod.read_key(read_fd), "")
        finally:
            os.close(read_fd)


class KeyPressTests(unittest.TestCase):
    def test_tokens_map_to_character_and_modifier(self) -> None:
        self.assertEqual(key_press_from_token("b"), KeyPress("b"))
        self.assertEqual(key_press_from_token("B"), KeyPress("B"))
        self.assertEqual(key_press_from_token("CTRL_B"), KeyPress("b", ctrl=True))
        self.assertEqual(key_press_from_token("CTRL_C"), QUIT_KEY)

    def test_named_keys_are_not_key_presses(self) -> None:
        for token in ("UP", "ESC", "ENTER", "TAB", "ALT_P", "ALT_u", ""):
            self.assertIsNone(key_press_from_token(token))

    def test_plain_and_ctrl_variants_differ(self) -> None:
        self.assertNotEqual(KeyPress("r"), KeyPress("r", ctrl=True))


if __name__ == "__main__":
    unittest.main()
