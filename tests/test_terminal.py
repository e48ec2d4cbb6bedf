"""Tests for raw-mode ownership.

Verifies the tty state is restored exactly once on every exit path and that
termination signals unwind through the guard.
"""

from __future__ import annotations

import signal
import termios
import unittest
from unittest import mock

from verco.terminal import TerminalController


def _controller() -> TerminalController:
    with mock.patch("verco.terminal.termios.tcgetattr", return_value=[0]):
        return TerminalController(stdin_fd=0, stdout_fd=1)


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_restore_saved_tty_state(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("verco.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "verco.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("verco.terminal.os.write") as write_mock, mock.patch(
            "verco.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_raw_mode()
            self.assertTrue(controller.is_raw)
            controller.disable_raw_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?25h"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[0m\r\n"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)
        self.assertFalse(controller.is_raw)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        controller = _controller()

        def enable() -> None:
            controller._raw = True

        with mock.patch.object(controller, "enable_raw_mode", side_effect=enable) as enable_mock, mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_raw_mode_restores_terminal_after_keyboard_interrupt(self) -> None:
        controller = _controller()

        def enable() -> None:
            controller._raw = True

        with mock.patch.object(controller, "enable_raw_mode", side_effect=enable), mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(KeyboardInterrupt):
                with controller.raw_mode():
                    raise KeyboardInterrupt

        disable_mock.assert_called_once()

    def test_raw_mode_skips_restore_when_enable_failed(self) -> None:
        controller = _controller()

        with mock.patch.object(
            controller, "enable_raw_mode", side_effect=termios.error("not a tty")
        ), mock.patch.object(controller, "disable_raw_mode") as disable_mock:
            with self.assertRaises(termios.error):
                with controller.raw_mode():
                    pass

        disable_mock.assert_not_called()

    def test_termination_signal_exits_through_guard_and_handlers_are_restored(self) -> None:
        controller = _controller()
        previous = signal.getsignal(signal.SIGTERM)

        def enable() -> None:
            controller._raw = True

        with mock.patch.object(controller, "enable_raw_mode", side_effect=enable), mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(SystemExit) as ctx:
                with controller.raw_mode():
                    handler = signal.getsignal(signal.SIGTERM)
                    handler(signal.SIGTERM, None)

        self.assertEqual(ctx.exception.code, 128 + signal.SIGTERM)
        disable_mock.assert_called_once()
        self.assertEqual(signal.getsignal(signal.SIGTERM), previous)


if __name__ == "__main__":
    unittest.main()
