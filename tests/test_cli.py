"""CLI tests: argument parsing, repository discovery wiring and error boundary."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from verco import cli
from verco.backend import GitBackend, HgBackend
from verco.errors import BackendUnavailableError, RepositoryNotFoundError
from verco.ui_theme import DEFAULT_THEME, PLAIN_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / ".git").mkdir()
        patches = [
            mock.patch("verco.cli.configure_logging"),
            mock.patch("verco.cli.load_theme_name", return_value=None),
            mock.patch("verco.cli.load_preferred_backend", return_value=None),
            mock.patch("verco.cli.load_explorer_command", return_value=None),
            mock.patch("verco.cli.TerminalController"),
            mock.patch("verco.cli.sys"),
            mock.patch.dict("verco.cli.os.environ", {}, clear=True),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
        cli.sys.stdin.isatty.return_value = True
        cli.sys.stdout.isatty.return_value = True
        cli.sys.stdin.fileno.return_value = 0
        cli.sys.stdout.fileno.return_value = 1

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_parser_defaults(self) -> None:
        args = cli.build_parser().parse_args([])

        self.assertIsNone(args.path)
        self.assertIsNone(args.backend)
        self.assertFalse(args.no_color)
        self.assertFalse(args.debug)

    def test_main_runs_session_on_detected_repository(self) -> None:
        with mock.patch("verco.cli.run_session") as run_mock:
            cli.main([str(self.root)])

        backend, _terminal, _screen, options = run_mock.call_args.args
        self.assertIsInstance(backend, GitBackend)
        self.assertEqual(backend.repo_root, self.root)
        self.assertEqual(options.repo_root, self.root)
        self.assertIs(options.theme, DEFAULT_THEME)

    def test_backend_flag_overrides_detection(self) -> None:
        with mock.patch("verco.cli.run_session") as run_mock:
            cli.main([str(self.root), "--backend", "hg"])

        self.assertIsInstance(run_mock.call_args.args[0], HgBackend)

    def test_no_color_flag_and_environment_select_plain_theme(self) -> None:
        with mock.patch("verco.cli.run_session") as run_mock:
            cli.main([str(self.root), "--no-color"])
        self.assertIs(run_mock.call_args.args[3].theme, PLAIN_THEME)

        with mock.patch.dict("verco.cli.os.environ", {"NO_COLOR": "1"}), mock.patch(
            "verco.cli.run_session"
        ) as run_mock:
            cli.main([str(self.root)])
        self.assertIs(run_mock.call_args.args[3].theme, PLAIN_THEME)

    def test_save_defaults_persists_theme_and_backend(self) -> None:
        with mock.patch("verco.cli.save_theme_name") as save_theme, mock.patch(
            "verco.cli.save_preferred_backend"
        ) as save_backend, mock.patch("verco.cli.run_session"):
            cli.main([str(self.root), "--theme", "plain", "--backend", "git", "--save-defaults"])

        save_theme.assert_called_once_with("plain")
        save_backend.assert_called_once_with("git")

    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root / "nope")])

        self.assertIn("Path not found", str(ctx.exception.code))

    def test_non_interactive_terminal_exits(self) -> None:
        cli.sys.stdin.isatty.return_value = False

        with mock.patch("verco.cli.run_session") as run_mock, self.assertRaises(SystemExit):
            cli.main([str(self.root)])

        run_mock.assert_not_called()

    def test_verco_errors_become_one_line_exit(self) -> None:
        with mock.patch(
            "verco.cli.run_session", side_effect=BackendUnavailableError("git: command not found")
        ), self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root)])

        self.assertEqual(ctx.exception.code, "verco: git: command not found")

    def test_outside_repository_exits_before_touching_terminal(self) -> None:
        with mock.patch("verco.cli.find_repository", side_effect=RepositoryNotFoundError("no repo")), mock.patch(
            "verco.cli.run_session"
        ) as run_mock, self.assertRaises(SystemExit):
            cli.main([str(self.root)])

        run_mock.assert_not_called()
        cli.TerminalController.assert_not_called()


if __name__ == "__main__":
    unittest.main()
