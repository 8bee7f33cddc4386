"""CLI argument, print-mode, and option-merging tests.

Verifies how ``lazystatus.cli.main`` chooses between one-shot printing and
the interactive runtime, and how flags override config values.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazystatus import cli
from lazystatus.errors import GatewayError
from lazystatus.ui_theme import OCEAN_THEME, PLAIN_THEME

REPORT = "On branch main\n\nUntracked files:\n  (hint)\n  a.txt\n\nChanges to be committed:\n  (hint)\n  modified:   b.txt\n\n"


class _TtyStringIO(io.StringIO):
    def isatty(self) -> bool:
        return True


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        env = mock.patch.dict(os.environ, {"LAZYSTATUS_CONFIG": str(self.root / "missing.json")})
        env.start()
        self.addCleanup(env.stop)

    def _gateway(self, report: str = REPORT, error: Exception | None = None) -> mock.Mock:
        gateway = mock.Mock()
        if error is not None:
            gateway.status_report.side_effect = error
        else:
            gateway.status_report.return_value = report
        return gateway

    def test_print_mode_writes_plain_status_once(self) -> None:
        stdout = io.StringIO()
        with mock.patch("lazystatus.cli.GitGateway", return_value=self._gateway()) as gateway_cls, mock.patch.object(
            sys, "stdout", stdout
        ):
            code = cli.main(["--print", "-C", str(self.root)])

        self.assertEqual(code, 0)
        gateway_cls.assert_called_once_with(cwd=self.root)
        self.assertEqual(
            stdout.getvalue(),
            "On branch main\n"
            "\n"
            "Untracked files: (1)\n"
            "    › a.txt\n"
            "\n"
            "Changed files: (0)\n"
            "\n"
            "Staged for commit: (1)\n"
            "    › b.txt\n",
        )

    def test_print_mode_failure_exits_with_message(self) -> None:
        error = GatewayError(["git", "status"], 128, "fatal: not a git repository")
        with mock.patch("lazystatus.cli.GitGateway", return_value=self._gateway(error=error)), mock.patch.object(
            sys, "stdout", io.StringIO()
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--print"])

        self.assertIn("lazystatus:", str(ctx.exception.code))
        self.assertIn("not a git repository", str(ctx.exception.code))

    def test_missing_directory_is_rejected(self) -> None:
        with mock.patch.object(sys, "stdout", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--print", "-C", str(self.root / "nope")])

    def test_interactive_session_runs_app_with_merged_options(self) -> None:
        (self.root / "missing.json").write_text('{"preview_max_lines": 40, "theme": "default"}', encoding="utf-8")
        with mock.patch.object(sys, "stdin", _TtyStringIO()), mock.patch.object(
            sys, "stdout", _TtyStringIO()
        ), mock.patch("lazystatus.cli.run_app", return_value=0) as run_app:
            code = cli.main(["--theme", "ocean", "--preserve-view"])

        self.assertEqual(code, 0)
        options = run_app.call_args.args[0]
        self.assertIs(options.theme, OCEAN_THEME)
        self.assertEqual(options.preview_max_lines, 40)
        self.assertTrue(options.preserve_view)
        self.assertTrue(options.syntax_highlight)

    def test_no_color_disables_theme_and_highlighting(self) -> None:
        args = cli.build_parser().parse_args(["--no-color", "--preview-max-lines", "5"])
        with mock.patch.object(sys, "stdout", _TtyStringIO()):
            options = cli.resolve_options(args)

        self.assertIs(options.theme, PLAIN_THEME)
        self.assertFalse(options.syntax_highlight)
        self.assertEqual(options.preview_max_lines, 5)

    def test_preview_limit_must_be_positive(self) -> None:
        with mock.patch.object(sys, "stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.build_parser().parse_args(["--preview-max-lines", "0"])


if __name__ == "__main__":
    unittest.main()
