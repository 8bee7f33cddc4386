"""Tests for parsing ``git status`` long-format reports.

Covers branch extraction, the three recognized sections, label stripping,
and the malformed-input cases that must raise ``ParseError``.
"""

from __future__ import annotations

import unittest

from lazystatus.errors import ParseError
from lazystatus.status import parse_status, unquote_path


def _paths(entries) -> list[str]:
    return [entry.path for entry in entries]


REAL_GIT_REPORT = """On branch feature/login
Your branch is up to date with 'origin/feature/login'.

Changes to be committed:
  (use "git restore --staged <file>..." to unstage)
\tmodified:   app/views.py
\tnew file:   app/forms.py
\tdeleted:    legacy.py
\trenamed:    old_name.py -> new_name.py

Changes not staged for commit:
  (use "git add <file>..." to update what will be committed)
  (use "git restore <file>..." to discard changes in working directory)
\tmodified:   README.md
\tdeleted:    notes.txt

Untracked files:
  (use "git add <file>..." to include in what will be committed)
\tscratch/
\ttodo.md

"""


class ParseStatusTests(unittest.TestCase):
    def test_untracked_only_report(self) -> None:
        snapshot = parse_status("On branch main\n\nUntracked files:\n  (use ...)\n  a.txt\n  b.txt\n\n")

        self.assertEqual(snapshot.branch, "main")
        self.assertEqual(_paths(snapshot.untracked), ["a.txt", "b.txt"])
        self.assertEqual(snapshot.staged, [])
        self.assertEqual(snapshot.unstaged, [])
        self.assertEqual(snapshot.cursor, 0)

    def test_staged_section_strips_modified_and_new_file_labels(self) -> None:
        report = (
            "On branch main\n"
            "\n"
            "Changes to be committed:\n"
            '  (use "git restore --staged <file>..." to unstage)\n'
            "  modified:   src/main.rs\n"
            "  new file:   Cargo.lock\n"
            "\n"
        )

        snapshot = parse_status(report)

        self.assertEqual(_paths(snapshot.staged), ["src/main.rs", "Cargo.lock"])
        self.assertEqual(snapshot.untracked, [])

    def test_entries_start_collapsed(self) -> None:
        snapshot = parse_status(REAL_GIT_REPORT)

        for entries in (snapshot.untracked, snapshot.unstaged, snapshot.staged):
            self.assertTrue(all(not entry.expanded for entry in entries))

    def test_real_git_report_fills_all_three_sections_in_order(self) -> None:
        snapshot = parse_status(REAL_GIT_REPORT)

        self.assertEqual(snapshot.branch, "feature/login")
        self.assertEqual(_paths(snapshot.staged), ["app/views.py", "app/forms.py", "legacy.py", "new_name.py"])
        self.assertEqual(_paths(snapshot.unstaged), ["README.md", "notes.txt"])
        self.assertEqual(_paths(snapshot.untracked), ["scratch/", "todo.md"])

    def test_section_may_end_at_end_of_input_without_blank_line(self) -> None:
        snapshot = parse_status("On branch main\n\nUntracked files:\n  (hint)\n  last.txt")

        self.assertEqual(_paths(snapshot.untracked), ["last.txt"])

    def test_clean_tree_has_no_entries(self) -> None:
        snapshot = parse_status("On branch main\nnothing to commit, working tree clean\n")

        self.assertEqual(snapshot.branch, "main")
        self.assertEqual(snapshot.total, 0)

    def test_order_and_duplicates_are_kept_as_reported(self) -> None:
        snapshot = parse_status("On branch main\n\nUntracked files:\n  (hint)\n  z.txt\n  a.txt\n  z.txt\n\n")

        self.assertEqual(_paths(snapshot.untracked), ["z.txt", "a.txt", "z.txt"])

    def test_unknown_sections_are_ignored(self) -> None:
        report = (
            "On branch main\n"
            "\n"
            "Unmerged paths:\n"
            '  (use "git add <file>..." to mark resolution)\n'
            "\tboth modified:   conflict.txt\n"
            "\n"
            "Untracked files:\n"
            "  (hint)\n"
            "  new.txt\n"
        )

        snapshot = parse_status(report)

        self.assertEqual(_paths(snapshot.untracked), ["new.txt"])
        self.assertEqual(snapshot.staged, [])
        self.assertEqual(snapshot.unstaged, [])

    def test_quoted_paths_are_unquoted(self) -> None:
        report = 'On branch main\n\nUntracked files:\n  (hint)\n  "caf\\303\\251 menu.txt"\n\n'

        snapshot = parse_status(report)

        self.assertEqual(_paths(snapshot.untracked), ["café menu.txt"])


class ParseStatusErrorTests(unittest.TestCase):
    def test_missing_branch_prefix_reports_offending_line(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_status("HEAD detached at 1a2b3c\n\nUntracked files:\n")

        self.assertEqual(ctx.exception.line, "HEAD detached at 1a2b3c")
        self.assertEqual(ctx.exception.line_number, 1)
        self.assertIn("HEAD detached at 1a2b3c", str(ctx.exception))

    def test_empty_input_is_a_parse_error(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_status("")

        self.assertIsNone(ctx.exception.line)
        self.assertIn("<end of input>", str(ctx.exception))

    def test_unrecognized_staged_label_is_a_parse_error(self) -> None:
        report = "On branch main\n\nChanges to be committed:\n  (hint)\n  mystery:   file.txt\n\n"

        with self.assertRaises(ParseError) as ctx:
            parse_status(report)

        self.assertEqual(ctx.exception.line, "  mystery:   file.txt")
        self.assertEqual(ctx.exception.line_number, 5)

    def test_section_header_without_explanatory_line_is_truncated_input(self) -> None:
        with self.assertRaises(ParseError):
            parse_status("On branch main\n\nChanges to be committed:")

    def test_label_without_path_is_a_parse_error(self) -> None:
        with self.assertRaises(ParseError):
            parse_status("On branch main\n\nChanges to be committed:\n  (hint)\n  modified:   \n\n")


class UnquotePathTests(unittest.TestCase):
    def test_plain_path_is_unchanged(self) -> None:
        self.assertEqual(unquote_path("src/app.py"), "src/app.py")

    def test_escapes_are_decoded(self) -> None:
        self.assertEqual(unquote_path('"tab\\there"'), "tab\there")
        self.assertEqual(unquote_path('"quote\\"d"'), 'quote"d')


if __name__ == "__main__":
    unittest.main()
