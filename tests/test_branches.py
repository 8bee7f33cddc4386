"""Tests for parsing ``git branch`` output and moving through it."""

from __future__ import annotations

import unittest

from lazystatus.branches import BranchList, parse_branch_list
from lazystatus.errors import ParseError

BRANCH_REPORT = "  dev\n* main\n+ wt-feature\n"


class ParseBranchListTests(unittest.TestCase):
    def test_rows_keep_order_and_mark_current(self) -> None:
        rows = parse_branch_list(BRANCH_REPORT)

        self.assertEqual([row.name for row in rows], ["dev", "main", "wt-feature"])
        self.assertEqual([row.current for row in rows], [False, True, False])

    def test_unexpected_marker_is_a_parse_error(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_branch_list("* main\n# bogus\n")

        self.assertEqual(ctx.exception.line_number, 2)

    def test_detached_head_row_is_not_a_checkout_target(self) -> None:
        branches = BranchList.from_report("* (HEAD detached at 1a2b3c4)\n  main\n")

        self.assertEqual(branches.cursor, 0)
        self.assertTrue(branches.rows[0].detached)
        self.assertIsNone(branches.selected_name())


class BranchListTests(unittest.TestCase):
    def test_cursor_starts_on_current_branch(self) -> None:
        branches = BranchList.from_report(BRANCH_REPORT)

        self.assertEqual(branches.cursor, 1)
        self.assertEqual(branches.current_name(), "main")

    def test_move_clamps_and_reports_change(self) -> None:
        branches = BranchList.from_report(BRANCH_REPORT)

        self.assertTrue(branches.move(1))
        self.assertFalse(branches.move(1))
        self.assertEqual(branches.selected_name(), "wt-feature")
        self.assertTrue(branches.move(-5))
        self.assertEqual(branches.cursor, 0)

    def test_empty_list_has_no_selection(self) -> None:
        branches = BranchList.from_report("")

        self.assertFalse(branches.move(1))
        self.assertIsNone(branches.selected_name())
        self.assertIsNone(branches.current_name())


if __name__ == "__main__":
    unittest.main()
