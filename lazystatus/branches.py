"""Branch panel model built from ``git branch`` output."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ParseError

_CURRENT_MARKER = "* "
# "+ " marks branches checked out in another worktree.
_ROW_MARKERS = (_CURRENT_MARKER, "  ", "+ ")


@dataclass
class BranchRow:
    name: str
    current: bool = False

    @property
    def detached(self) -> bool:
        return self.current and self.name.startswith("(")


@dataclass
class BranchList:
    """Local branches plus a clamped cursor."""

    rows: list[BranchRow] = field(default_factory=list)
    cursor: int = 0

    @classmethod
    def from_report(cls, text: str) -> BranchList:
        """Build a list whose cursor starts on the checked-out branch."""
        rows = parse_branch_list(text)
        cursor = next((idx for idx, row in enumerate(rows) if row.current), 0)
        return cls(rows=rows, cursor=cursor)

    def move(self, delta: int) -> bool:
        """Move the cursor by ``delta`` rows; return whether it changed."""
        if not self.rows:
            self.cursor = 0
            return False
        target = max(0, min(self.cursor + delta, len(self.rows) - 1))
        if target == self.cursor:
            return False
        self.cursor = target
        return True

    def selected_name(self) -> str | None:
        """Return the checkout target under the cursor, if it is a real branch."""
        if not self.rows:
            return None
        row = self.rows[self.cursor]
        if row.detached:
            return None
        return row.name

    def current_name(self) -> str | None:
        return next((row.name for row in self.rows if row.current), None)


def parse_branch_list(text: str) -> list[BranchRow]:
    rows: list[BranchRow] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        marker = line[:2]
        if marker not in _ROW_MARKERS:
            raise ParseError("unexpected branch row", line, line_number)
        name = line[2:].strip()
        if not name:
            raise ParseError("missing branch name", line, line_number)
        rows.append(BranchRow(name=name, current=marker == _CURRENT_MARKER))
    return rows
