"""Parser for the human-readable ``git status`` report.

Only the long format produced under the C locale is understood. Line one
names the branch; section headers open blocks of entries that run until the
next blank line. Unknown sections are skipped.
"""

from __future__ import annotations

import logging

from ..errors import ParseError
from .model import Entry, StatusSnapshot

logger = logging.getLogger(__name__)

BRANCH_PREFIX = "On branch "
UNTRACKED_HEADER = "Untracked files:"
UNSTAGED_HEADER = "Changes not staged for commit:"
STAGED_HEADER = "Changes to be committed:"

# Trial order matters: "modified:" and "new file:" are the common cases.
ENTRY_LABELS: tuple[str, ...] = (
    "modified:",
    "new file:",
    "deleted:",
    "renamed:",
    "copied:",
    "typechange:",
)
_RENAME_LABELS = {"renamed:", "copied:"}
_RENAME_ARROW = " -> "

_C_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


class _LineCursor:
    """Sequential reader over report lines that tracks 1-based line numbers."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._index = 0

    @property
    def line_number(self) -> int:
        """Line number of the most recently consumed line."""
        return self._index

    def next(self) -> str | None:
        if self._index >= len(self._lines):
            return None
        line = self._lines[self._index]
        self._index += 1
        return line

    def peek(self) -> str | None:
        if self._index >= len(self._lines):
            return None
        return self._lines[self._index]


def unquote_path(path: str) -> str:
    """Decode a C-style quoted path as printed by git for unusual names."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch != "\\" or i + 1 >= len(body):
            out.extend(ch.encode("utf-8"))
            i += 1
            continue
        escape = body[i + 1]
        if escape in _C_ESCAPES:
            out.append(_C_ESCAPES[escape])
            i += 2
            continue
        octal = body[i + 1 : i + 4]
        if len(octal) == 3 and all(c in "01234567" for c in octal):
            out.append(int(octal, 8) & 0xFF)
            i += 4
            continue
        out.extend(ch.encode("utf-8"))
        i += 1
    return out.decode("utf-8", errors="replace")


def _strip_entry_label(line: str, line_number: int) -> str:
    stripped = line.lstrip()
    for label in ENTRY_LABELS:
        if not stripped.startswith(label):
            continue
        path = stripped[len(label) :].strip()
        if label in _RENAME_LABELS and _RENAME_ARROW in path:
            path = path.split(_RENAME_ARROW)[-1].strip()
        if not path:
            raise ParseError("missing path after entry label", line, line_number)
        return unquote_path(path)
    raise ParseError("unrecognized entry label", line, line_number)


def _skip_explanation(cursor: _LineCursor, header: str) -> None:
    if cursor.next() is None:
        raise ParseError(f"section {header!r} ended before its explanatory line", None, cursor.line_number + 1)


def _read_block(cursor: _LineCursor) -> list[tuple[str, int]]:
    """Consume lines up to (not including) the next blank line or end of input."""
    block: list[tuple[str, int]] = []
    while True:
        line = cursor.next()
        if line is None or line == "":
            return block
        block.append((line, cursor.line_number))


def parse_status(text: str) -> StatusSnapshot:
    """Convert a ``git status`` report into a fresh snapshot.

    The cursor starts at zero and every entry is collapsed. Raises
    ``ParseError`` naming the offending line when the report is malformed.
    """
    cursor = _LineCursor(text.splitlines())
    first = cursor.next()
    if first is None:
        raise ParseError("empty status report", None, 1)
    if not first.startswith(BRANCH_PREFIX):
        raise ParseError(f"expected {BRANCH_PREFIX.strip()!r} on the first line", first, 1)
    branch = first[len(BRANCH_PREFIX) :].strip()
    if not branch:
        raise ParseError("missing branch name", first, 1)

    snapshot = StatusSnapshot(branch=branch)
    while True:
        line = cursor.next()
        if line is None:
            break
        if line == UNTRACKED_HEADER:
            _skip_explanation(cursor, line)
            for raw, _number in _read_block(cursor):
                snapshot.untracked.append(Entry(unquote_path(raw.lstrip())))
        elif line == STAGED_HEADER:
            _skip_explanation(cursor, line)
            for raw, number in _read_block(cursor):
                snapshot.staged.append(Entry(_strip_entry_label(raw, number)))
        elif line == UNSTAGED_HEADER:
            _skip_explanation(cursor, line)
            # git prints one or two extra hint lines here depending on context.
            while (cursor.peek() or "").lstrip().startswith("("):
                cursor.next()
            for raw, number in _read_block(cursor):
                snapshot.unstaged.append(Entry(_strip_entry_label(raw, number)))

    logger.debug(
        "parsed status for %s: %d untracked, %d unstaged, %d staged",
        snapshot.branch,
        len(snapshot.untracked),
        len(snapshot.unstaged),
        len(snapshot.staged),
    )
    return snapshot
