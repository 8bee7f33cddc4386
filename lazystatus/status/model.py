"""Working-tree status model with a single cursor over three sections.

Sections keep the order reported by git. The cursor addresses the logical
concatenation ``untracked + unstaged + staged``; section boundaries are
derived from the current lengths on every access.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SECTION_UNTRACKED = "untracked"
SECTION_UNSTAGED = "unstaged"
SECTION_STAGED = "staged"
SECTION_ORDER: tuple[str, ...] = (SECTION_UNTRACKED, SECTION_UNSTAGED, SECTION_STAGED)


@dataclass
class Entry:
    """One changeable path with its expand/collapse flag."""

    path: str
    expanded: bool = False


@dataclass
class StatusSnapshot:
    """Parsed working-tree state plus the UI cursor."""

    branch: str
    untracked: list[Entry] = field(default_factory=list)
    unstaged: list[Entry] = field(default_factory=list)
    staged: list[Entry] = field(default_factory=list)
    cursor: int = 0

    @property
    def total(self) -> int:
        return len(self.untracked) + len(self.unstaged) + len(self.staged)

    def section_entries(self, section: str) -> list[Entry]:
        """Return the entry list backing ``section``."""
        if section == SECTION_UNTRACKED:
            return self.untracked
        if section == SECTION_UNSTAGED:
            return self.unstaged
        if section == SECTION_STAGED:
            return self.staged
        raise ValueError(f"unknown section: {section!r}")

    def section_offset(self, section: str) -> int:
        """Return the global index of the first row of ``section``."""
        offset = 0
        for name in SECTION_ORDER:
            if name == section:
                return offset
            offset += len(self.section_entries(name))
        raise ValueError(f"unknown section: {section!r}")

    def move_down(self) -> None:
        if self.total == 0:
            self.cursor = 0
            return
        self.cursor = min(self.cursor + 1, self.total - 1)

    def move_up(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def index_to_entry(self, index: int) -> tuple[str, int]:
        """Map a global row index to ``(section, local_index)``.

        Raises ``IndexError`` when ``index`` is outside ``[0, total)``.
        """
        if index < 0 or index >= self.total:
            raise IndexError(f"row {index} out of range for {self.total} entries")
        local = index
        if local < len(self.untracked):
            return SECTION_UNTRACKED, local
        local -= len(self.untracked)
        if local < len(self.unstaged):
            return SECTION_UNSTAGED, local
        local -= len(self.unstaged)
        return SECTION_STAGED, local

    def entry_at_cursor(self) -> Entry | None:
        """Return the entry under the cursor, or ``None`` for an empty model."""
        if self.total == 0:
            return None
        section, local = self.index_to_entry(self.cursor)
        return self.section_entries(section)[local]

    def toggle_expand(self) -> bool:
        """Flip expansion of the entry under the cursor.

        Returns ``False`` without side effects when there are no entries.
        """
        entry = self.entry_at_cursor()
        if entry is None:
            return False
        entry.expanded = not entry.expanded
        return True

    def carry_view_from(self, previous: StatusSnapshot) -> None:
        """Re-apply cursor and expansion state from an older snapshot by path.

        An entry stays expanded when the same path was expanded in the same
        section before. The cursor follows its previous path, first within the
        same section and then across sections; otherwise it is clamped.
        """
        for section in SECTION_ORDER:
            expanded_paths = {entry.path for entry in previous.section_entries(section) if entry.expanded}
            for entry in self.section_entries(section):
                entry.expanded = entry.path in expanded_paths

        if self.total == 0:
            self.cursor = 0
            return

        previous_entry = previous.entry_at_cursor()
        if previous_entry is not None:
            previous_section, _ = previous.index_to_entry(previous.cursor)
            match = self._find_path(previous_entry.path, preferred_section=previous_section)
            if match is not None:
                self.cursor = match
                return
        self.cursor = max(0, min(previous.cursor, self.total - 1))

    def _find_path(self, path: str, preferred_section: str) -> int | None:
        sections = (preferred_section,) + tuple(name for name in SECTION_ORDER if name != preferred_section)
        for section in sections:
            for local, entry in enumerate(self.section_entries(section)):
                if entry.path == path:
                    return self.section_offset(section) + local
        return None
