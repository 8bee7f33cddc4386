"""Rendering engine for the status and branch views.

Row builders are pure: they map a model to a list of ANSI rows and never
mutate it. ``compose_frame`` turns rows into one full-screen frame where
every row starts at column zero (rows are joined with CRLF because the
terminal runs in raw mode).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, pad_ansi_line
from ..branches import BranchList
from ..preview import PreviewResult
from ..status.model import SECTION_STAGED, SECTION_UNSTAGED, SECTION_UNTRACKED, Entry, StatusSnapshot
from ..ui_theme import UITheme
from .help import footer_hint, help_panel_rows

EXPANDED_GLYPH = "⌄"
COLLAPSED_GLYPH = "›"
PREVIEW_MARKER = "+ "
ENTRY_INDENT = "    "
SECTION_TITLES: tuple[tuple[str, str], ...] = (
    (SECTION_UNTRACKED, "Untracked files:"),
    (SECTION_UNSTAGED, "Changed files:"),
    (SECTION_STAGED, "Staged for commit:"),
)
NEW_BRANCH_PROMPT = "New branch name: "

PreviewLoader = Callable[[str], PreviewResult]


@dataclass(frozen=True)
class RenderedRows:
    """Display rows plus the row index that holds the cursor, if any."""

    rows: list[str]
    cursor_row: int | None = None


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply inverse video to a whole row without discarding its colors."""
    if not theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + theme.reset


def _entry_row(entry: Entry, theme: UITheme) -> str:
    glyph = EXPANDED_GLYPH if entry.expanded else COLLAPSED_GLYPH
    return f"{ENTRY_INDENT}{theme.marker}{glyph}{theme.reset} {entry.path}"


def _preview_rows(preview: PreviewResult, theme: UITheme) -> list[str]:
    if preview.error is not None:
        return [f"{ENTRY_INDENT}  {theme.preview_notice}(preview unavailable: {preview.error.reason}){theme.reset}"]

    rows: list[str] = []
    for line in preview.lines:
        text = f"{theme.reset}{line}" if "\x1b" in line else f"{theme.preview_text}{line}"
        rows.append(f"{theme.preview_marker}{PREVIEW_MARKER}{text}{theme.reset}")
    if preview.hidden_line_count:
        count = f"{preview.hidden_line_count}" if preview.hidden_count_exact else f"{preview.hidden_line_count}+"
        rows.append(f"{theme.preview_notice}{PREVIEW_MARKER}… {count} more lines{theme.reset}")
    return rows


def render_status_rows(
    snapshot: StatusSnapshot,
    theme: UITheme,
    load_preview: PreviewLoader,
    show_cursor: bool = True,
) -> RenderedRows:
    """Lay out the branch line, the three sections, and inline previews.

    ``load_preview`` is called for every expanded entry on every render.
    """
    rows = [f"On branch {theme.branch}{snapshot.branch}{theme.reset}", ""]
    cursor_row: int | None = None
    index = 0
    for section_pos, (section, title) in enumerate(SECTION_TITLES):
        if section_pos > 0:
            rows.append("")
        entries = snapshot.section_entries(section)
        rows.append(f"{theme.section_header}{title}{theme.reset} {theme.section_count}({len(entries)}){theme.reset}")
        for entry in entries:
            row = _entry_row(entry, theme)
            if show_cursor and index == snapshot.cursor:
                cursor_row = len(rows)
                row = selected_with_ansi(row, theme)
            rows.append(row)
            if entry.expanded:
                rows.extend(_preview_rows(load_preview(entry.path), theme))
            index += 1
    return RenderedRows(rows=rows, cursor_row=cursor_row)


def render_branch_rows(branches: BranchList, theme: UITheme, prompt: str | None = None) -> RenderedRows:
    """Lay out the local branch list, with the new-branch prompt when active."""
    rows = [f"{theme.section_header}Branches:{theme.reset} {theme.section_count}({len(branches.rows)}){theme.reset}"]
    cursor_row: int | None = None
    for idx, branch in enumerate(branches.rows):
        marker = "* " if branch.current else "  "
        color = theme.branch_current if branch.current else ""
        row = f"  {color}{marker}{branch.name}{theme.reset if color else ''}"
        if idx == branches.cursor and prompt is None:
            cursor_row = len(rows)
            row = selected_with_ansi(row, theme)
        rows.append(row)
    if prompt is not None:
        rows.append("")
        cursor_row = len(rows)
        rows.append(f"{theme.prompt}{NEW_BRANCH_PROMPT}{theme.reset}{prompt}{theme.reverse} {theme.reset}")
    return RenderedRows(rows=rows, cursor_row=cursor_row)


def scroll_start(previous_start: int, cursor_row: int | None, visible_rows: int, total_rows: int) -> int:
    """Return a viewport start that keeps ``cursor_row`` visible.

    The viewport only moves when the cursor leaves it, then clamps so the
    last page is never partially empty.
    """
    visible_rows = max(1, visible_rows)
    start = previous_start
    if cursor_row is not None:
        if cursor_row < start:
            start = cursor_row
        elif cursor_row >= start + visible_rows:
            start = cursor_row - visible_rows + 1
    return max(0, min(start, max(0, total_rows - visible_rows)))


def build_status_line(left: str, right: str, width: int) -> str:
    """Fit ``left`` and right-aligned ``right`` into exactly ``width`` columns."""
    width = max(1, width)
    left = clip_ansi_line(left, width)
    room = width - display_width(left) - 1
    if room > 0 and right:
        right = clip_ansi_line(right, room)
        gap = width - display_width(left) - display_width(right)
        return left + " " * gap + right
    return pad_ansi_line(left, width)


def compose_frame(
    rendered: RenderedRows,
    start: int,
    height: int,
    width: int,
    footer_left: str,
    footer_right: str = "",
    extra_rows: list[str] | None = None,
) -> str:
    """Build one full-screen frame: clear, content rows, extra rows, footer.

    The footer is drawn in reverse video on the last terminal row without a
    trailing newline so the screen never scrolls.
    """
    extra_rows = extra_rows or []
    content_rows = max(0, height - 1 - len(extra_rows))
    out: list[str] = ["\033[H\033[J"]
    visible = rendered.rows[start : start + content_rows]
    body = visible + [""] * (content_rows - len(visible)) + extra_rows
    for row in body:
        text = clip_ansi_line(row, width)
        out.append(text)
        if "\033" in text:
            out.append("\033[0m")
        out.append("\r\n")
    out.append("\033[7m")
    out.append(build_status_line(footer_left, footer_right, width))
    out.append("\033[0m")
    return "".join(out)


def write_frame(frame: str) -> None:
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "COLLAPSED_GLYPH",
    "EXPANDED_GLYPH",
    "PREVIEW_MARKER",
    "PreviewLoader",
    "RenderedRows",
    "build_status_line",
    "compose_frame",
    "footer_hint",
    "help_panel_rows",
    "render_branch_rows",
    "render_status_rows",
    "scroll_start",
    "selected_with_ansi",
    "write_frame",
]
