"""Key hints for the footer and the toggleable help panel."""

from __future__ import annotations

from ..ui_theme import UITheme

MODE_STATUS = "status"
MODE_BRANCHES = "branches"

_STATUS_HELP: tuple[tuple[str, str], ...] = (
    ("j / Down", "move cursor down"),
    ("k / Up", "move cursor up"),
    ("Tab", "expand or collapse the entry under the cursor"),
    ("S", "stage everything, then refresh"),
    ("r", "refresh status"),
    ("b", "open the branch panel"),
    ("Esc", "dismiss message"),
    ("?", "toggle this help"),
    ("q / Ctrl+C", "quit"),
)

_BRANCH_HELP: tuple[tuple[str, str], ...] = (
    ("j / Down", "next branch"),
    ("k / Up", "previous branch"),
    ("Enter", "check out the selected branch"),
    ("n", "create and check out a new branch"),
    ("Esc / b", "close the branch panel"),
    ("?", "toggle this help"),
    ("q / Ctrl+C", "quit"),
)

_STATUS_HINT = "j/k move  Tab expand  S stage all  r refresh  b branches  ? help  q quit"
_BRANCH_HINT = "j/k move  Enter checkout  n new branch  Esc back  ? help  q quit"
_PROMPT_HINT = "Enter create  Esc cancel"


def footer_hint(mode: str, prompt_active: bool = False) -> str:
    """Return the one-line key summary shown when no message is pending."""
    if prompt_active:
        return _PROMPT_HINT
    if mode == MODE_BRANCHES:
        return _BRANCH_HINT
    return _STATUS_HINT


def help_panel_rows(mode: str, theme: UITheme) -> list[str]:
    entries = _BRANCH_HELP if mode == MODE_BRANCHES else _STATUS_HELP
    key_width = max(len(keys) for keys, _ in entries)
    rows = [f"{theme.help_dim}{'-' * 40}{theme.reset}"]
    for keys, description in entries:
        rows.append(f"  {theme.help_key}{keys.ljust(key_width)}{theme.reset}  {theme.help_dim}{description}{theme.reset}")
    return rows
