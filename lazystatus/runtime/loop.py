"""Main interactive loop for the terminal UI.

Each iteration renders the current state, blocks for exactly one key, and
dispatches it. There is no timer or background refresh. Gateway and parse
errors are caught here and shown as a dismissible message; the terminal is
restored by ``raw_mode`` however the loop ends.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import LazyStatusError
from ..input import read_key
from ..keys import build_branch_registry, build_status_registry
from ..render import (
    PreviewLoader,
    RenderedRows,
    compose_frame,
    footer_hint,
    help_panel_rows,
    render_branch_rows,
    render_status_rows,
    scroll_start,
    write_frame,
)
from ..render.help import MODE_BRANCHES
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .actions import RuntimeActions
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeView:
    """Presentation dependencies injected into the loop."""

    theme: UITheme
    load_preview: PreviewLoader
    write: Callable[[str], None] = write_frame


def _footer(state: AppState) -> tuple[str, str]:
    snapshot = state.snapshot
    left = f" On branch {snapshot.branch}  [{snapshot.total} entries]"
    if state.message:
        prefix = "error: " if state.message_is_error else ""
        return left, f"{prefix}{state.message} (Esc) "
    return left, footer_hint(state.mode, prompt_active=state.prompt_text is not None) + " "


def build_frame(state: AppState, view: RuntimeView, columns: int, lines: int) -> str:
    """Render the state into one frame and update the viewport start."""
    if state.mode == MODE_BRANCHES and state.branches is not None:
        rendered: RenderedRows = render_branch_rows(state.branches, view.theme, state.prompt_text)
    else:
        rendered = render_status_rows(state.snapshot, view.theme, view.load_preview)

    extra_rows = help_panel_rows(state.mode, view.theme) if state.show_help else []
    content_rows = max(1, lines - 1 - len(extra_rows))
    state.view_start = scroll_start(state.view_start, rendered.cursor_row, content_rows, len(rendered.rows))
    footer_left, footer_right = _footer(state)
    return compose_frame(rendered, state.view_start, lines, columns, footer_left, footer_right, extra_rows)


def handle_key(state: AppState, actions: RuntimeActions, key: str) -> bool:
    """Apply one key to the state and return whether the loop should quit.

    A pending message is dismissed by any key; the key is still processed.
    """
    if state.message and key != "ESC":
        state.clear_message()
    try:
        if state.mode == MODE_BRANCHES:
            if state.prompt_text is not None:
                actions.handle_prompt_key(key)
                return False
            if key == "ESC" and state.message:
                state.clear_message()
                return False
            return bool(build_branch_registry(actions.branch_key_actions()).dispatch(key))
        return bool(build_status_registry(actions.status_key_actions()).dispatch(key))
    except LazyStatusError as exc:
        logger.warning("%s: %s", type(exc).__name__, exc)
        state.set_message(str(exc), error=True)
        return False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    view: RuntimeView,
    actions: RuntimeActions,
) -> None:
    """Run the render/read/dispatch cycle until a quit key or end of input."""
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            view.write(build_frame(state, view, term.columns, term.lines))

            key = read_key(stdin_fd)
            if key == "":
                logger.info("input closed, leaving TUI")
                break
            if handle_key(state, actions, key):
                logger.info("quit requested")
                break
