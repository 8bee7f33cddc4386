"""Runtime composition layer for lazystatus.

Builds the initial state, wires the gateway, preview loader, and theme
together, and starts the loop. A failing first status fetch still starts
the UI, with an empty snapshot and the error shown.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..errors import LazyStatusError
from ..gateway import GitGateway
from ..highlight import DEFAULT_STYLE
from ..preview import PREVIEW_MAX_LINES_DEFAULT, load_preview
from ..render import PreviewLoader
from ..status import StatusSnapshot
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .actions import RuntimeActions, fetch_snapshot
from .loop import RuntimeView, run_main_loop
from .state import AppState

logger = logging.getLogger(__name__)

UNKNOWN_BRANCH = "?"


@dataclass(frozen=True)
class AppOptions:
    cwd: Path | None
    theme: UITheme
    style: str = DEFAULT_STYLE
    syntax_highlight: bool = True
    preview_max_lines: int = PREVIEW_MAX_LINES_DEFAULT
    preserve_view: bool = False


def build_preview_loader(options: AppOptions) -> PreviewLoader:
    return partial(
        load_preview,
        cwd=options.cwd,
        max_lines=options.preview_max_lines,
        highlight=options.syntax_highlight,
        style=options.style,
    )


def initial_state(gateway: GitGateway, options: AppOptions) -> AppState:
    """Fetch the first snapshot, or start empty with the error as a message."""
    state = AppState(snapshot=StatusSnapshot(branch=UNKNOWN_BRANCH), preserve_view=options.preserve_view)
    try:
        state.snapshot = fetch_snapshot(gateway)
    except LazyStatusError as exc:
        logger.warning("initial status failed: %s", exc)
        state.set_message(f"{exc} (press r to retry)", error=True)
    return state


def run_app(options: AppOptions) -> int:
    """Run the interactive UI until the user quits; returns the exit code."""
    gateway = GitGateway(cwd=options.cwd)
    state = initial_state(gateway, options)
    actions = RuntimeActions(state, gateway)
    view = RuntimeView(theme=options.theme, load_preview=build_preview_loader(options))

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    run_main_loop(state, terminal, stdin_fd, view, actions)
    return 0
