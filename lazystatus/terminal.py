"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. ``raw_mode`` is the
scoped resource the loop runs inside; it restores the terminal on every exit
path, including exceptions and signal-driven ``SystemExit``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
_TERMINATING_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class TerminalController:
    """Manage raw mode and the alternate screen for one pair of descriptors."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._active = True

    def disable_tui_mode(self) -> None:
        """Restore the saved tty state; safe to call more than once."""
        if not self._active:
            return
        self._active = False
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket the TUI session; signals that would kill it raise ``SystemExit``."""
        previous_handlers = {}
        for signum in _TERMINATING_SIGNALS:
            previous_handlers[signum] = signal.signal(signum, _raise_system_exit)
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def _raise_system_exit(signum: int, _frame) -> None:
    logger.info("received signal %d, leaving TUI", signum)
    raise SystemExit(128 + signum)
