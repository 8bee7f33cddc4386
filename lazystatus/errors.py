"""Error taxonomy shared by the gateway, parser, and preview loader.

Gateway and parse failures propagate to the runtime loop, which turns them
into dismissible messages. Preview read failures are absorbed by the loader.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class LazyStatusError(Exception):
    """Base error for the project."""


class GatewayError(LazyStatusError):
    """The ``git`` executable could not be started or exited non-zero."""

    def __init__(self, command: Sequence[str], returncode: int | None = None, stderr: str = "") -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        command_text = " ".join(self.command)
        detail = next((line.strip() for line in self.stderr.splitlines() if line.strip()), "")
        if self.returncode is None:
            message = f"`{command_text}` could not be started"
        else:
            message = f"`{command_text}` failed with exit code {self.returncode}"
        if detail:
            message = f"{message}: {detail}"
        return message


class ParseError(LazyStatusError):
    """A textual report did not match the expected layout."""

    def __init__(self, message: str, line: str | None = None, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        shown = "<end of input>" if line is None else repr(line)
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{message} ({location}{shown})")


class PreviewReadError(LazyStatusError):
    """An expanded entry's file could not be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
