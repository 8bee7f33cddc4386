"""Read-through file previews for expanded entries.

Nothing is cached: each render reads the file again, so edits made between
frames show up immediately. Only the first ``max_lines`` lines are decoded
and the rest is counted within a byte budget, so a huge file costs a bounded
amount of work per frame. Read failures never raise out of ``load_preview``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from .errors import PreviewReadError
from .highlight import DEFAULT_STYLE, colorize_lines, decode_text, sanitize_terminal_text

logger = logging.getLogger(__name__)

PREVIEW_MAX_LINES_DEFAULT = 200
_BINARY_SNIFF_BYTES = 8192
_MAX_LINE_BYTES = 64 * 1024
_READ_CHUNK_BYTES = 64 * 1024
_COUNT_BYTES_LIMIT = 8 * 1024 * 1024


@dataclass(frozen=True)
class PreviewResult:
    """Preview lines for one entry, or the reason there are none.

    ``hidden_count_exact`` is ``False`` when counting the hidden tail stopped
    at the byte budget; ``hidden_line_count`` is then a lower bound.
    """

    lines: list[str] = field(default_factory=list)
    hidden_line_count: int = 0
    hidden_count_exact: bool = True
    error: PreviewReadError | None = None


def _skip_rest_of_line(handle: BinaryIO) -> None:
    while True:
        chunk = handle.read(_READ_CHUNK_BYTES)
        if not chunk:
            return
        newline = chunk.find(b"\n")
        if newline >= 0:
            handle.seek(newline + 1 - len(chunk), 1)
            return


def _read_head_lines(handle: BinaryIO, max_lines: int) -> list[bytes]:
    """Read up to ``max_lines`` lines without their terminators.

    Lines longer than ``_MAX_LINE_BYTES`` are cut and the remainder skipped.
    """
    lines: list[bytes] = []
    while len(lines) < max_lines:
        raw = handle.readline(_MAX_LINE_BYTES)
        if not raw:
            break
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        else:
            _skip_rest_of_line(handle)
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        lines.append(raw)
    return lines


def _count_remaining_lines(handle: BinaryIO) -> tuple[int, bool]:
    """Count lines left in ``handle``, reading at most ``_COUNT_BYTES_LIMIT``."""
    count = 0
    budget = _COUNT_BYTES_LIMIT
    last = b"\n"
    while budget > 0:
        chunk = handle.read(min(_READ_CHUNK_BYTES, budget))
        if not chunk:
            break
        count += chunk.count(b"\n")
        last = chunk[-1:]
        budget -= len(chunk)
    else:
        if handle.read(1):
            return max(count, 1), False
    if last != b"\n":
        count += 1
    return count, True


def read_preview_lines(target: Path, max_lines: int) -> tuple[list[str], int, bool]:
    """Return ``(lines, hidden_count, hidden_count_exact)`` for ``target``.

    Lines are decoded and stripped of terminal control bytes. Raises
    ``PreviewReadError`` for directories, binary files, and any OS error,
    including errors from the initial stat.
    """
    try:
        if target.is_dir():
            raise PreviewReadError(target, "is a directory")
        with target.open("rb") as handle:
            if b"\0" in handle.read(_BINARY_SNIFF_BYTES):
                raise PreviewReadError(target, "binary file")
            handle.seek(0)
            head = _read_head_lines(handle, max_lines)
            hidden, exact = _count_remaining_lines(handle)
    except FileNotFoundError as exc:
        raise PreviewReadError(target, "no such file") from exc
    except PermissionError as exc:
        raise PreviewReadError(target, "permission denied") from exc
    except OSError as exc:
        raise PreviewReadError(target, exc.strerror or str(exc)) from exc

    if not head:
        return [], hidden, exact
    text = decode_text(b"\n".join(head))
    # A stray carriage return would move the terminal cursor mid-row.
    lines = [sanitize_terminal_text(line).replace("\r", "\\x0d") for line in text.split("\n")]
    return lines, hidden, exact


def load_preview(
    path: str,
    cwd: Path | None = None,
    *,
    max_lines: int = PREVIEW_MAX_LINES_DEFAULT,
    highlight: bool = False,
    style: str = DEFAULT_STYLE,
) -> PreviewResult:
    """Load up to ``max_lines`` display lines for ``path`` relative to ``cwd``."""
    target = Path(path) if cwd is None else cwd / path
    try:
        lines, hidden, exact = read_preview_lines(target, max(1, max_lines))
    except PreviewReadError as exc:
        logger.info("preview unavailable for %s: %s", path, exc.reason)
        return PreviewResult(error=exc)

    if highlight:
        lines = colorize_lines(lines, target, style)
    return PreviewResult(lines=lines, hidden_line_count=hidden, hidden_count_exact=exact)
