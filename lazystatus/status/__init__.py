"""Status model and report parser."""

from .model import (
    SECTION_ORDER,
    SECTION_STAGED,
    SECTION_UNSTAGED,
    SECTION_UNTRACKED,
    Entry,
    StatusSnapshot,
)
from .parser import parse_status, unquote_path

__all__ = [
    "Entry",
    "StatusSnapshot",
    "SECTION_ORDER",
    "SECTION_UNTRACKED",
    "SECTION_UNSTAGED",
    "SECTION_STAGED",
    "parse_status",
    "unquote_path",
]
