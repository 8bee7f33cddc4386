from __future__ import annotations

from dataclasses import dataclass

from ..branches import BranchList
from ..render.help import MODE_STATUS
from ..status.model import StatusSnapshot


@dataclass
class AppState:
    snapshot: StatusSnapshot
    mode: str = MODE_STATUS
    branches: BranchList | None = None
    prompt_text: str | None = None
    message: str = ""
    message_is_error: bool = False
    show_help: bool = False
    view_start: int = 0
    preserve_view: bool = False

    def set_message(self, message: str, *, error: bool = False) -> None:
        self.message = message
        self.message_is_error = error

    def clear_message(self) -> None:
        self.message = ""
        self.message_is_error = False
