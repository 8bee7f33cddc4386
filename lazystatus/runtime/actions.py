"""Operations the runtime loop binds to keys.

Local operations mutate ``AppState`` directly. Operations that go through
the gateway may raise ``LazyStatusError``; the loop converts those into
messages, so a failed action leaves the previous snapshot in place.
"""

from __future__ import annotations

import logging

from ..branches import BranchList
from ..gateway import GitGateway
from ..keys import PROMPT_CANCEL, PROMPT_SUBMIT, BranchKeyActions, StatusKeyActions, edit_prompt
from ..render.help import MODE_BRANCHES, MODE_STATUS
from ..status import StatusSnapshot, parse_status
from .state import AppState

logger = logging.getLogger(__name__)


def fetch_snapshot(gateway: GitGateway) -> StatusSnapshot:
    """Run a status inquiry and parse it into a fresh snapshot."""
    return parse_status(gateway.status_report())


class RuntimeActions:
    """Key-facing operations over one ``AppState`` and one gateway."""

    def __init__(self, state: AppState, gateway: GitGateway) -> None:
        self.state = state
        self.gateway = gateway

    def refresh(self) -> None:
        """Replace the snapshot with a freshly parsed one.

        By default the cursor returns to the top and every entry collapses;
        with ``preserve_view`` both are carried over by path.
        """
        snapshot = fetch_snapshot(self.gateway)
        if self.state.preserve_view:
            snapshot.carry_view_from(self.state.snapshot)
        else:
            self.state.view_start = 0
        self.state.snapshot = snapshot
        logger.debug("refreshed status, %d entries", snapshot.total)

    def refresh_with_message(self) -> None:
        self.refresh()
        self.state.set_message("Refreshed")

    def stage_all(self) -> None:
        self.gateway.stage_all()
        self.refresh()
        self.state.set_message("Staged all changes")

    def move_down(self) -> None:
        self.state.snapshot.move_down()

    def move_up(self) -> None:
        self.state.snapshot.move_up()

    def toggle_expand(self) -> None:
        self.state.snapshot.toggle_expand()

    def toggle_help(self) -> None:
        self.state.show_help = not self.state.show_help

    def dismiss_message(self) -> None:
        self.state.clear_message()

    def open_branches(self) -> None:
        branches = BranchList.from_report(self.gateway.list_branches())
        self.state.branches = branches
        self.state.mode = MODE_BRANCHES
        self.state.prompt_text = None

    def close_branches(self) -> None:
        self.state.mode = MODE_STATUS
        self.state.branches = None
        self.state.prompt_text = None

    def move_branch(self, delta: int) -> None:
        if self.state.branches is not None:
            self.state.branches.move(delta)

    def checkout_selected(self) -> None:
        branches = self.state.branches
        if branches is None:
            return
        name = branches.selected_name()
        if name is None:
            self.state.set_message("Nothing to check out here", error=True)
            return
        if name == branches.current_name():
            self.close_branches()
            return
        self.gateway.checkout(name)
        self.close_branches()
        self.refresh()
        self.state.set_message(f"Switched to branch {name}")

    def open_prompt(self) -> None:
        self.state.prompt_text = ""

    def handle_prompt_key(self, key: str) -> None:
        """Edit the new-branch prompt; submit runs ``git checkout -b``."""
        text, outcome = edit_prompt(self.state.prompt_text or "", key)
        if outcome == PROMPT_CANCEL:
            self.state.prompt_text = None
            return
        if outcome != PROMPT_SUBMIT:
            self.state.prompt_text = text
            return
        if not text.strip():
            self.state.prompt_text = None
            return
        self.state.prompt_text = None
        name = text.strip()
        self.gateway.create_branch(name)
        self.close_branches()
        self.refresh()
        self.state.set_message(f"Switched to a new branch {name}")

    def status_key_actions(self) -> StatusKeyActions:
        return StatusKeyActions(
            move_down=self.move_down,
            move_up=self.move_up,
            toggle_expand=self.toggle_expand,
            stage_all=self.stage_all,
            refresh=self.refresh_with_message,
            open_branches=self.open_branches,
            toggle_help=self.toggle_help,
            dismiss_message=self.dismiss_message,
        )

    def branch_key_actions(self) -> BranchKeyActions:
        return BranchKeyActions(
            move_down=lambda: self.move_branch(1),
            move_up=lambda: self.move_branch(-1),
            checkout_selected=self.checkout_selected,
            open_prompt=self.open_prompt,
            close=self.close_branches,
            toggle_help=self.toggle_help,
        )
