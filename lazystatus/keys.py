"""Key tables for the status view, the branch panel, and the branch prompt.

Handlers return ``True`` when the loop should quit. Unbound keys dispatch
to ``None`` and are ignored by the loop.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

PROMPT_SUBMIT = "submit"
PROMPT_CANCEL = "cancel"


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def is_bound(self, key: str) -> bool:
        return self._normalize(key) in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its result."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()


@dataclass(frozen=True)
class StatusKeyActions:
    move_down: Callable[[], None]
    move_up: Callable[[], None]
    toggle_expand: Callable[[], None]
    stage_all: Callable[[], None]
    refresh: Callable[[], None]
    open_branches: Callable[[], None]
    toggle_help: Callable[[], None]
    dismiss_message: Callable[[], None]


@dataclass(frozen=True)
class BranchKeyActions:
    move_down: Callable[[], None]
    move_up: Callable[[], None]
    checkout_selected: Callable[[], None]
    open_prompt: Callable[[], None]
    close: Callable[[], None]
    toggle_help: Callable[[], None]


def _quit() -> bool:
    return True


def _continue(action: Callable[[], None]) -> Callable[[], bool]:
    def handler() -> bool:
        action()
        return False

    return handler


def build_status_registry(actions: StatusKeyActions) -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "DOWN"), _continue(actions.move_down)),
        KeyComboBinding(("k", "UP"), _continue(actions.move_up)),
        KeyComboBinding(("TAB",), _continue(actions.toggle_expand)),
        KeyComboBinding(("S",), _continue(actions.stage_all)),
        KeyComboBinding(("r",), _continue(actions.refresh)),
        KeyComboBinding(("b",), _continue(actions.open_branches)),
        KeyComboBinding(("?",), _continue(actions.toggle_help)),
        KeyComboBinding(("ESC",), _continue(actions.dismiss_message)),
        KeyComboBinding(("q", "CTRL_C"), _quit),
    )


def build_branch_registry(actions: BranchKeyActions) -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "DOWN"), _continue(actions.move_down)),
        KeyComboBinding(("k", "UP"), _continue(actions.move_up)),
        KeyComboBinding(("ENTER",), _continue(actions.checkout_selected)),
        KeyComboBinding(("n",), _continue(actions.open_prompt)),
        KeyComboBinding(("ESC", "b"), _continue(actions.close)),
        KeyComboBinding(("?",), _continue(actions.toggle_help)),
        KeyComboBinding(("q", "CTRL_C"), _quit),
    )


def edit_prompt(text: str, key: str) -> tuple[str, str | None]:
    """Apply one key to a single-line prompt.

    Returns the new text and ``PROMPT_SUBMIT``/``PROMPT_CANCEL`` when the key
    ends the prompt. Non-printable tokens other than the editing keys are
    ignored.
    """
    if key == "ENTER":
        return text, PROMPT_SUBMIT
    if key in {"ESC", "CTRL_C"}:
        return text, PROMPT_CANCEL
    if key == "BACKSPACE":
        return text[:-1], None
    if key == "CTRL_U":
        return "", None
    if len(key) == 1 and key.isprintable():
        return text + key, None
    return text, None
