"""Modal confirmation gate for destructive file actions.

While a confirmation is pending every key is matched against its options
only; anything else is swallowed so the list underneath cannot change.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfirmationError
from ..keymap import KeyBinding
from ..ui_theme import UITheme

CANCEL_KEYS: tuple[str, ...] = ("ESC",)


@dataclass(frozen=True)
class ConfirmOption:
    label: str
    binding: KeyBinding
    effects: tuple[object, ...] = ()


@dataclass(frozen=True)
class PendingConfirmation:
    prompt: str
    selected_hint: str
    unselected_hint: str
    options: tuple[ConfirmOption, ...]


class ConfirmationGate:
    """Inactive/Active state machine around one ``PendingConfirmation``."""

    def __init__(self, cancel_keys: tuple[str, ...] = CANCEL_KEYS) -> None:
        self.cancel_keys = cancel_keys
        self.pending: PendingConfirmation | None = None

    @property
    def active(self) -> bool:
        return self.pending is not None

    def activate(self, pending: PendingConfirmation) -> None:
        if self.pending is not None:
            raise ConfirmationError(f"confirmation already pending: {self.pending.prompt!r}")
        self.pending = pending

    def close(self) -> None:
        self.pending = None

    def handle_key(self, key: str) -> tuple[bool, list[object]]:
        """Route one key; return ``(handled, effects)``.

        Triggering an option closes the gate and returns the option's effects.
        """
        pending = self.pending
        if pending is None:
            return False, []
        for option in pending.options:
            if option.binding.matches(key):
                self.close()
                return True, list(option.effects)
        if key in self.cancel_keys:
            self.close()
        return True, []

    def short_help(self) -> list[KeyBinding]:
        if self.pending is None:
            return []
        return [option.binding for option in self.pending.options]

    def render(self, theme: UITheme) -> list[str]:
        if self.pending is None:
            return []
        reset = theme.reset
        buttons = "  ".join(
            f"{theme.confirm_key}[{option.binding.help_key}]{reset} {theme.confirm_option}{option.label}{reset}"
            for option in self.pending.options
        )
        return [f"{theme.confirm_text}{self.pending.prompt}{reset}", buttons]


__all__ = ["CANCEL_KEYS", "ConfirmOption", "ConfirmationGate", "PendingConfirmation"]
