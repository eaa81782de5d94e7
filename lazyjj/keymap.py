"""Key bindings for the details view and its confirmation prompts.

Bindings hold key tokens as produced by :func:`lazyjj.input.read_key` plus
the short help label shown in the footer. User overrides come from the
``keys`` object of the persisted config.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

_KEY_LABELS: dict[str, str] = {
    "UP": "↑",
    "DOWN": "↓",
    "LEFT": "←",
    "RIGHT": "→",
    "ESC": "esc",
    "ENTER": "enter",
    "SPACE": "space",
    "CTRL_R": "ctrl+r",
}


@dataclass(frozen=True)
class KeyBinding:
    keys: tuple[str, ...]
    help: str

    @property
    def help_key(self) -> str:
        return "/".join(_KEY_LABELS.get(key, key) for key in self.keys)

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True)
class DetailsKeyMap:
    up: KeyBinding = KeyBinding(("UP", "k"), "up")
    down: KeyBinding = KeyBinding(("DOWN", "j"), "down")
    cancel: KeyBinding = KeyBinding(("ESC",), "cancel")
    close: KeyBinding = KeyBinding(("h", "LEFT"), "close")
    refresh: KeyBinding = KeyBinding(("CTRL_R",), "refresh")
    diff: KeyBinding = KeyBinding(("d", "ENTER"), "diff")
    toggle_select: KeyBinding = KeyBinding(("SPACE", "m"), "select")
    split: KeyBinding = KeyBinding(("s",), "split")
    split_parallel: KeyBinding = KeyBinding(("S",), "split parallel")
    squash: KeyBinding = KeyBinding(("q",), "squash")
    restore: KeyBinding = KeyBinding(("r",), "restore")
    absorb: KeyBinding = KeyBinding(("A",), "absorb")
    revisions_changing_file: KeyBinding = KeyBinding(("*",), "file history")
    confirm_yes: KeyBinding = KeyBinding(("y",), "yes")
    confirm_interactive: KeyBinding = KeyBinding(("i",), "interactive")
    confirm_no: KeyBinding = KeyBinding(("n", "ESC"), "no")

    def short_help(self) -> list[KeyBinding]:
        return [
            self.cancel,
            self.diff,
            self.toggle_select,
            self.split,
            self.split_parallel,
            self.squash,
            self.restore,
            self.absorb,
            self.revisions_changing_file,
        ]

    @classmethod
    def action_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    def with_overrides(self, overrides: Mapping[str, object]) -> DetailsKeyMap:
        """Return a copy with key lists replaced for known actions.

        Unknown actions, non-list values, and non-string keys are ignored.
        """
        known = set(self.action_names())
        changes: dict[str, KeyBinding] = {}
        for action, raw_keys in overrides.items():
            if action not in known or not isinstance(raw_keys, (list, tuple)):
                continue
            keys = tuple(key for key in raw_keys if isinstance(key, str) and key)
            if not keys:
                continue
            current: KeyBinding = getattr(self, action)
            changes[action] = KeyBinding(keys, current.help)
        return replace(self, **changes)


__all__ = ["DetailsKeyMap", "KeyBinding"]
