"""Capability interface shared by the browser's sub-views."""

from __future__ import annotations

from typing import Protocol

from .keymap import KeyBinding


class Operation(Protocol):
    """A sub-view driven by the host loop.

    ``init``, ``handle_key`` and ``handle_message`` return effects for the
    host to execute; they never run commands themselves.
    """

    name: str

    def init(self) -> list[object]: ...

    def handle_key(self, key: str) -> list[object]: ...

    def handle_message(self, message: object) -> list[object]: ...

    def render(self, width: int, height: int) -> list[str]: ...

    def short_help(self) -> list[KeyBinding]: ...


__all__ = ["Operation"]
