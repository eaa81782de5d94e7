"""Details view: changed files of one revision and the actions on them.

Keys either move/check rows locally or produce effects (``jj`` commands,
notifications) for the host. Split, restore and absorb go through the
confirmation gate first.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line
from ..context import SelectedFile, SelectionRegistry
from ..input import KeyComboBinding, KeyComboRegistry
from ..jj import commands as jj
from ..jj.revision import Revision
from ..keymap import DetailsKeyMap, KeyBinding
from ..messages import (
    Close,
    CloseConfirmation,
    FetchDiff,
    LoadStatus,
    Refresh,
    RunAsync,
    RunInteractive,
    SelectionChanged,
    StartSquash,
    StatusLoaded,
    UpdateRevset,
)
from ..runtime.log import get_logger
from ..ui_theme import DEFAULT_THEME, UITheme
from .confirmation import ConfirmationGate, ConfirmOption, PendingConfirmation
from .file_list import FileItem, SelectionList
from .rendering import render_details
from .status_parser import parse_status

SPLIT_HINTS = ("stays as is", "moves to the new revision")
RESTORE_HINTS = ("gets restored", "stays as is")
ABSORB_HINTS = ("might get absorbed into parents", "stays as is")

logger = get_logger(__name__)


class DetailsOperation:
    """Dispatcher for the file details of ``revision``."""

    name = "details"

    def __init__(
        self,
        revision: Revision,
        registry: SelectionRegistry,
        *,
        keymap: DetailsKeyMap | None = None,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.revision = revision
        self.registry = registry
        self.keymap = keymap if keymap is not None else DetailsKeyMap()
        self.theme = theme
        self.files = SelectionList()
        self.confirmation = ConfirmationGate()
        self._keys = self._build_key_registry()

    def _build_key_registry(self) -> KeyComboRegistry:
        keymap = self.keymap
        return KeyComboRegistry().register_bindings(
            KeyComboBinding(keymap.up.keys, self._cursor_up),
            KeyComboBinding(keymap.down.keys, self._cursor_down),
            KeyComboBinding(keymap.cancel.keys, self._close),
            KeyComboBinding(keymap.close.keys, self._close),
            KeyComboBinding(keymap.refresh.keys, self._refresh),
            KeyComboBinding(keymap.diff.keys, self._diff),
            KeyComboBinding(keymap.toggle_select.keys, self._toggle_select),
            KeyComboBinding(keymap.split.keys, lambda: self._confirm_split(parallel=False)),
            KeyComboBinding(keymap.split_parallel.keys, lambda: self._confirm_split(parallel=True)),
            KeyComboBinding(keymap.squash.keys, self._squash),
            KeyComboBinding(keymap.restore.keys, self._confirm_restore),
            KeyComboBinding(keymap.absorb.keys, self._confirm_absorb),
            KeyComboBinding(keymap.revisions_changing_file.keys, self._show_files_history),
        )

    def init(self) -> list[object]:
        return [self._load()]

    def set_revision(self, revision: Revision) -> list[object]:
        """Switch to another revision; checked files do not carry over."""
        if revision.change_id == self.revision.change_id:
            self.revision = revision
            return []
        self.revision = revision
        self.confirmation.close()
        self.files.replace([], ())
        self.registry.clear_checked_items(SelectedFile)
        return [LoadStatus(revision, ())]

    def handle_key(self, key: str) -> list[object]:
        previous_cursor = self.files.cursor
        if self.confirmation.active:
            _handled, effects = self.confirmation.handle_key(key)
        else:
            effects = self._keys.dispatch(key) or []
        current = self.files.current()
        if self.files.cursor != previous_cursor and current is not None:
            effects.append(self._select(current))
        return effects

    def handle_message(self, message: object) -> list[object]:
        if isinstance(message, Refresh):
            return [self._load()]
        if isinstance(message, CloseConfirmation):
            self.confirmation.close()
            return []
        if isinstance(message, StatusLoaded):
            return self._apply_status(message)
        return []

    def render(self, width: int, height: int) -> list[str]:
        lines = render_details(self.files, self.confirmation, self.theme, height)
        return [clip_ansi_line(line, width) for line in lines]

    def short_help(self) -> list[KeyBinding]:
        if self.confirmation.active:
            return self.confirmation.short_help()
        return self.keymap.short_help()

    def _load(self) -> LoadStatus:
        return LoadStatus(self.revision, tuple(self.files.checked_names()))

    def _selected_file(self, item: FileItem) -> SelectedFile:
        return SelectedFile(
            change_id=self.revision.change_id,
            commit_id=self.revision.commit_id,
            file=item.file_name,
        )

    def _select(self, item: FileItem) -> SelectionChanged:
        selected = self._selected_file(item)
        self.registry.set_selected_item(selected)
        return SelectionChanged(selected)

    def _apply_status(self, message: StatusLoaded) -> list[object]:
        if message.change_id != self.revision.change_id:
            logger.debug("discarding status for %s; now showing %s", message.change_id, self.revision.change_id)
            return []
        if message.commit_id and message.commit_id != self.revision.commit_id:
            self.revision = Revision(change_id=self.revision.change_id, commit_id=message.commit_id)
        items = parse_status(message.summary)
        # Checks toggled while the load was in flight are kept too.
        self.files.replace(items, (*message.selected_files, *self.files.checked_names()))
        self.registry.clear_checked_items(SelectedFile)
        for item in self.files.items:
            if item.selected:
                self.registry.add_checked_item(self._selected_file(item))
        current = self.files.current()
        if current is None:
            return []
        return [self._select(current)]

    def _cursor_up(self) -> list[object]:
        self.files.cursor_up()
        return []

    def _cursor_down(self) -> list[object]:
        self.files.cursor_down()
        return []

    def _close(self) -> list[object]:
        return [Close()]

    def _refresh(self) -> list[object]:
        return [Refresh()]

    def _diff(self) -> list[object]:
        current = self.files.current()
        if current is None:
            return []
        return [FetchDiff(jj.diff(self.revision.change_id, current.file_name))]

    def _toggle_select(self) -> list[object]:
        item = self.files.toggle_current_selected()
        if item is None:
            return []
        checked = self._selected_file(item)
        if item.selected:
            self.registry.add_checked_item(checked)
        else:
            self.registry.remove_checked_item(checked)
        return []

    def _squash(self) -> list[object]:
        files = self.files.effective_selection()
        if not files:
            return []
        return [StartSquash(self.revision, tuple(files))]

    def _show_files_history(self) -> list[object]:
        current = self.files.current()
        if current is None:
            return []
        return [Close(), UpdateRevset(f"files({jj.escape_file_name(current.file_name)})")]

    def _option(self, label: str, binding: KeyBinding, *effects: object) -> ConfirmOption:
        return ConfirmOption(label=label, binding=binding, effects=tuple(effects))

    def _ask(self, prompt: str, hints: tuple[str, str], *options: ConfirmOption) -> list[object]:
        selected_hint, unselected_hint = hints
        self.confirmation.activate(
            PendingConfirmation(
                prompt=prompt,
                selected_hint=selected_hint,
                unselected_hint=unselected_hint,
                options=(*options, self._option("No", self.keymap.confirm_no)),
            )
        )
        return []

    def _confirm_split(self, *, parallel: bool) -> list[object]:
        current = self.files.current()
        if current is None:
            return []
        change_id = self.revision.change_id
        files = self.files.effective_selection()
        follow_up = (Refresh(), CloseConfirmation())
        yes = self._option(
            "Yes",
            self.keymap.confirm_yes,
            RunAsync(jj.split(change_id, files, parallel), follow_up),
        )
        if parallel:
            return self._ask("Are you sure you want to split the selected files in parallel?", SPLIT_HINTS, yes)
        interactive = self._option(
            "Interactive",
            self.keymap.confirm_interactive,
            RunInteractive(jj.split_interactive(change_id, current.file_name), follow_up),
        )
        return self._ask("Are you sure you want to split the selected files?", SPLIT_HINTS, yes, interactive)

    def _confirm_restore(self) -> list[object]:
        current = self.files.current()
        if current is None:
            return []
        change_id = self.revision.change_id
        follow_up = (Refresh(), CloseConfirmation())
        return self._ask(
            "Are you sure you want to restore the selected files?",
            RESTORE_HINTS,
            self._option(
                "Yes",
                self.keymap.confirm_yes,
                RunAsync(jj.restore(change_id, self.files.effective_selection()), follow_up),
            ),
            self._option(
                "Interactive",
                self.keymap.confirm_interactive,
                RunInteractive(jj.restore_interactive(change_id, current.file_name), follow_up),
            ),
        )

    def _confirm_absorb(self) -> list[object]:
        if self.files.current() is None:
            return []
        return self._ask(
            "Are you sure you want to absorb changes from the selected files?",
            ABSORB_HINTS,
            self._option(
                "Yes",
                self.keymap.confirm_yes,
                RunAsync(
                    jj.absorb(self.revision.change_id, *self.files.effective_selection()),
                    (Refresh(), CloseConfirmation()),
                ),
            ),
        )


__all__ = ["ABSORB_HINTS", "DetailsOperation", "RESTORE_HINTS", "SPLIT_HINTS"]
