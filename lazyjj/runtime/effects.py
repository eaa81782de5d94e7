"""Execute effect descriptors returned by operations.

Each effect runs ``jj`` through a ``CommandRunner`` and reports back by
posting messages; the UI loop only ever sees those messages.
"""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Callable
from typing import ContextManager

from ..jj import commands as jj
from ..jj.revision import parse_revision_line
from ..jj.runner import CommandResult, CommandRunner
from ..messages import (
    COMMAND_EFFECTS,
    CommandCompleted,
    FetchDiff,
    LoadStatus,
    RunAsync,
    RunInteractive,
    ShowDiff,
    StatusLoaded,
)
from .log import get_logger

logger = get_logger(__name__)

# Mutations are never cut short; the runner timeout only bounds reads.
MUTATION_TIMEOUT_SECONDS = 0


class EffectExecutor:
    """Run command effects and post their result messages.

    ``post`` must be thread-safe; load and async effects call it from worker
    threads. ``suspend`` returns a context manager that releases the terminal
    while an interactive command runs.
    """

    def __init__(
        self,
        runner: CommandRunner,
        post: Callable[[object], None],
        suspend: Callable[[], ContextManager[object]] | None = None,
    ) -> None:
        self.runner = runner
        self.post = post
        self.suspend = suspend if suspend is not None else contextlib.nullcontext
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    @staticmethod
    def handles(effect: object) -> bool:
        return isinstance(effect, COMMAND_EFFECTS)

    def execute(self, effect: object, *, background: bool = True) -> None:
        """Run one effect; ``background=False`` keeps load and async work inline."""
        if isinstance(effect, LoadStatus):
            self._spawn(lambda: self._load_status(effect), background)
        elif isinstance(effect, FetchDiff):
            self._fetch_diff(effect)
        elif isinstance(effect, RunAsync):
            if background:
                thread = self.runner.run_async(
                    effect.command,
                    lambda result: self._finish(result, effect.on_success),
                    timeout_seconds=MUTATION_TIMEOUT_SECONDS,
                )
                self._track(thread)
            else:
                result = self.runner.run_sync(effect.command, timeout_seconds=MUTATION_TIMEOUT_SECONDS)
                self._finish(result, effect.on_success)
        elif isinstance(effect, RunInteractive):
            self._run_interactive(effect)
        else:
            raise TypeError(f"not a command effect: {effect!r}")

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Join outstanding workers; return whether all of them finished."""
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
        with self._lock:
            self._threads = [thread for thread in self._threads if thread.is_alive()]
            return not self._threads

    def _spawn(self, work: Callable[[], None], background: bool) -> None:
        if not background:
            work()
            return
        thread = threading.Thread(target=work, name="lazyjj-worker", daemon=True)
        thread.start()
        self._track(thread)

    def _track(self, thread: threading.Thread) -> None:
        with self._lock:
            self._threads = [item for item in self._threads if item.is_alive()]
            self._threads.append(thread)

    def _report(self, result: CommandResult) -> None:
        self.post(CommandCompleted(command=str(result.command), output=result.output, error=result.error))

    def _load_status(self, effect: LoadStatus) -> None:
        snapshot = self.runner.run_sync(jj.snapshot())
        if not snapshot.ok:
            self._report(snapshot)
            return
        change_id = effect.revision.change_id
        status = self.runner.run_sync(jj.status(change_id))
        if not status.ok:
            self._report(status)
            return
        self.post(
            StatusLoaded(
                change_id=change_id,
                summary=status.output,
                selected_files=effect.selected_files,
                commit_id=self._current_commit_id(change_id),
            )
        )

    def _current_commit_id(self, change_id: str) -> str:
        # Rewrites keep the change id but move the commit id.
        result = self.runner.run_sync(jj.resolve_revision(change_id))
        revision = parse_revision_line(result.output) if result.ok else None
        return revision.commit_id if revision is not None else ""

    def _fetch_diff(self, effect: FetchDiff) -> None:
        result = self.runner.run_sync(effect.command)
        if not result.ok:
            self._report(result)
            return
        self.post(ShowDiff(result.output))

    def _finish(self, result: CommandResult, on_success: tuple[object, ...]) -> None:
        self._report(result)
        if result.ok:
            for message in on_success:
                self.post(message)

    def _run_interactive(self, effect: RunInteractive) -> None:
        with self.suspend():
            result = self.runner.run_interactive(effect.command)
        self._finish(result, effect.on_success)
        if not result.ok:
            logger.info("interactive command %s did not complete", effect.command)


__all__ = ["EffectExecutor"]
