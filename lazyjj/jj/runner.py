"""Process execution for ``jj`` commands.

``run_sync`` captures output for parsing; ``run_async`` does the same on a
worker thread and hands the result to a callback; ``run_interactive`` hands the
terminal to ``jj`` (editors, diff tools) and only reports the exit status.
Failures are returned as ``CommandResult.error`` instead of being raised so
the UI loop never has to unwind subprocess exceptions.
"""

from __future__ import annotations

import os
import subprocess
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..errors import JJCommandError, JJNotFoundError, LazyJJError
from ..runtime.log import get_logger
from .commands import JJCommand

DEFAULT_TIMEOUT_SECONDS = 10.0
# Captured runs have no terminal; an editor jj opens (split descriptions) must
# return at once and leave the prefilled text as is.
CAPTURED_EDITOR = "true"

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one ``jj`` invocation."""

    command: JJCommand
    output: str
    error: LazyJJError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandRunner:
    """Run ``jj`` inside one repository with a fixed executable and timeout."""

    def __init__(
        self,
        cwd: Path,
        *,
        binary: str = "jj",
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.cwd = cwd
        self.binary = binary
        self.timeout_seconds = timeout_seconds

    def run_sync(self, command: JJCommand, *, timeout_seconds: float | None = None) -> CommandResult:
        """Run ``command`` to completion and capture stdout.

        ``timeout_seconds`` overrides the runner default; pass ``0`` to wait
        without a deadline.
        """
        timeout = self.timeout_seconds if timeout_seconds is None else (timeout_seconds or None)
        logger.debug("running %s (timeout=%s)", command, timeout)
        try:
            proc = subprocess.run(
                command.argv(self.binary),
                cwd=str(self.cwd),
                env={**os.environ, "JJ_EDITOR": CAPTURED_EDITOR},
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=timeout,
            )
        except FileNotFoundError:
            return self._failed(command, "", JJNotFoundError(self.binary))
        except subprocess.TimeoutExpired:
            return self._failed(command, "", JJCommandError(str(command), None, f"timed out after {timeout}s"))
        except OSError as exc:
            return self._failed(command, "", JJCommandError(str(command), None, str(exc)))

        if proc.returncode != 0:
            output = proc.stdout + proc.stderr
            return self._failed(command, output, JJCommandError(str(command), proc.returncode, proc.stderr))
        return CommandResult(command=command, output=proc.stdout)

    def run_async(
        self,
        command: JJCommand,
        on_done: Callable[[CommandResult], None],
        *,
        timeout_seconds: float | None = None,
    ) -> threading.Thread:
        """Run ``command`` on a daemon thread and hand the result to ``on_done``."""

        def worker() -> None:
            on_done(self.run_sync(command, timeout_seconds=timeout_seconds))

        thread = threading.Thread(target=worker, name="lazyjj-worker", daemon=True)
        thread.start()
        return thread

    def run_interactive(self, command: JJCommand) -> CommandResult:
        """Run ``command`` attached to the caller's terminal.

        The caller is responsible for leaving raw/alternate-screen mode first.
        """
        logger.debug("running interactively %s", command)
        try:
            proc = subprocess.run(command.argv(self.binary), cwd=str(self.cwd), check=False)
        except FileNotFoundError:
            return self._failed(command, "", JJNotFoundError(self.binary))
        except OSError as exc:
            return self._failed(command, "", JJCommandError(str(command), None, str(exc)))
        if proc.returncode != 0:
            return self._failed(command, "", JJCommandError(str(command), proc.returncode, ""))
        return CommandResult(command=command, output="")

    @staticmethod
    def _failed(command: JJCommand, output: str, error: LazyJJError) -> CommandResult:
        logger.warning("%s", error)
        return CommandResult(command=command, output=output, error=error)


__all__ = ["CAPTURED_EDITOR", "CommandResult", "CommandRunner", "DEFAULT_TIMEOUT_SECONDS"]
