"""Exception hierarchy shared by the jj runner and the details view."""

from __future__ import annotations


class LazyJJError(Exception):
    """Base class for every error raised by lazyjj itself."""


class JJNotFoundError(LazyJJError):
    """The configured ``jj`` executable could not be started."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"jj executable not found: {binary!r}")
        self.binary = binary


class JJCommandError(LazyJJError):
    """A ``jj`` invocation failed, timed out, or exited non-zero."""

    def __init__(self, command: str, returncode: int | None, stderr: str) -> None:
        detail = stderr.strip() or "no error output"
        if returncode is None:
            message = f"{command} failed: {detail}"
        else:
            message = f"{command} exited with status {returncode}: {detail}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ConfirmationError(LazyJJError):
    """A confirmation was activated while another one was still pending."""
