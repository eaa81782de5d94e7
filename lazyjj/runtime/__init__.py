"""Runtime orchestration for the details view.

Groups the terminal host (`run_details_app`), effect execution, the event
loop, persisted config, and logging setup.
"""

from __future__ import annotations


def run_details_app(*args, **kwargs):
    """Lazily import the app entry point to avoid package-import cycles."""
    from .app import run_details_app as _run_details_app

    return _run_details_app(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = ["run_details_app", "run_main_loop"]
