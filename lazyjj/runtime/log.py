"""Logging setup for lazyjj.

The TUI owns stdout/stderr, so records only ever go to a file. Until
``configure_logging`` runs, the package logger carries a ``NullHandler``
and stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from platformdirs import user_log_dir

APP_NAME: Final[str] = "lazyjj"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_PATH: Final[Path] = Path(user_log_dir(APP_NAME, appauthor=False)) / "lazyjj.log"
_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

logging.getLogger(APP_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str = "INFO", log_file: Path | None = None, fmt: str | None = None) -> Path:
    """Attach a file handler to the package logger and return its path.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG").
        log_file: Destination file. Defaults to the per-user log directory.
        fmt: Optional logging format string.
    """
    target = log_file if log_file is not None else DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(_normalize_level(level))
    package_logger.addHandler(handler)
    return target


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module or component."""

    return logging.getLogger(name)


def _normalize_level(level: str) -> int:
    normalized = level.strip().upper()
    return _LEVELS.get(normalized, logging.INFO)
