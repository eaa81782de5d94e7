"""Persistent JSON config helpers.

Stores the UI theme, the ``jj`` executable, key overrides and the command
timeout. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

from ..jj.runner import DEFAULT_TIMEOUT_SECONDS
from .log import get_logger

APP_NAME = "lazyjj"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
JJ_BINARY_ENV = "LAZYJJ_JJ"
DEFAULT_JJ_BINARY = "jj"

logger = get_logger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks the UI.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_jj_binary() -> str:
    """Return the ``jj`` executable: environment, then config, then ``jj``."""
    from_env = os.environ.get(JJ_BINARY_ENV, "").strip()
    if from_env:
        return from_env
    return _load_string("jj_binary") or DEFAULT_JJ_BINARY


def load_key_overrides() -> dict[str, list[str]]:
    """Return per-action key lists from the ``keys`` object.

    Entries that are not lists of non-empty strings are dropped; action names
    are validated later by the keymap.
    """
    raw = load_config().get("keys")
    if not isinstance(raw, dict):
        return {}
    overrides: dict[str, list[str]] = {}
    for action, keys in raw.items():
        if not isinstance(action, str) or not isinstance(keys, list):
            continue
        cleaned = [key for key in keys if isinstance(key, str) and key]
        if cleaned:
            overrides[action] = cleaned
    return overrides


def load_command_timeout() -> float:
    """Timeout for synchronous ``jj`` calls; non-positive or non-numeric values are ignored."""
    value = load_config().get("command_timeout_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return float(value)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "JJ_BINARY_ENV",
    "load_command_timeout",
    "load_config",
    "load_jj_binary",
    "load_key_overrides",
    "load_theme_name",
    "save_config",
    "save_theme_name",
]
