"""Optional JSON settings for the viewer.

The file is read-only from the viewer's point of view; nothing is persisted.
All access is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "twinview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_POLL_TIMEOUT_MS = 500
MIN_POLL_TIMEOUT_MS = 10
MAX_POLL_TIMEOUT_MS = 10_000
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ViewerConfig:
    poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _poll_timeout_ms(data: dict[str, object]) -> int:
    value = data.get("poll_timeout_ms")
    # bool is an int subclass; ``true`` is not a timeout.
    if not isinstance(value, int) or isinstance(value, bool):
        return DEFAULT_POLL_TIMEOUT_MS
    return max(MIN_POLL_TIMEOUT_MS, min(MAX_POLL_TIMEOUT_MS, value))


def _log_level(data: dict[str, object]) -> str:
    value = data.get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_viewer_config() -> ViewerConfig:
    """Resolve typed settings from the config file."""
    data = load_config()
    return ViewerConfig(poll_timeout_ms=_poll_timeout_ms(data), log_level=_log_level(data))
