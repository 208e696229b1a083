# settings_store.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from PySide6.QtCore import QStandardPaths

logger = logging.getLogger(__name__)

APP_NAME = "LocProviderSample"
SETTINGS_FILE_NAME = "settings.json"

# Keys used by the sample application
CULTURE_SETTING = "culture"


def app_config_dir() -> Path:
    """
    Return the per-user configuration directory of the sample application,
    creating it if needed.
    """
    base = Path(QStandardPaths.writableLocation(QStandardPaths.AppConfigLocation))
    cfg = base / APP_NAME
    cfg.mkdir(parents=True, exist_ok=True)
    return cfg


def settings_path() -> Path:
    return app_config_dir() / SETTINGS_FILE_NAME


def load_settings() -> Dict[str, Any]:
    """Load settings.json, returning {} if missing or invalid."""
    path = settings_path()
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: not a JSON object")
        return {}
    return data


def save_settings(data: Dict[str, Any]) -> None:
    """Write JSON through a temp file and swap it in."""
    path = settings_path()
    tmp = path.with_suffix(".tmp")

    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)

    tmp.replace(path)


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any | None) -> None:
    """Store ``value`` under ``key``; ``None`` removes the key."""
    data = load_settings()
    if value is None:
        data.pop(key, None)
    else:
        data[key] = value
    save_settings(data)


def load_culture() -> str | None:
    """Return the saved culture tag, or None if unset or not a string."""
    value = get_setting(CULTURE_SETTING, None)
    if isinstance(value, str) and value.strip():
        return value.strip()
    if value is not None:
        logger.warning(f"Ignoring saved culture of type {type(value).__name__}")
    return None


def save_culture(tag: str | None) -> None:
    set_setting(CULTURE_SETTING, tag or None)
