"""JSON-based settings persistence for the month grid calendar."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.environ.get(
    "MONTH_GRID_SETTINGS",
    os.path.join(os.path.expanduser("~"), ".month-grid-calendar.json"),
)

_DEFAULTS = {
    "window_width": None,
    "window_height": None,
    "show_adjacent_days": True,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        # bool is an int subclass, reject it explicitly
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    if isinstance(stored.get("show_adjacent_days"), bool):
        settings["show_adjacent_days"] = stored["show_adjacent_days"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", _SETTINGS_PATH)
