"""Persistent display settings for the scoring command line.

Stores user preferences in ~/.yahtzee_scoring.json.
Rule configuration is fixed in rule_catalogue and is not stored here.
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULTS = {
    "show_descriptions": True,
    "hide_zero": False,
    "sort_by": "catalogue",
}

SORT_CHOICES = ("catalogue", "score")


def _default_path():
    """Return the default path for the settings file."""
    return Path.home() / ".yahtzee_scoring.json"


def _is_valid(key, value):
    if key == "sort_by":
        return value in SORT_CHOICES
    return isinstance(value, bool)


def load_settings(path=None):
    """Load settings from JSON file. Returns DEFAULTS on missing/corrupt.

    Merges with DEFAULTS so missing keys get default values.
    Unknown keys are ignored, and known keys with invalid values keep
    their default.
    """
    if path is None:
        path = _default_path()
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return dict(DEFAULTS)
    except (json.JSONDecodeError, OSError):
        logger.debug("Could not read settings from %s", path, exc_info=True)
        return dict(DEFAULTS)

    if not isinstance(data, dict):
        logger.debug("Ignoring settings file %s: not a JSON object", path)
        return dict(DEFAULTS)

    # Merge: only keep known keys, fill missing from defaults
    result = dict(DEFAULTS)
    for key in DEFAULTS:
        if key in data and _is_valid(key, data[key]):
            result[key] = data[key]
    return result


def save_settings(settings, path=None):
    """Write settings dict to JSON atomically. Logs and ignores write errors."""
    if path is None:
        path = _default_path()
    path = Path(path)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(json.dumps(settings, indent=2))
        os.replace(tmp_path, path)
    except OSError:
        logger.warning("Could not save settings to %s", path, exc_info=True)
