import os
import json
import logging

from contrast_utils import AA_LARGE, AA_NORMAL

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
SETTINGS_ENV_VAR = "SHADE_RAMP_SETTINGS"

DEFAULT_SETTINGS = {
    "base_min_contrast": AA_LARGE,
    "dark_shade_min_contrast": AA_NORMAL,
    "always_on_top": False,
    "export_dir": "",
}

NUMERIC_SETTINGS = ("base_min_contrast", "dark_shade_min_contrast")


def settings_path(path=None):
    if path:
        return path
    return os.environ.get(SETTINGS_ENV_VAR) or SETTINGS_FILE


def load_settings(path=None):
    """
    Defaults merged with whatever the settings file provides.
    Unknown keys are dropped; an unreadable file falls back to defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = settings_path(path)
    if not os.path.exists(path):
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected an object", path)
        return settings

    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            logger.debug("Ignoring unknown setting %r", key)
        elif key in NUMERIC_SETTINGS:
            try:
                settings[key] = float(value)
            except (TypeError, ValueError):
                logger.warning("Ignoring setting %r: %r is not a number", key, value)
        else:
            settings[key] = value
    return settings


def save_settings(settings, path=None):
    path = settings_path(path)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    return True
