"""Configuration for Toggler, read from the environment and .env"""

import os

from dotenv import load_dotenv

from .platform_utils import get_config_dir

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Config:
    """Runtime settings"""

    # Where toggler.json lives
    CONFIG_DIR = get_config_dir()

    # pynput hotkey syntax, e.g. "<ctrl>+<alt>+t"
    TOGGLE_HOTKEY = os.getenv("TOGGLE_HOTKEY", "<ctrl>+<alt>+t")
    CONFIG_HOTKEY = os.getenv("CONFIG_HOTKEY", "<ctrl>+<alt>+c")

    # Re-select the inserted word so the hotkey can be pressed again
    SELECT_AFTER_TOGGLE = _env_bool("SELECT_AFTER_TOGGLE", "true")

    NOTIFICATIONS_ENABLED = _env_bool("NOTIFICATIONS_ENABLED", "true")

    # Empty means $EDITOR, then xdg-open
    CONFIG_EDITOR = os.getenv("CONFIG_EDITOR", "")

    # Seconds between checks for a saved configuration file
    WATCH_INTERVAL = _env_float("WATCH_INTERVAL", 1.0)

    DEBUG = _env_bool("DEBUG", "false")


config = Config()
