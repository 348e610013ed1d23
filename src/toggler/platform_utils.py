"""Platform detection and per-platform paths for Toggler"""

import os
import sys
from pathlib import Path

# Platform detection
IS_WINDOWS = sys.platform == "win32"
IS_LINUX = sys.platform.startswith("linux")
IS_MACOS = sys.platform == "darwin"

# Display system detection (Linux-specific)
IS_X11 = False
IS_WAYLAND = False

if IS_LINUX:
    session_type = os.environ.get("XDG_SESSION_TYPE", "").lower()
    IS_X11 = session_type == "x11" or os.environ.get("DISPLAY") is not None
    IS_WAYLAND = session_type == "wayland"

APP_NAME = "toggler"


def get_config_dir() -> Path:
    """Get the directory holding the toggle configuration.

    TOGGLER_CONFIG_DIR wins; otherwise the platform's usual config location.
    """
    override = os.environ.get("TOGGLER_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    if IS_WINDOWS:
        base = os.environ.get("APPDATA")
        return Path(base) / APP_NAME if base else Path.home() / APP_NAME
    if IS_MACOS:
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    return (Path(xdg) if xdg else Path.home() / ".config") / APP_NAME
