"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config(source=env_config) -> AppConfig:
    return AppConfig(
        config_dir=source.CONFIG_DIR,
        toggle_hotkey=source.TOGGLE_HOTKEY,
        config_hotkey=source.CONFIG_HOTKEY,
        select_after_toggle=source.SELECT_AFTER_TOGGLE,
        notifications_enabled=source.NOTIFICATIONS_ENABLED,
        config_editor=source.CONFIG_EDITOR,
        watch_interval=source.WATCH_INTERVAL,
        debug=source.DEBUG,
    )
