"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path
    toggle_hotkey: str
    config_hotkey: str
    select_after_toggle: bool
    notifications_enabled: bool
    config_editor: str
    watch_interval: float
    debug: bool
