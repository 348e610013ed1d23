"""Desktop workspace adapter: focused app as editor, external config editing."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Callable

from ..platform_utils import IS_LINUX, IS_MACOS, IS_WAYLAND, IS_WINDOWS, IS_X11
from .file_watcher import FileWatcher
from .selection import DesktopEditor, tools_available

logger = logging.getLogger(__name__)


class DesktopWorkspace:
    def __init__(self, editor_command: str = "", watch_interval: float = 1.0):
        self._editor_command = editor_command
        self._watch_interval = watch_interval
        self._editor: DesktopEditor | None = None

    def get_active_editor(self) -> DesktopEditor | None:
        if not (IS_LINUX and IS_X11):
            logger.debug("Selection toggling needs an X11 session")
            return None
        if IS_WAYLAND:
            logger.debug("Wayland session: only XWayland windows can be toggled")
        if self._editor is None:
            if not tools_available():
                logger.warning("xclip and xdotool are required. Install with: sudo apt install xclip xdotool")
                return None
            self._editor = DesktopEditor()
        return self._editor

    def open(self, path: Path, on_save: Callable[[], None]) -> FileWatcher:
        args = self.open_command(path)
        logger.info(f"Opening {path} with {args[0]}")
        try:
            subprocess.Popen(args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.error(f"Could not launch {args[0]}: {e}")
        return FileWatcher(path, on_save, self._watch_interval).start()

    def open_command(self, path: Path) -> list[str]:
        """Build the command line used to edit path."""
        command = self._editor_command or os.environ.get("EDITOR", "")
        if command:
            return [*shlex.split(command), str(path)]
        if IS_WINDOWS:
            return ["notepad", str(path)]
        if IS_MACOS:
            return ["open", "-t", str(path)]
        return ["xdg-open", str(path)]
