"""Polling watcher that reports saves of a single file."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


class FileWatcher:
    """Calls on_change whenever the file's modification time changes.

    Returned by the workspace as the save subscription; dispose() stops it.
    """

    def __init__(self, path: Path, on_change: Callable[[], None], interval: float = 1.0):
        self._path = Path(path)
        self._on_change = on_change
        self._interval = interval
        self._last_mtime = self._mtime()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> "FileWatcher":
        self._thread = threading.Thread(target=self._watch, daemon=True)
        self._thread.start()
        return self

    def dispose(self) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self._interval + 1)
        self._thread = None

    def poll_once(self) -> bool:
        """Check the file once; returns True if a change was reported."""
        mtime = self._mtime()
        if mtime is None or mtime == self._last_mtime:
            return False
        self._last_mtime = mtime
        logger.debug(f"{self._path} saved")
        self._on_change()
        return True

    def _watch(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self.poll_once()
            except Exception as e:
                logger.error(f"Save handler failed for {self._path}: {e}")

    def _mtime(self) -> int | None:
        try:
            return self._path.stat().st_mtime_ns
        except OSError:
            return None
