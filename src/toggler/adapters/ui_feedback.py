"""Desktop notification adapter (notify-send)."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


class NotifySendFeedback:
    def __init__(self, enabled: bool = True, timeout: int = 4):
        self._enabled = enabled
        self._timeout = timeout

    def warning(self, title: str, message: str) -> None:
        logger.warning(message)
        self._notify(title, message, urgency="normal")

    def error(self, title: str, message: str, detail: str | None = None) -> None:
        logger.error(f"{message} ({detail})" if detail else message)
        body = f"{message}\n{detail}" if detail else message
        self._notify(title, body, urgency="critical")

    def _notify(self, title: str, message: str, urgency: str) -> None:
        if not self._enabled:
            return
        try:
            subprocess.run(
                ["notify-send", "-u", urgency, "-t", str(self._timeout * 1000), title, message],
                timeout=2,
                capture_output=True,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.debug(f"notify-send unavailable: {e}")
