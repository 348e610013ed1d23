"""X11 selection adapter - read PRIMARY, select and retype words

Highlighted text is read from the X11 PRIMARY selection with xclip, so
nothing touches the clipboard. Word selection and replacement are done by
sending keystrokes to the focused window with xdotool.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

logger = logging.getLogger(__name__)

# Time for the focused app to publish a new PRIMARY selection
SETTLE_DELAY = 0.05


class PrimarySelection:
    """The focused window's selection, seen through PRIMARY."""

    def __init__(self, settle_delay: float = SETTLE_DELAY):
        self._settle_delay = settle_delay

    def get_text(self) -> str:
        result = _run(["xclip", "-selection", "primary", "-o"])
        if result is None or result.returncode != 0:
            return ""
        # Keep surrounding spaces; they are replaced along with the word
        return result.stdout.removesuffix("\n")

    def select_word(self) -> None:
        # Jump to the word start, then extend to its end
        _run(["xdotool", "key", "--clearmodifiers", "ctrl+Left", "ctrl+shift+Right"])
        time.sleep(self._settle_delay)

    def insert_text(self, text: str, select: bool) -> None:
        if not text:
            return
        _run(["xdotool", "type", "--clearmodifiers", "--", text])
        if select:
            _run(
                [
                    "xdotool",
                    "key",
                    "--clearmodifiers",
                    "--repeat",
                    str(len(text)),
                    "shift+Left",
                ]
            )
        else:
            # Otherwise the next press would read the word just replaced
            _clear_primary()


class DesktopEditor:
    """The focused application, which exposes a single selection."""

    def __init__(self, selection: PrimarySelection | None = None):
        self._selection = selection or PrimarySelection()

    def get_selections(self) -> list[PrimarySelection]:
        return [self._selection]


def tools_available() -> bool:
    """True if both xclip and xdotool are installed."""
    return _has_cmd("xclip") and _has_cmd("xdotool")


def _has_cmd(name: str) -> bool:
    return shutil.which(name) is not None


def _clear_primary() -> None:
    # xclip -i stays alive to own the selection, so its output is not captured
    try:
        subprocess.run(
            ["xclip", "-selection", "primary", "-i"],
            input="",
            text=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=2.0,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Could not clear PRIMARY: {e}")


def _run(args: list[str]) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(args, capture_output=True, text=True, timeout=2.0)
    except FileNotFoundError:
        logger.warning(f"{args[0]} not installed. Install with: sudo apt install {args[0]}")
        return None
    except subprocess.TimeoutExpired:
        logger.warning(f"{args[0]} timed out")
        return None
