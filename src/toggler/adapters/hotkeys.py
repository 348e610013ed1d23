"""Global hotkey adapter: binds Toggler commands to key combinations."""

from __future__ import annotations

import logging
from typing import Callable

from pynput import keyboard

logger = logging.getLogger(__name__)


class _Binding:
    def __init__(self, registry: "HotkeyRegistry", name: str):
        self._registry = registry
        self._name = name

    def dispose(self) -> None:
        self._registry.remove(self._name)


class HotkeyRegistry:
    """Command registry backed by a pynput keyboard listener.

    Args:
        bindings: Command name to hotkey in pynput syntax, e.g.
            {"toggler:toggle": "<ctrl>+<alt>+t"}.
    """

    def __init__(self, bindings: dict[str, str]):
        self._bindings = dict(bindings)
        self._hotkeys: dict[str, keyboard.HotKey] = {}
        self.listener = None

    def add(self, name: str, callback: Callable[[], None]) -> _Binding:
        combo = self._bindings.get(name)
        if combo is None:
            logger.warning(f"No hotkey configured for {name}")
        else:
            self._hotkeys[name] = keyboard.HotKey(
                keyboard.HotKey.parse(combo), _guarded(name, callback)
            )
            logger.debug(f"Bound {name} to {combo}")
        return _Binding(self, name)

    def remove(self, name: str) -> None:
        self._hotkeys.pop(name, None)

    def start(self):
        """Start keyboard listener"""
        self.listener = keyboard.Listener(on_press=self._on_press, on_release=self._on_release)
        self.listener.start()

    def stop(self):
        """Stop keyboard listener"""
        if self.listener:
            self.listener.stop()
            self.listener = None

    def describe(self) -> dict[str, str]:
        return {name: self._bindings[name] for name in self._hotkeys}

    def _on_press(self, key):
        key = self._canonical(key)
        for hotkey in list(self._hotkeys.values()):
            hotkey.press(key)

    def _on_release(self, key):
        key = self._canonical(key)
        for hotkey in list(self._hotkeys.values()):
            hotkey.release(key)

    def _canonical(self, key):
        return self.listener.canonical(key) if self.listener else key


def _guarded(name: str, callback: Callable[[], None]) -> Callable[[], None]:
    # Exceptions would otherwise stop the listener thread
    def run():
        try:
            callback()
        except Exception as e:
            logger.exception(f"Command {name} failed: {e}")

    return run
