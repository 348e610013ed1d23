#!/usr/bin/env python3
"""Toggler: press a hotkey to swap the selected word with its next toggle"""

import logging
import signal
import threading

from .adapters.config_env import load_app_config
from .adapters.hotkeys import HotkeyRegistry
from .adapters.ui_feedback import NotifySendFeedback
from .adapters.workspace import DesktopWorkspace
from .core.config_model import AppConfig
from .core.controller import CONFIG_COMMAND, TOGGLE_COMMAND, TogglerController
from .core.store import CONFIG_FILENAME, ConfigurationStore
from .platform_utils import IS_WINDOWS


class Toggler:
    """Main application - hotkeys drive the toggle and config commands"""

    def __init__(self, app_config: AppConfig):
        self.app_config = app_config
        self.store = ConfigurationStore(app_config.config_dir / CONFIG_FILENAME)
        self.hotkeys = HotkeyRegistry(
            {
                TOGGLE_COMMAND: app_config.toggle_hotkey,
                CONFIG_COMMAND: app_config.config_hotkey,
            }
        )
        self.controller = TogglerController(
            store=self.store,
            workspace=DesktopWorkspace(app_config.config_editor, app_config.watch_interval),
            ui=NotifySendFeedback(enabled=app_config.notifications_enabled),
            commands=self.hotkeys,
            select_after_toggle=app_config.select_after_toggle,
        )
        self._shutdown_event = threading.Event()

    def run(self):
        """Run the application"""
        self.controller.activate()

        print("\n" + "=" * 50)
        print("🔁 Toggler")
        print("=" * 50)
        for command, hotkey in self.hotkeys.describe().items():
            print(f"{command}: {hotkey}")
        print(f"Config file: {self.store.config_path}")
        print("\nSelect a word (or place the cursor in one) and press the toggle hotkey")
        print("Press Ctrl+C to quit")
        print("=" * 50 + "\n")

        self.hotkeys.start()

        # Cross-platform wait loop
        try:
            if IS_WINDOWS:
                self._shutdown_event.wait()
            else:
                signal.pause()
        except KeyboardInterrupt:
            pass

        self.shutdown()

    def shutdown(self):
        """Clean shutdown"""
        print("\nShutting down...")
        self._shutdown_event.set()
        self.hotkeys.stop()
        self.controller.deactivate()
        print("✓ Done")

    def request_shutdown(self):
        """Request application shutdown (thread-safe)"""
        self._shutdown_event.set()


def main():
    app_config = load_app_config()
    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Toggler(app_config)

    def signal_handler(sig, frame):
        app.request_shutdown()

    signal.signal(signal.SIGINT, signal_handler)
    if not IS_WINDOWS:
        signal.signal(signal.SIGTERM, signal_handler)

    app.run()


if __name__ == "__main__":
    main()
