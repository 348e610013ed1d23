"""Core orchestration for Toggler.

Wires the configuration store and the resolver to the host through ports:
command registration, the active editor's selections, notifications and
configuration editing.
"""

from __future__ import annotations

import logging
import threading

from .errors import ConfigReadError
from .ports import CommandRegistry, Disposable, UIFeedback, Workspace
from .resolver import resolve
from .store import ConfigurationStore

logger = logging.getLogger(__name__)

TOGGLE_COMMAND = "toggler:toggle"
CONFIG_COMMAND = "toggler:config"


class TogglerController:
    """Runs the toggle and configure commands for one host."""

    def __init__(
        self,
        store: ConfigurationStore,
        workspace: Workspace,
        ui: UIFeedback,
        commands: CommandRegistry,
        select_after_toggle: bool = True,
    ):
        self._store = store
        self._workspace = workspace
        self._ui = ui
        self._commands = commands
        self._select_after_toggle = select_after_toggle
        self._subscriptions: list[Disposable] = []
        self._save_subscription: Disposable | None = None
        # Hotkeys and the save watcher call in from their own threads
        self._lock = threading.Lock()

    def activate(self) -> None:
        """Register commands and load the configuration, creating it if needed."""
        self._subscriptions.append(self._commands.add(TOGGLE_COMMAND, self.toggle))
        self._subscriptions.append(self._commands.add(CONFIG_COMMAND, self.configure))

        if self._store.is_configured():
            self.load_configuration()
        else:
            self.configure()

    def deactivate(self) -> None:
        """Dispose every registration made by activate/configure."""
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()

        if self._save_subscription is not None:
            self._save_subscription.dispose()
            self._save_subscription = None

    def toggle(self) -> None:
        """Replace every selection in the active editor with its next toggle."""
        with self._lock:
            editor = self._workspace.get_active_editor()
            configuration = self._store.configuration
            if editor is None or configuration is None:
                logger.debug("Nothing to toggle: no active editor or no configuration")
                return

            for selection in editor.get_selections():
                text = selection.get_text()
                selected = True

                if not text:
                    selected = False
                    selection.select_word()
                    text = selection.get_text()

                if not text:
                    continue

                toggle = resolve(text, configuration)
                if toggle is None:
                    self._ui.warning(
                        "Toggler",
                        f"Could not find toggles for '{text}'. "
                        f"Please use the `{CONFIG_COMMAND}` command to add one.",
                    )
                    continue

                logger.debug(f"Toggled '{text}' -> '{toggle}'")
                selection.insert_text(toggle, select=selected and self._select_after_toggle)

    def configure(self) -> None:
        """Open the configuration file, seeding it with the defaults if absent."""
        with self._lock:
            if not self._store.is_configured():
                try:
                    self._store.write_default()
                except OSError as e:
                    logger.error(f"Could not create configuration: {e}")
                    self._ui.error(
                        "Toggler",
                        f"Could not create configuration file at {self._store.config_path}.",
                        detail=str(e),
                    )
                    return
                self._load(force=True)

            previous = self._save_subscription
            self._save_subscription = self._workspace.open(
                self._store.config_path, self.reload
            )

        # The old watcher may be waiting on the lock inside reload()
        if previous is not None:
            previous.dispose()

    def reload(self) -> bool:
        """Re-read the configuration file, e.g. after the user saved it."""
        with self._lock:
            return self._load(force=True)

    def load_configuration(self) -> bool:
        """Load the configuration if it is not loaded yet."""
        with self._lock:
            return self._load(force=False)

    def _load(self, force: bool) -> bool:
        try:
            self._store.load(force=force)
        except ConfigReadError as e:
            logger.error(f"Could not read configuration: {e}")
            self._ui.error(
                "Toggler",
                f"Could not read configuration file. "
                f"Please use the `{CONFIG_COMMAND}` command.",
                detail=e.message,
            )
            return False
        return True
