"""Core ports (interfaces) for Toggler.

These protocols define what the core needs from the host it runs in: the
editing surface, notifications, command registration and file opening.
They are intentionally small so the same controller can sit behind an
editor plugin API or the desktop adapters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Disposable(Protocol):
    """Handle returned by a subscription."""

    def dispose(self) -> None:
        """Cancel the subscription."""


@runtime_checkable
class TextSelection(Protocol):
    """One selection range in an editing surface."""

    def get_text(self) -> str:
        """Return the selected text (empty if nothing is selected)."""

    def select_word(self) -> None:
        """Expand the selection to the word under the cursor."""

    def insert_text(self, text: str, select: bool) -> None:
        """Replace the selection with text, re-selecting it if asked."""


@runtime_checkable
class Editor(Protocol):
    """An editing surface with one or more selections."""

    def get_selections(self) -> list[TextSelection]:
        """Return the current selections."""


@runtime_checkable
class Workspace(Protocol):
    """Host workspace: active editor and file editing."""

    def get_active_editor(self) -> Editor | None:
        """Return the focused editor, if any."""

    def open(self, path: Path, on_save: Callable[[], None]) -> Disposable:
        """Open a file for editing; call on_save after each save."""


@runtime_checkable
class UIFeedback(Protocol):
    """User-visible notifications."""

    def warning(self, title: str, message: str) -> None:
        """Display a warning."""

    def error(self, title: str, message: str, detail: str | None = None) -> None:
        """Display an error with an optional detail line."""


@runtime_checkable
class CommandRegistry(Protocol):
    """Registers named commands with the host."""

    def add(self, name: str, callback: Callable[[], None]) -> Disposable:
        """Bind callback to the command name."""
