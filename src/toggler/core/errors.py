"""Exceptions raised by the Toggler core."""

from __future__ import annotations

from pathlib import Path


class TogglerError(Exception):
    """Base class for Toggler errors."""


class ConfigReadError(TogglerError):
    """The configuration file is missing, unreadable, or not a list of word groups."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
