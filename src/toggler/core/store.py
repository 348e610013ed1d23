"""File-backed store for toggle groups.

The configuration file is a JSON array of arrays of strings, e.g.
``[["true", "false"], ["get", "set"]]``. A bundled default document seeds
the file the first time the user opens it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import ConfigReadError

logger = logging.getLogger(__name__)

Configuration = tuple[tuple[str, ...], ...]

CONFIG_FILENAME = "toggler.json"
DEFAULTS_PATH = Path(__file__).parent.parent / "defaults.json"


class ConfigurationStore:
    """Loads and caches the toggle groups from a JSON file."""

    def __init__(self, config_path: Path | str, defaults_path: Path | str | None = None):
        """Initialize the store.

        Args:
            config_path: Path to the user's configuration file.
            defaults_path: Path to the document used to seed a new file.
                If None, uses the defaults.json shipped with the package.
        """
        self._config_path = Path(config_path)
        self._defaults_path = Path(defaults_path) if defaults_path else DEFAULTS_PATH
        self._configuration: Configuration | None = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def configuration(self) -> Configuration | None:
        """The last successfully loaded configuration, if any."""
        return self._configuration

    def is_configured(self) -> bool:
        """True if the configuration file exists."""
        return self._config_path.exists()

    def load(self, force: bool = False) -> Configuration:
        """Load the configuration file unless it is already cached.

        Args:
            force: Re-read the file even if a configuration is cached.

        Returns:
            The loaded configuration.

        Raises:
            ConfigReadError: The file could not be read or parsed. The
                previously cached configuration is kept.
        """
        if self._configuration is not None and not force:
            return self._configuration

        try:
            text = self._config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(f"{self._config_path}: {e}", self._config_path) from e

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ConfigReadError(f"{self._config_path}: {e}", self._config_path) from e

        configuration = _parse_groups(data, self._config_path)
        for word in _duplicate_words(configuration):
            logger.warning(f"'{word}' appears in more than one toggle group; the first group wins")

        self._configuration = configuration
        logger.debug(f"Loaded {len(configuration)} toggle groups from {self._config_path}")
        return configuration

    def bootstrap_default(self) -> str:
        """Return the raw text of the bundled default configuration."""
        return self._defaults_path.read_text(encoding="utf-8")

    def write_default(self) -> Path:
        """Seed the configuration file with the bundled default document."""
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(self.bootstrap_default(), encoding="utf-8")
        logger.info(f"Created default configuration at {self._config_path}")
        return self._config_path


def _parse_groups(data, path: Path) -> Configuration:
    if not isinstance(data, list):
        raise ConfigReadError(f"{path}: expected a list of word groups", path)

    groups = []
    for position, group in enumerate(data):
        if not isinstance(group, list) or not all(isinstance(w, str) for w in group):
            raise ConfigReadError(
                f"{path}: group {position} must be a list of strings", path
            )
        groups.append(tuple(group))
    return tuple(groups)


def _duplicate_words(configuration: Configuration) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for group in configuration:
        for word in {w.lower() for w in group}:
            if word in seen and word not in duplicates:
                duplicates.append(word)
            seen.add(word)
    return duplicates
