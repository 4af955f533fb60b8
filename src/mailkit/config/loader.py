"""YAML configuration loader.

The configuration lives in ``mailkit.conf.yml``. It is searched, in order,
in an explicit path, the current working directory and
``~/.config/mailkit/``. The first file found wins; when none exists an empty
configuration is used.

Loaded data is exposed as a :class:`box.Box` so nested keys can be read with
attribute access (``config.mail.limits.max_attachments``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from box import Box

from mailkit.config.exceptions import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
)

log = logging.getLogger(__name__)

CONFIG_FILENAME = "mailkit.conf.yml"

_config: Box | None = None


def _search_paths(filename: str) -> list[Path]:
    """Return candidate locations for *filename*, highest priority first."""
    return [
        Path.cwd() / filename,
        Path.home() / ".config" / "mailkit" / filename,
    ]


def load_from_file(path: str | Path) -> Box:
    """Parse a YAML file into a Box without touching the global config.

    Args:
        path: YAML file to read.

    Returns:
        Parsed configuration.

    Raises:
        ConfigFileNotFoundError: If *path* does not exist.
        ConfigFormatError: If the file is not valid YAML or its root is not a mapping.
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise ConfigFileNotFoundError(f"Configuration file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigFormatError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigFormatError(f"Configuration root must be a mapping in {file_path}")

    log.debug("Loaded configuration from %s", file_path)
    return Box(data)


def load_config(path: str | Path | None = None, *, filename: str = CONFIG_FILENAME) -> Box:
    """Load the global configuration.

    Args:
        path: Explicit file to load. Skips auto-discovery when given.
        filename: File name used for auto-discovery.

    Returns:
        The loaded configuration, also stored as the global config.
    """
    global _config  # pylint: disable=global-statement

    if path is not None:
        _config = load_from_file(path)
        return _config

    for candidate in _search_paths(filename):
        if candidate.is_file():
            _config = load_from_file(candidate)
            return _config

    log.debug("No %s found, using empty configuration", filename)
    _config = Box()
    return _config


def get_config() -> Box:
    """Return the global configuration, loading it on first access."""
    if _config is None:
        return load_config()
    return _config


def require_config() -> Box:
    """Return the global configuration without loading it.

    Raises:
        ConfigNotLoadedError: If ``load_config()`` has not been called yet.
    """
    if _config is None:
        raise ConfigNotLoadedError("Configuration not loaded, call load_config() first")
    return _config


def clear_config() -> None:
    """Forget the global configuration."""
    global _config  # pylint: disable=global-statement
    _config = None


__all__ = [
    "CONFIG_FILENAME",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_file",
    "require_config",
]
