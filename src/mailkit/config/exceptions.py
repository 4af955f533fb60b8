"""Exceptions raised by the mailkit configuration layer.

Exception hierarchy::

    MailkitError (root for every mailkit exception)
        ConfigError (base for configuration errors)
            ConfigFileNotFoundError (also FileNotFoundError)
            ConfigFormatError (also ValueError)
            ConfigNotLoadedError
"""

from __future__ import annotations


class MailkitError(Exception):
    """Root exception for all mailkit errors."""


class ConfigError(MailkitError):
    """Base exception for configuration loading errors."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """An explicitly requested configuration file does not exist."""


class ConfigFormatError(ConfigError, ValueError):
    """The configuration file is not valid YAML or not a mapping."""


class ConfigNotLoadedError(ConfigError):
    """Configuration was required before ``load_config()`` was called."""


__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MailkitError",
]
