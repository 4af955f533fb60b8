"""Configuration loading for mailkit.

Examples:
    >>> from mailkit.config import load_config, get_config
    >>> config = load_config("mailkit.conf.yml")  # doctest: +SKIP
    >>> config.mail.limits.max_attachments  # doctest: +SKIP
    20
"""

from mailkit.config.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
    MailkitError,
)
from mailkit.config.loader import (
    CONFIG_FILENAME,
    clear_config,
    get_config,
    load_config,
    load_from_file,
    require_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MailkitError",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_file",
    "require_config",
]
