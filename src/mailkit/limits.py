"""Config-driven resource limits.

Limits are read from the ``mail.limits`` section of ``mailkit.conf.yml``.
User values are clamped to hard bounds that configuration cannot lift::

    mail:
      limits:
        max_attachment_size: 25M
        max_attachments: 20
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mailkit.config import ConfigNotLoadedError, require_config
from mailkit.utils.formatting import format_bytes, parse_size_string

log = logging.getLogger(__name__)

DEFAULT_MAX_ATTACHMENT_SIZE = 25 * 1024 * 1024
DEFAULT_MAX_ATTACHMENTS = 20

HARD_MAX_ATTACHMENT_SIZE = 50 * 1024 * 1024
HARD_MAX_ATTACHMENTS = 50


@dataclass(frozen=True, slots=True)
class MailLimits:
    """Attachment limits enforced by :class:`mailkit.mail.MailBuilder`.

    Attributes:
        max_attachment_size: Largest accepted attachment in bytes.
        max_attachments: Largest number of attachments per message.
    """

    max_attachment_size: int
    max_attachments: int

    @property
    def max_attachment_size_display(self) -> str:
        """Return the size limit in human-readable form."""
        return format_bytes(self.max_attachment_size)


def _load_global_config() -> Mapping[str, Any]:
    try:
        return require_config()
    except ConfigNotLoadedError:
        return {}


def _section(config: Mapping[str, Any] | None, *keys: str) -> Mapping[str, Any]:
    """Walk nested mappings, returning an empty mapping on any miss."""
    current: Any = config or {}
    for key in keys:
        if not isinstance(current, Mapping):
            return {}
        current = current.get(key)
    return current if isinstance(current, Mapping) else {}


def _value(section: Mapping[str, Any], key: str) -> Any:
    """Return a scalar setting, treating nested mappings as unset."""
    value = section.get(key)
    return None if isinstance(value, Mapping) else value


def get_mail_limits(config: Mapping[str, Any] | None = None) -> MailLimits:
    """Resolve mail limits from configuration.

    Args:
        config: Full configuration mapping. When ``None`` the global config
            is used if it has been loaded.

    Returns:
        Limits with invalid values replaced by defaults and every value
        clamped to ``[1, HARD_MAX_*]``.
    """
    if config is None:
        config = _load_global_config()
    section = _section(config, "mail", "limits")

    max_size = DEFAULT_MAX_ATTACHMENT_SIZE
    raw_size = _value(section, "max_attachment_size")
    if raw_size is not None:
        try:
            max_size = parse_size_string(raw_size)
        except (OverflowError, ValueError):
            log.warning("Invalid mail.limits.max_attachment_size %r, using default", raw_size)

    max_count = DEFAULT_MAX_ATTACHMENTS
    raw_count = _value(section, "max_attachments")
    if raw_count is not None:
        try:
            max_count = int(raw_count)
        except (OverflowError, TypeError, ValueError):
            log.warning("Invalid mail.limits.max_attachments %r, using default", raw_count)

    return MailLimits(
        max_attachment_size=max(1, min(max_size, HARD_MAX_ATTACHMENT_SIZE)),
        max_attachments=max(1, min(max_count, HARD_MAX_ATTACHMENTS)),
    )


__all__ = [
    "DEFAULT_MAX_ATTACHMENTS",
    "DEFAULT_MAX_ATTACHMENT_SIZE",
    "HARD_MAX_ATTACHMENTS",
    "HARD_MAX_ATTACHMENT_SIZE",
    "MailLimits",
    "get_mail_limits",
]
