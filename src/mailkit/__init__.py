"""mailkit: fluent mail message builder with pluggable transports."""

from mailkit.config import (
    MailkitError,
    clear_config,
    get_config,
    load_config,
    load_from_file,
    require_config,
)
from mailkit.logging import LogManager
from mailkit.mail import Attachment, MailBuilder, Message
from mailkit.meta import __version__

__all__ = [
    "Attachment",
    "LogManager",
    "MailBuilder",
    "MailkitError",
    "Message",
    "__version__",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_file",
    "require_config",
]
