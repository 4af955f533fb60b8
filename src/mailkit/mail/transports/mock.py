"""Mock transport that logs messages instead of delivering them.

Handy in development and tests: enable it with ``mail.mock: true`` in
``mailkit.conf.yml`` or pass it explicitly to the builder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mailkit.mail.transport import MailTransport

if TYPE_CHECKING:
    from mailkit.mail.message import Message

__all__ = ["MockTransport"]

log = logging.getLogger(__name__)


class MockTransport(MailTransport):
    """Record and log every message handed to it.

    Args:
        logger: Logger receiving the message dump, defaults to this module's.

    Attributes:
        sent: Messages received, oldest first.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self.sent: list[Message] = []
        self._log = logger or log

    def send(self, message: Message) -> None:
        """Log *message* field by field and record it."""
        self._log.info("MOCK MAILER: send email")
        self._log.info("FROM: %s", message.sender)
        self._log.info("TO: %s", ", ".join(message.to))
        if message.cc:
            self._log.info("CC: %s", ", ".join(message.cc))
        if message.bcc:
            self._log.info("BCC: %s", ", ".join(message.bcc))
        if message.reply_to:
            self._log.info("REPLY-TO: %s", message.reply_to)
        self._log.info("SUBJECT: %s", message.render_subject())
        for name, value in message.headers.items():
            self._log.info("HEADER: %s: %s", name, value)
        for attachment in message.attachments:
            self._log.info("ATTACHMENT: %s (%s)", attachment.display_name, attachment.path)
        if message.body_text is not None:
            self._log.info("TEXT:\n%s", message.body_text)
        if message.body_html is not None:
            self._log.info("HTML:\n%s", message.body_html)
        self.sent.append(message)

    def clear(self) -> None:
        """Forget recorded messages."""
        self.sent.clear()
