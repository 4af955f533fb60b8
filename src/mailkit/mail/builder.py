"""Fluent builder assembling outgoing messages.

Every mutator returns the builder itself so calls chain::

    message = (
        MailBuilder(transport=MockTransport())
        .set_from("noreply@example.com")
        .set_subject("Invoice {} is ready", 42)
        .set_recipient("alice@example.com", "bob@example.com")
        .set_cc("billing@example.com")
        .add_attachment("invoice-42.pdf", "Invoice.pdf")
        .send("Your invoice is attached.")
    )

``set_*`` methods replace their field, ``add_*`` methods append. The subject
is formatted lazily: placeholder errors surface as :class:`FormatError` from
:meth:`MailBuilder.build` or :meth:`MailBuilder.send`, before the transport
is called. A builder is consumed by its first send.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mailkit.config import ConfigNotLoadedError, require_config
from mailkit.limits import MailLimits, get_mail_limits
from mailkit.logging import TRACE_LEVEL
from mailkit.mail.exceptions import (
    InvalidAttachmentError,
    MailConfigurationError,
    MailError,
    MailStateError,
    MailTransportError,
    MailValidationError,
)
from mailkit.mail.message import DEFAULT_CHARSET, Attachment, Message
from mailkit.mail.transport import AsyncMailTransport, AsyncTransportWrapper, MailTransport
from mailkit.mail.transports.mock import MockTransport

__all__ = ["MailBuilder"]

log = logging.getLogger(__name__)


def _unique(values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


class MailBuilder:
    """Accumulate a :class:`Message` and hand it to a transport.

    Args:
        transport: Delivery backend. When omitted and ``mail.mock`` is true
            in the configuration, a :class:`MockTransport` is used.
        limits: Attachment limits, resolved from configuration by default.
        config: Configuration mapping. Defaults to the global configuration
            when it has been loaded; the builder never loads it itself.

    Examples:
        >>> builder = MailBuilder().set_subject("Hello {}", "World").set_recipient("a@example.com")
        >>> builder.message.render_subject()
        'Hello World'
        >>> builder.set_recipient("b@example.com").message.to
        ('b@example.com',)
    """

    def __init__(
        self,
        *,
        transport: MailTransport | AsyncMailTransport | None = None,
        limits: MailLimits | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        if config is None:
            config = self._load_config()
        mail_section = config.get("mail") if config else None
        if not isinstance(mail_section, Mapping):
            mail_section = {}

        self._limits = limits or get_mail_limits(config=config)

        sender = mail_section.get("from")
        charset = mail_section.get("charset")
        self._message = Message(
            sender=sender if isinstance(sender, str) else None,
            charset=charset if isinstance(charset, str) and charset else DEFAULT_CHARSET,
        )

        if transport is None and mail_section.get("mock") is True:
            transport = MockTransport()
        self._transport = transport
        self._consumed = False

    @staticmethod
    def _load_config() -> Mapping[str, Any]:
        try:
            return require_config()
        except ConfigNotLoadedError:
            return {}

    @property
    def message(self) -> Message:
        """Return the in-progress message."""
        return self._message

    @property
    def limits(self) -> MailLimits:
        """Return the attachment limits in force."""
        return self._limits

    @property
    def consumed(self) -> bool:
        """Return ``True`` once the builder has been sent."""
        return self._consumed

    def _ensure_open(self) -> None:
        if self._consumed:
            raise MailStateError("Message already sent, create a new MailBuilder")

    def _trace(self, msg: str, *args: Any) -> None:
        if log.isEnabledFor(TRACE_LEVEL):
            log.log(TRACE_LEVEL, msg, *args)

    # ------------------------------------------------------------------
    # Setters (replace semantics)
    # ------------------------------------------------------------------

    def set_subject(self, subject: str, *args: Any) -> MailBuilder:
        """Set the subject and its ``str.format`` arguments.

        Arguments are not checked against the placeholders here.
        """
        self._ensure_open()
        self._message.subject = subject
        self._message.subject_args = args
        self._trace("[builder] subject=%r args=%d", subject, len(args))
        return self

    def set_recipient(self, *recipients: str) -> MailBuilder:
        """Replace the To recipients. No arguments clears them."""
        self._ensure_open()
        self._message.to = _unique(recipients)
        self._trace("[builder] to=%s", self._message.to)
        return self

    def set_cc(self, *recipients: str) -> MailBuilder:
        """Replace the CC recipients. No arguments clears them."""
        self._ensure_open()
        self._message.cc = _unique(recipients)
        self._trace("[builder] cc=%s", self._message.cc)
        return self

    def set_bcc(self, *recipients: str) -> MailBuilder:
        """Replace the BCC recipients. No arguments clears them."""
        self._ensure_open()
        self._message.bcc = _unique(recipients)
        self._trace("[builder] bcc=%s", self._message.bcc)
        return self

    def set_from(self, sender: str) -> MailBuilder:
        """Set the ``From`` address."""
        self._ensure_open()
        self._message.sender = sender
        return self

    def set_reply_to(self, address: str | None) -> MailBuilder:
        """Set or clear the ``Reply-To`` address."""
        self._ensure_open()
        self._message.reply_to = address
        return self

    def set_charset(self, charset: str) -> MailBuilder:
        """Set the body character set."""
        self._ensure_open()
        if not charset:
            raise MailValidationError("Charset must not be empty")
        self._message.charset = charset
        return self

    # ------------------------------------------------------------------
    # Additive operations
    # ------------------------------------------------------------------

    def add_header(self, name: str, value: str) -> MailBuilder:
        """Add a header, replacing an earlier value with the same name.

        Raises:
            MailValidationError: If the name is empty or either part holds a line break.
        """
        self._ensure_open()
        if not name or any(ch in part for part in (name, value) for ch in "\r\n"):
            raise MailValidationError(f"Invalid header {name!r}")
        self._message.headers[name] = value
        return self

    def add_attachment(self, file: str | os.PathLike[str], name: str | None = None) -> MailBuilder:
        """Append an attachment.

        The file is only inspected (existence, type, permissions, size); its
        content is read by the transport. On error the builder is unchanged.

        Args:
            file: Path of the file to attach.
            name: Name shown to recipients, defaults to the file name.

        Raises:
            InvalidAttachmentError: If the file is missing, not a regular
                file, unreadable, or breaks the configured limits.
        """
        self._ensure_open()

        max_count = self._limits.max_attachments
        if len(self._message.attachments) >= max_count:
            raise InvalidAttachmentError(file, f"Maximum of {max_count} attachments exceeded")

        path = Path(file).expanduser()
        try:
            info = path.stat()
        except FileNotFoundError as e:
            raise InvalidAttachmentError(path, "file does not exist") from e
        except OSError as e:
            raise InvalidAttachmentError(path, f"cannot access file: {e.strerror or e}") from e

        if not stat.S_ISREG(info.st_mode):
            raise InvalidAttachmentError(path, "not a regular file")
        if not os.access(path, os.R_OK):
            raise InvalidAttachmentError(path, "file is not readable")
        if info.st_size > self._limits.max_attachment_size:
            raise InvalidAttachmentError(
                path,
                f"exceeds size limit of {self._limits.max_attachment_size_display}",
            )

        attachment = Attachment(path=path.resolve(), name=name)
        self._message.attachments.append(attachment)
        self._trace("[builder] attachment #%d %s", len(self._message.attachments), attachment.display_name)
        return self

    def transport(self, backend: MailTransport | AsyncMailTransport) -> MailBuilder:
        """Use *backend* for delivery."""
        self._ensure_open()
        self._transport = backend
        return self

    # ------------------------------------------------------------------
    # Build and send
    # ------------------------------------------------------------------

    def build(self) -> Message:
        """Validate the message and return an independent copy.

        The builder is not consumed.

        Raises:
            MailStateError: If the builder was already sent.
            MailValidationError: If the sender or every recipient is missing.
            FormatError: If the subject cannot be formatted.
        """
        self._ensure_open()
        message = self._message
        if not message.sender:
            raise MailValidationError("Sender is required, call set_from()")
        if not message.recipients:
            raise MailValidationError("At least one recipient is required")
        message.render_subject()
        return message.copy()

    def _prepare(self, body_text: str | None, body_html: str | None) -> tuple[Message, Any]:
        # Bodies go on the copy only, so a failed send leaves the builder as it was.
        message = self.build()
        if body_text is not None:
            message.body_text = body_text
        if body_html is not None:
            message.body_html = body_html
        if self._transport is None:
            raise MailConfigurationError("No mail transport configured")
        return message, self._transport

    def send(self, body_text: str | None = None, body_html: str | None = None) -> Message:
        """Deliver the message through the configured transport.

        Validation and subject formatting happen first; if they fail the
        builder stays usable. Once the transport is called the builder is
        consumed, whatever the outcome.

        Returns:
            The message handed to the transport.

        Raises:
            MailConfigurationError: If no synchronous transport is configured.
            MailTransportError: If delivery fails.
        """
        message, transport = self._prepare(body_text, body_html)
        if not isinstance(transport, MailTransport):
            raise MailConfigurationError("Transport is asynchronous, use send_async()")

        self._consumed = True
        log.debug("Sending mail to %d recipient(s) via %s", len(message.recipients), type(transport).__name__)
        try:
            transport.send(message)
        except MailError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise MailTransportError(f"Transport {type(transport).__name__} failed: {e}") from e
        return message

    def send_html(self, body_html: str) -> Message:
        """Deliver an HTML-only message."""
        return self.send(body_html=body_html)

    async def send_async(self, body_text: str | None = None, body_html: str | None = None) -> Message:
        """Deliver the message through an async transport.

        Synchronous transports are run in an executor through
        :class:`AsyncTransportWrapper`.
        """
        message, transport = self._prepare(body_text, body_html)
        if isinstance(transport, MailTransport):
            transport = AsyncTransportWrapper(transport)

        self._consumed = True
        log.debug("Sending mail to %d recipient(s) via %s", len(message.recipients), type(transport).__name__)
        try:
            await transport.send(message)
        except MailError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise MailTransportError(f"Transport {type(transport).__name__} failed: {e}") from e
        return message
