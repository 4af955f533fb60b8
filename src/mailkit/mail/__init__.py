"""Fluent mail composition for mailkit.

Examples:
    >>> from mailkit.mail import MailBuilder
    >>> from mailkit.mail.transports import MockTransport
    >>> transport = MockTransport()
    >>> _ = (
    ...     MailBuilder(transport=transport)
    ...     .set_from("noreply@example.com")
    ...     .set_subject("Build {} finished", 128)
    ...     .set_recipient("dev@example.com")
    ...     .send("All green.")
    ... )
    >>> transport.sent[0].render_subject()
    'Build 128 finished'
"""

from mailkit.mail.builder import MailBuilder
from mailkit.mail.exceptions import (
    FormatError,
    InvalidAttachmentError,
    MailConfigurationError,
    MailError,
    MailStateError,
    MailTransportError,
    MailValidationError,
)
from mailkit.mail.message import Attachment, Message
from mailkit.mail.transport import AsyncMailTransport, AsyncTransportWrapper, MailTransport

__all__ = [
    "AsyncMailTransport",
    "AsyncTransportWrapper",
    "Attachment",
    "FormatError",
    "InvalidAttachmentError",
    "MailBuilder",
    "MailConfigurationError",
    "MailError",
    "MailStateError",
    "MailTransport",
    "MailTransportError",
    "MailValidationError",
    "Message",
]
