"""Message value types assembled by :class:`mailkit.mail.MailBuilder`."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from mailkit.mail.exceptions import FormatError

DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file to bundle with the message.

    Attributes:
        path: Absolute path of the file.
        name: Name shown to recipients, ``None`` to use the file name.

    Examples:
        >>> Attachment(Path("/tmp/report-2024.csv")).display_name
        'report-2024.csv'
        >>> Attachment(Path("/tmp/report-2024.csv"), name="Report.csv").display_name
        'Report.csv'
    """

    path: Path
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Return the name recipients see."""
        return self.name or self.path.name


@dataclass(slots=True)
class Message:
    """In-progress outgoing message.

    Recipient fields are tuples without duplicates; first-seen order is kept
    for display only.

    Attributes:
        subject: Subject, optionally with ``str.format`` placeholders.
        subject_args: Positional arguments for the subject placeholders.
        to: Primary recipients.
        cc: Carbon-copy recipients.
        bcc: Blind carbon-copy recipients.
        attachments: Attachments in the order they were added.
        sender: ``From`` address.
        reply_to: ``Reply-To`` address.
        charset: Character set for the bodies.
        headers: Extra headers.
        body_text: Plain-text body.
        body_html: HTML body.
    """

    subject: str | None = None
    subject_args: tuple[Any, ...] = ()
    to: tuple[str, ...] = ()
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    attachments: list[Attachment] = field(default_factory=list)
    sender: str | None = None
    reply_to: str | None = None
    charset: str = DEFAULT_CHARSET
    headers: dict[str, str] = field(default_factory=dict)
    body_text: str | None = None
    body_html: str | None = None

    @property
    def recipients(self) -> tuple[str, ...]:
        """Return To, CC and BCC addresses without duplicates."""
        return tuple(dict.fromkeys((*self.to, *self.cc, *self.bcc)))

    def render_subject(self) -> str:
        """Format the subject with its arguments.

        Without arguments the subject is returned verbatim, braces included.

        Raises:
            FormatError: If the placeholders do not match the arguments.

        Examples:
            >>> Message(subject="Hello {}", subject_args=("World",)).render_subject()
            'Hello World'
            >>> Message(subject="{literal}").render_subject()
            '{literal}'
        """
        if self.subject is None:
            return ""
        if not self.subject_args:
            return self.subject
        try:
            return self.subject.format(*self.subject_args)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
            raise FormatError(self.subject, str(e)) from e

    def copy(self) -> Message:
        """Return a copy whose mutable containers are independent."""
        return replace(self, attachments=list(self.attachments), headers=dict(self.headers))


__all__ = ["DEFAULT_CHARSET", "Attachment", "Message"]
