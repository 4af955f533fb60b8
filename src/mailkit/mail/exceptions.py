"""Specialized exceptions raised by the mailkit.mail module.

Exception hierarchy::

    MailkitError
        MailError (base for all mail errors)
            MailValidationError (invalid builder input, also ValueError)
                InvalidAttachmentError (unusable attachment file)
            FormatError (subject formatting failure, also ValueError)
            MailStateError (builder reused after send)
            MailConfigurationError (missing or unusable transport)
            MailTransportError (delivery failure)
"""

from __future__ import annotations

from pathlib import Path

from mailkit.config.exceptions import MailkitError


class MailError(MailkitError):
    """Base exception for all mail module errors."""


class MailValidationError(MailError, ValueError):
    """Builder input or the assembled message is invalid."""


class InvalidAttachmentError(MailValidationError):
    """An attachment does not denote a readable file or breaks a limit.

    Attributes:
        path: The rejected file reference.
        reason: Why it was rejected.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize InvalidAttachmentError.

        Args:
            path: The rejected file reference.
            reason: Why it was rejected.
        """
        super().__init__(f"Invalid attachment '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason


class FormatError(MailError, ValueError):
    """The subject could not be formatted with its arguments.

    Attributes:
        subject: The format string.
        reason: Message of the underlying formatting error.
    """

    def __init__(self, subject: str, reason: str) -> None:
        """Initialize FormatError.

        Args:
            subject: The format string.
            reason: Message of the underlying formatting error.
        """
        super().__init__(f"Cannot format subject {subject!r}: {reason}")
        self.subject = subject
        self.reason = reason


class MailStateError(MailError):
    """The builder has already been consumed by a send."""


class MailConfigurationError(MailError):
    """No transport is configured or the transport cannot be used."""


class MailTransportError(MailError):
    """The transport failed to deliver the message."""


__all__ = [
    "FormatError",
    "InvalidAttachmentError",
    "MailConfigurationError",
    "MailError",
    "MailStateError",
    "MailTransportError",
    "MailValidationError",
]
