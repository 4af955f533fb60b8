"""Tests for mailkit package initialization."""

from __future__ import annotations

# pylint: disable=import-outside-toplevel


def test_package_imports() -> None:
    """All public APIs can be imported from mailkit."""
    from mailkit import (
        Attachment,
        LogManager,
        MailBuilder,
        MailkitError,
        Message,
        clear_config,
        get_config,
        load_config,
        load_from_file,
        require_config,
    )

    assert Attachment is not None
    assert LogManager is not None
    assert MailBuilder is not None
    assert MailkitError is not None
    assert Message is not None
    assert callable(clear_config)
    assert callable(get_config)
    assert callable(load_config)
    assert callable(load_from_file)
    assert callable(require_config)


def test_version_format() -> None:
    """__version__ looks like X.Y.Z."""
    from mailkit.meta import __version__

    parts = __version__.split(".")
    assert len(parts) >= 3
    assert parts[0].isdigit()
    assert parts[1].isdigit()


def test_all_exports() -> None:
    """__all__ lists every re-exported name."""
    import mailkit

    for name in mailkit.__all__:
        assert hasattr(mailkit, name), name


def test_mail_errors_share_root() -> None:
    """Every mail error derives from MailkitError."""
    from mailkit import MailkitError
    from mailkit.mail import (
        FormatError,
        InvalidAttachmentError,
        MailConfigurationError,
        MailStateError,
        MailTransportError,
        MailValidationError,
    )

    for exc in (
        FormatError,
        InvalidAttachmentError,
        MailConfigurationError,
        MailStateError,
        MailTransportError,
        MailValidationError,
    ):
        assert issubclass(exc, MailkitError)
    assert issubclass(InvalidAttachmentError, MailValidationError)
    assert issubclass(FormatError, ValueError)
