"""Compose a message and deliver it through :class:`MockTransport`."""

from __future__ import annotations

from mailkit.logging import LogManager
from mailkit.mail import MailBuilder
from mailkit.mail.transports import MockTransport


def send_plain_message() -> None:
    """Build a message with a formatted subject and log it instead of sending."""
    logger = LogManager(name="examples.mail", preset="dev")
    transport = MockTransport(logger=logger)

    message = (
        MailBuilder(transport=transport)
        .set_from("noreply@example.com")
        .set_subject("Build #{} {}", 128, "passed")
        .set_recipient("dev@example.com", "qa@example.com")
        .set_cc("lead@example.com")
        .add_header("X-Build-Id", "128")
        .send("All 312 tests passed.")
    )
    logger.success("Delivered", subject=message.render_subject(), recipients=len(message.recipients))


if __name__ == "__main__":  # pragma: no cover - manual example
    send_plain_message()
