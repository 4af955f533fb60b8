"""Attach files with optional display names."""

from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from mailkit.mail import InvalidAttachmentError, MailBuilder
from mailkit.mail.transports import MockTransport


def send_with_attachments() -> None:
    """Attach two files, then show that a missing file is rejected."""
    with TemporaryDirectory() as tmp_dir:
        workdir = Path(tmp_dir)
        report = workdir / "daily-report-2024-06-01.txt"
        report.write_text("Daily metrics: 42 conversions", encoding="utf-8")
        notes = workdir / "notes.md"
        notes.write_text("# Notes\n", encoding="utf-8")

        builder = (
            MailBuilder(transport=MockTransport())
            .set_from("reports@example.com")
            .set_recipient("ops@example.com")
            .set_subject("Daily report")
            .add_attachment(report, "Daily report.txt")
            .add_attachment(notes)
        )

        try:
            builder.add_attachment(workdir / "missing.csv")
        except InvalidAttachmentError as e:
            print(f"Rejected: {e}")

        message = builder.send("Report attached.")
        for attachment in message.attachments:
            print(f"{attachment.display_name} <- {attachment.path}")


if __name__ == "__main__":  # pragma: no cover - manual example
    send_with_attachments()
