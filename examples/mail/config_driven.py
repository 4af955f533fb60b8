"""Pick up sender, mock mode and limits from ``mailkit.conf.yml``."""

from __future__ import annotations

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory

from mailkit.config import clear_config, load_config
from mailkit.mail import MailBuilder

_CONFIG = """\
mail:
  from: noreply@example.com
  mock: true
  limits:
    max_attachment_size: 1M
    max_attachments: 3
"""


async def send_from_config() -> None:
    """Load a config file and send asynchronously through the mock transport."""
    with TemporaryDirectory() as tmp_dir:
        conf = Path(tmp_dir) / "mailkit.conf.yml"
        conf.write_text(_CONFIG, encoding="utf-8")
        load_config(conf)
        try:
            builder = MailBuilder()
            print(f"Limits: {builder.limits.max_attachments} files, {builder.limits.max_attachment_size_display}")
            message = await (
                builder.set_recipient("user@example.com")
                .set_subject("Welcome, {}!", "Ada")
                .send_async(body_html="<h1>Welcome</h1>")
            )
            print(f"Sent '{message.render_subject()}' from {message.sender}")
        finally:
            clear_config()


if __name__ == "__main__":  # pragma: no cover - manual example
    asyncio.run(send_from_config())
