"""Transport implementations for mail delivery.

Available transports:
    - MockTransport: logs and records messages instead of delivering them
"""

from mailkit.mail.transports.mock import MockTransport

__all__ = ["MockTransport"]
