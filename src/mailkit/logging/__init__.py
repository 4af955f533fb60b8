"""Logging helpers for mailkit.

Library modules log through ``logging.getLogger(__name__)``; applications
that want formatted output create a :class:`LogManager`.
"""

from mailkit.logging.manager import SUCCESS_LEVEL, TRACE_LEVEL, LogManager

__all__ = ["SUCCESS_LEVEL", "TRACE_LEVEL", "LogManager"]
