"""Small helpers shared across mailkit modules."""

from mailkit.utils.formatting import format_bytes, parse_size_string

__all__ = ["format_bytes", "parse_size_string"]
