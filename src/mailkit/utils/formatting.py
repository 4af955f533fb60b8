"""Human-friendly size formatting and parsing."""

from __future__ import annotations

import math
import re

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMGT]?)(?:I?B)?\s*$", re.IGNORECASE)
_UNIT_EXPONENTS = {"": 0, "K": 1, "M": 2, "G": 3, "T": 4}
_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def format_bytes(size: int) -> str:
    """Render a byte count with binary units.

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(25 * 1024 * 1024)
        '25.0 MiB'
    """
    value = float(size)
    for unit in _BINARY_UNITS:
        if abs(value) < 1024 or unit == _BINARY_UNITS[-1]:
            if unit == "B":
                return f"{int(value)} B"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"  # pragma: no cover - loop always returns


def parse_size_string(value: int | float | str) -> int:
    """Parse ``"25M"``, ``"100 MiB"`` or ``"512KB"`` into bytes.

    Units are always binary (``K`` means 1024). Plain numbers are bytes.

    Raises:
        ValueError: If the value cannot be parsed.

    Examples:
        >>> parse_size_string("10M")
        10485760
        >>> parse_size_string(2048)
        2048
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid size format: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Invalid size format: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    match = _SIZE_PATTERN.match(str(value))
    if match is None:
        raise ValueError(f"Invalid size format: {value!r}")

    number, unit = match.groups()
    return int(float(number) * 1024 ** _UNIT_EXPONENTS[unit.upper()])


__all__ = ["format_bytes", "parse_size_string"]
