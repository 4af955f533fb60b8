"""Preset-driven logger built on :mod:`logging` and :mod:`rich`.

``LogManager`` is a :class:`logging.Logger` subclass. Its handlers are
configured from, in increasing priority:

1. ``FALLBACK_DEFAULTS`` shipped with mailkit,
2. ``logger.defaults`` from ``mailkit.conf.yml``,
3. a named preset (``logger.presets`` in the config, else ``FALLBACK_PRESETS``),
4. the ``config`` mapping passed to the constructor.

Examples:
    >>> from mailkit.logging import LogManager
    >>> logger = LogManager(name="mailer", preset="dev")
    >>> logger.info("Mail queued", recipients=3)  # doctest: +SKIP
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from box import Box
from rich.console import Console
from rich.logging import RichHandler

from mailkit.config import ConfigError, get_config

TRACE_LEVEL = 5
SUCCESS_LEVEL = 25

logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

FALLBACK_DEFAULTS: dict[str, Any] = {
    "output": "console",
    "console": {"level": "INFO", "show_path": False},
    "file": {
        "level": "DEBUG",
        "log_path": ".",
        "log_dir": "logs",
        "log_name": "mailkit.log",
        "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    },
    "icons": {"show": True},
}

FALLBACK_PRESETS: dict[str, dict[str, Any]] = {
    "dev": {"output": "console", "console": {"level": "DEBUG", "show_path": True}},
    "prod": {"output": "file", "file": {"level": "INFO"}},
    "debug": {"output": "both", "console": {"level": "TRACE"}, "file": {"level": "TRACE"}},
}

_ICONS = {
    "TRACE": "·",
    "DEBUG": "»",
    "INFO": "i",
    "SUCCESS": "✓",
    "WARNING": "!",
    "ERROR": "✗",
    "CRITICAL": "‼",
}

# Keyword arguments understood by Logger._log, never treated as context.
_RESERVED_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


def _merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge *override* into a copy of *base*."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _logger_section() -> Mapping[str, Any]:
    try:
        section = get_config().get("logger")
    except (ConfigError, FileNotFoundError):
        return {}
    return section if isinstance(section, Mapping) else {}


class LogManager(logging.Logger):
    """Logger with rich console output, presets and structured context.

    The logger itself accepts every level; handlers do the filtering.

    Args:
        name: Logger name.
        preset: Optional preset name (``dev``, ``prod``, ``debug`` or one
            defined under ``logger.presets``). Unknown presets are ignored.
        config: Explicit overrides applied last.
    """

    def __init__(
        self,
        name: str = "mailkit",
        *,
        preset: str | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(name, TRACE_LEVEL)
        self.propagate = False
        self._config = self._resolve_config(preset, config)
        self._setup_handlers()

    @staticmethod
    def _resolve_config(preset: str | None, config: Mapping[str, Any] | None) -> Box:
        section = _logger_section()

        merged = _merge(FALLBACK_DEFAULTS, section.get("defaults") or {})

        if preset is not None:
            presets = section.get("presets") or {}
            preset_config = presets.get(preset) or FALLBACK_PRESETS.get(preset)
            if preset_config:
                merged = _merge(merged, preset_config)

        if config:
            merged = _merge(merged, config)
        if "icons" in section and isinstance(section["icons"], Mapping):
            merged = _merge(merged, {"icons": section["icons"]})

        return Box(merged)

    def _setup_handlers(self) -> None:
        output = self._config.output
        if output in ("console", "both"):
            console_cfg = self._config.console
            handler = RichHandler(
                console=Console(stderr=True),
                show_path=bool(console_cfg.get("show_path", False)),
                rich_tracebacks=True,
                markup=False,
            )
            handler.setLevel(console_cfg.get("level", "INFO"))
            self.addHandler(handler)

        if output in ("file", "both"):
            file_cfg = self._config.file
            log_dir = Path(file_cfg.log_path) / file_cfg.log_dir
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / file_cfg.log_name, encoding="utf-8")
            file_handler.setLevel(file_cfg.get("level", "DEBUG"))
            file_handler.setFormatter(logging.Formatter(file_cfg.format))
            self.addHandler(file_handler)

    def _format_with_icon(self, level_name: str, msg: str) -> str:
        if not self._config.icons.get("show", True):
            return msg
        icon = _ICONS.get(level_name)
        return f"{icon} {msg}" if icon else msg

    def _emit(self, level: int, msg: object, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self.isEnabledFor(level):
            return
        reserved = {k: kwargs.pop(k) for k in list(kwargs) if k in _RESERVED_KWARGS}
        text = str(msg)
        if kwargs:
            context = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            text = f"{text} | {context}"
        text = self._format_with_icon(logging.getLevelName(level), text)
        reserved.setdefault("stacklevel", 3)
        self._log(level, text, args, **reserved)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level."""
        self._emit(TRACE_LEVEL, msg, args, kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, msg, args, kwargs)

    def success(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at SUCCESS level (between INFO and WARNING)."""
        self._emit(SUCCESS_LEVEL, msg, args, kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, msg, args, kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, msg, args, kwargs)

    def critical(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.CRITICAL, msg, args, kwargs)

    def traceback(self, exc: BaseException, msg: str | None = None) -> None:
        """Log *exc* with its traceback at ERROR level."""
        self._emit(logging.ERROR, msg or f"{type(exc).__name__}: {exc}", (), {"exc_info": exc})


__all__ = [
    "FALLBACK_DEFAULTS",
    "FALLBACK_PRESETS",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
