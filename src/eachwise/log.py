"""Structured terminal logging for eachwise helpers."""

from __future__ import annotations

import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text

from .config import LogSettings


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_LEVEL_BY_NAME = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
_STYLE_BY_LEVEL = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_configured_level: LogLevel | None = None
_no_color: bool | None = None


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = _LEVEL_BY_NAME[LogSettings.from_env().level]
    return _configured_level


def set_level(value: str | None) -> None:
    """Set the active log level; unknown names fall back to ``info``."""
    global _configured_level
    _configured_level = _LEVEL_BY_NAME[LogSettings(level=value).level]


def set_no_color(value: bool) -> None:
    """Force colour output on or off, overriding the environment."""
    global _no_color
    _no_color = value


def reset() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    global _configured_level, _no_color
    _configured_level = None
    _no_color = None


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def _console(*, stderr: bool) -> Console:
    no_color = _no_color if _no_color is not None else LogSettings.from_env().no_color
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=no_color,
    )


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
) -> None:
    """Write ``message`` if ``level`` passes the configured threshold.

    Warnings and errors go to stderr unless ``stderr`` says otherwise.
    """
    if not is_enabled(level):
        return
    to_stderr = level >= LogLevel.WARNING if stderr is None else stderr
    text = Text(message, style=style or _STYLE_BY_LEVEL.get(level, ""))
    _console(stderr=to_stderr).print(text)


def trace(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.TRACE, message, style=style)


def debug(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.DEBUG, message, style=style)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style)


def success(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.SUCCESS, message, style=style)


def warning(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.WARNING, message, style=style)


def error(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.ERROR, message, style=style)
