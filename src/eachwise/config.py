"""Runtime settings for eachwise.

Settings come from environment variables only and are validated with a
Pydantic model.

Example:
    >>> LogSettings.from_env({"EACHWISE_LOG_LEVEL": " DEBUG "}).level
    'debug'
    >>> LogSettings.from_env({}).no_color
    False
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

LOG_LEVEL_VALUES = ("trace", "debug", "info", "success", "warning", "warn", "error")
LogLevelName = Literal["trace", "debug", "info", "success", "warning", "warn", "error"]

LOG_LEVEL_ENV = "EACHWISE_LOG_LEVEL"
NO_COLOR_ENVS = ("NO_COLOR", "EACHWISE_NO_COLOR")


class LogSettings(BaseModel):
    """Logging configuration.

    Attributes:
        level: Minimum level name that is written (default ``info``).
        no_color: Whether console output is rendered without colour.

    Example:
        >>> LogSettings(level="loud")
        LogSettings(level='info', no_color=False)
    """

    model_config = ConfigDict(frozen=True)

    level: LogLevelName = "info"
    no_color: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        if value is None:
            return "info"
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in LOG_LEVEL_VALUES:
                return normalized
            return "info"
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LogSettings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Validated settings.
        """
        env = os.environ if environ is None else environ
        return cls(
            level=env.get(LOG_LEVEL_ENV),
            no_color=any(env.get(name) for name in NO_COLOR_ENVS),
        )
