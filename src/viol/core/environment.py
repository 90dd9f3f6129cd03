"""Environment-derived logger settings."""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from viol.core.levels import LogLevel

DEFAULT_APP_NAME = "app"


@dataclass(frozen=True)
class EnvironmentSettings:
    """Logger overrides read from environment variables.

    Attributes:
        level: Level from LOG_LEVEL, or None when unset or unrecognised.
        colourize: False when colour output is disabled, otherwise None
            (no override).
    """

    level: LogLevel | None = None
    colourize: bool | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EnvironmentSettings":
        """Read settings from ``environ`` (default: ``os.environ``).

        LOG_LEVEL takes a level name in any case. NO_COLOUR or NO_COLOR set
        to a non-empty value, or VIOL_ENV=test, disables colours.
        """
        env = os.environ if environ is None else environ

        level = None
        raw_level = env.get("LOG_LEVEL", "").strip().upper()
        if raw_level in LogLevel.__members__:
            level = LogLevel[raw_level]

        colourize = None
        if env.get("NO_COLOUR") or env.get("NO_COLOR") or env.get("VIOL_ENV") == "test":
            colourize = False

        return cls(level=level, colourize=colourize)

    def overrides(self) -> dict[str, object]:
        """Return only the options this environment actually sets."""
        result: dict[str, object] = {}
        if self.level is not None:
            result["level"] = self.level
        if self.colourize is not None:
            result["colourize"] = self.colourize
        return result


def get_app_name(environ: Mapping[str, str] | None = None) -> str:
    """Return the name used to scope the default logger.

    Uses VIOL_APP_NAME when set, otherwise the running script's name.
    """
    env = os.environ if environ is None else environ
    name = env.get("VIOL_APP_NAME", "").strip()
    if name:
        return name
    if sys.argv and sys.argv[0] not in ("", "-c", "-m"):
        return Path(sys.argv[0]).stem or DEFAULT_APP_NAME
    return DEFAULT_APP_NAME
