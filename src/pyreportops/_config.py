"""Runtime settings for the operator layer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from pyreportops._constants import (
    DEFAULT_DIALECT,
    DEFAULT_FIRST_DAY_OF_WEEK,
    ENV_DIALECT,
    ENV_FIRST_DAY_OF_WEEK,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Settings read by date operators and the default query."""

    first_day_of_week: int = DEFAULT_FIRST_DAY_OF_WEEK
    dialect: str = DEFAULT_DIALECT

    @classmethod
    def from_env(cls) -> Settings:
        """Create settings from environment variables.

        A week start that is not an integer falls back to Monday.
        """
        raw = os.getenv(ENV_FIRST_DAY_OF_WEEK, str(DEFAULT_FIRST_DAY_OF_WEEK))
        try:
            first_day = int(raw)
        except ValueError:
            logger.warning(
                "%s=%r is not an integer, assuming Monday", ENV_FIRST_DAY_OF_WEEK, raw
            )
            first_day = DEFAULT_FIRST_DAY_OF_WEEK
        return cls(
            first_day_of_week=first_day % 7,
            dialect=os.getenv(ENV_DIALECT, DEFAULT_DIALECT),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**overrides) -> Settings:
    """Replace individual settings, e.g. ``configure(first_day_of_week=0)``."""
    global _settings
    _settings = replace(get_settings(), **overrides)
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next read goes back to the environment."""
    global _settings
    _settings = None
