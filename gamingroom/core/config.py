"""
Configuration loaded from environment variables.

Only logging is configurable: the registry itself has nothing to tune.
"""

import logging
import os

from gamingroom.core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Config:
    """Centralized access to environment settings, read once when this module is imported."""

    LOG_LEVEL: str = os.getenv("GAMINGROOM_LOG_LEVEL", "WARNING")

    @classmethod
    def log_level(cls) -> int:
        """Numeric logging level for LOG_LEVEL (case-insensitive name, e.g. 'debug')."""
        level = logging.getLevelNamesMapping().get(cls.LOG_LEVEL.strip().upper())
        if level is None:
            raise ConfigurationError(
                f"Unknown log level: {cls.LOG_LEVEL!r}. "
                f"Pick one from {', '.join(sorted(logging.getLevelNamesMapping()))}"
            )
        return level


def configure_logging(level: int | None = None) -> None:
    """
    Set up root logging. Uses Config.log_level() unless a level is passed.

    Meant to be called once from an application entry point; the package itself never calls it.
    """
    logging.basicConfig(
        level=Config.log_level() if level is None else level,
        format=LOG_FORMAT,
    )
