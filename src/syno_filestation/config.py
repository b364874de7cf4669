"""
Logging configuration for the File Station SDK.

Every SDK logger lives under ``syno_filestation``; the client configures
that parent logger once per construction.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .exceptions import ConfigurationError

ROOT_LOGGER = "syno_filestation"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[str, int]) -> int:
    """
    Turn a level name (any case) or a numeric level into a logging level.

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    if isinstance(level, bool):
        raise ConfigurationError(f"Invalid log level: {level!r}")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(
            f"Invalid log level: {level!r}", {"log_level": level}
        )
    return resolved


@dataclass
class SDKConfig:
    """Logging settings for the SDK; ``debug`` wins over ``log_level``."""

    debug: bool = False
    log_level: Union[str, int] = "INFO"

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else resolve_level(self.log_level)

    def setup_logging(self) -> logging.Logger:
        """Set the package logger level and attach one stream handler."""
        level = self.level
        logger = logging.getLogger(ROOT_LOGGER)
        changed = logger.level != level
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

        if changed:
            logger.debug("Logging level set to %s", logging.getLevelName(level))
        return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
