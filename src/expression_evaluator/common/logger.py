"""Shared logger for the expression evaluator."""
import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


LOGGER_NAME = "expression_evaluator"
LOG_LEVEL_ENV_VAR = "EXPRESSION_EVALUATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggerSettings(BaseModel):
    """Validated logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = Field(default="WARNING", description="Minimum level of emitted records")

    @field_validator("level", mode="before")
    def normalize_level(cls, v):
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls) -> "LoggerSettings":
        """
        Build settings from the environment.

        :return: Settings read from EXPRESSION_EVALUATOR_LOG_LEVEL, or the defaults
        :rtype: LoggerSettings
        :raises pydantic.ValidationError: If the variable holds an unknown level
        """
        level: Optional[str] = os.environ.get(LOG_LEVEL_ENV_VAR)
        if level is None:
            return cls()
        return cls(level=level)


def configure_logger(settings: Optional[LoggerSettings] = None) -> logging.Logger:
    """
    Apply settings to the shared logger and return it.

    Calling this more than once never adds a second handler.

    :param LoggerSettings settings: Logging configuration, read from the environment if omitted

    :return: The configured logger
    :rtype: logging.Logger
    """
    if settings is None:
        settings = LoggerSettings.from_env()

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(settings.level)

    if not any(h.get_name() == LOGGER_NAME for h in log.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    return log


# Silent until an application calls configure_logger()
logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
