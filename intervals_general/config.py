"""Configuration models for intervals_general.

Covers the textual notation used to display intervals and the logging setup
of the package logger. Configuration can be built in code or loaded from a
YAML file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from intervals_general.errors import ConfigurationError

PACKAGE_LOGGER = "intervals_general"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class NotationConfig(BaseModel):
    """Symbols used to render intervals in Wirth notation.

    Parameters
    ----------
    left_infinity : str
        Symbol for an unbounded left side.
    right_infinity : str
        Symbol for an unbounded right side.
    separator : str
        Text placed between the two sides.
    empty : str
        Rendering of the empty interval.

    Examples
    --------
    >>> notation = NotationConfig()
    >>> notation.separator
    '..'
    >>> NotationConfig(left_infinity="-inf", right_infinity="inf").left_infinity
    '-inf'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    left_infinity: str = Field(default="←", description="Unbounded left symbol")
    right_infinity: str = Field(default="→", description="Unbounded right symbol")
    separator: str = Field(default="..", description="Separator between sides")
    empty: str = Field(default="Empty", description="Empty interval text")

    @field_validator("left_infinity", "right_infinity", "separator", "empty")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Validate that a notation symbol is non-empty.

        Parameters
        ----------
        v : str
            Symbol to validate.

        Returns
        -------
        str
            The symbol, unchanged.

        Raises
        ------
        ValueError
            If the symbol is an empty string.
        """
        if not v:
            raise ValueError("notation symbols must be non-empty")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for the package logger.

    Parameters
    ----------
    level : str
        Log level name.
    format : str
        Format string for the stream handler.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: LogLevel = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class IntervalsConfig(BaseModel):
    """Top-level configuration.

    Parameters
    ----------
    notation : NotationConfig
        Display notation.
    logging : LoggingConfig
        Package logging setup.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    notation: NotationConfig = Field(default_factory=NotationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_NOTATION = NotationConfig()


def load_config(path: Path | str) -> IntervalsConfig:
    """Load configuration from a YAML file.

    Sections missing from the file keep their defaults; an empty file
    yields the default configuration.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    IntervalsConfig
        The loaded configuration.

    Raises
    ------
    ConfigurationError
        If the file cannot be read, is not valid YAML, is not a mapping, or
        fails validation.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        return IntervalsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the package logger.

    Replaces any handler installed by a previous call. The root logger is
    left untouched.

    Parameters
    ----------
    config : LoggingConfig | None
        Logging settings; defaults to ``LoggingConfig()``.

    Returns
    -------
    logging.Logger
        The configured ``intervals_general`` logger.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler.set_name(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.level))
    return logger
