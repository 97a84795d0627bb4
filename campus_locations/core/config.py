"""Export configuration loaded from environment variables.

Every value has a default matching the historical behaviour: read
``export.geojson`` and write ``locations.json`` in the working directory.

``from_env()`` raises ``ConfigValidationError`` if any value is out of
its valid range, so bad configuration is reported before any file is
touched.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from campus_locations.core.constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_PATH,
)
from campus_locations.core.exceptions import ValidationError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The environment variable that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable export configuration.

    Attributes:
        input_path: GeoJSON document to read.
        output_path: Location list to write (overwritten).
        indent: Indentation width of the written JSON.
        log_level: Name of the stdlib logging level for the CLI.
    """

    input_path: str = DEFAULT_INPUT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    indent: int = DEFAULT_JSON_INDENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> FlattenConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value cannot be parsed or is out
                of range.
        """
        raw_indent = os.getenv("LOCATIONS_JSON_INDENT", str(DEFAULT_JSON_INDENT))
        try:
            indent = int(raw_indent)
        except ValueError as exc:
            raise ConfigValidationError(
                "LOCATIONS_JSON_INDENT", raw_indent, "must be an integer"
            ) from exc

        config = cls(
            input_path=os.getenv("LOCATIONS_INPUT_PATH", DEFAULT_INPUT_PATH),
            output_path=os.getenv("LOCATIONS_OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
            indent=indent,
            log_level=os.getenv("LOCATIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
        _validate(config)
        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def _validate(config: FlattenConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.input_path:
        raise ConfigValidationError(
            "LOCATIONS_INPUT_PATH",
            config.input_path,
            "must not be empty",
        )

    if not config.output_path:
        raise ConfigValidationError(
            "LOCATIONS_OUTPUT_PATH",
            config.output_path,
            "must not be empty",
        )

    if config.indent < 0:
        raise ConfigValidationError(
            "LOCATIONS_JSON_INDENT",
            config.indent,
            "must be >= 0",
        )

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            "LOCATIONS_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(sorted(_LOG_LEVELS))}",
        )
