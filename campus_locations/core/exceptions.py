"""Unified exception taxonomy for the location export.

Every domain exception inherits from ``FlattenError`` and carries
structured context fields so the CLI can report a one-line description
and callers can inspect a stable error payload.

Taxonomy categories
-------------------
- ``ValidationError``: malformed input or configuration.
- ``PermanentError``: unreadable input or unwritable output.

Nothing is retried; ``retryable`` is always ``False`` and is kept only
as a key of the error payload.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class FlattenError(Exception):
    """Base exception for all location-export errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"read_geojson"``, ``"write_locations"``).
        code: Machine-readable error code (e.g. ``"INPUT_PARSE_FAILED"``).
        retryable: Always ``False``; the export is never retried.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    retryable: bool = False

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(FlattenError):
    """Input or configuration validation failure."""


class PermanentError(FlattenError):
    """Unrecoverable I/O failure."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InputNotFoundError(PermanentError):
    """Raised when the input document cannot be opened or read."""

    default_stage = "read_geojson"
    default_code = "INPUT_NOT_FOUND"


class MalformedInputError(ValidationError):
    """Raised when the input document is not usable as a feature collection."""

    default_stage = "read_geojson"
    default_code = "INPUT_MALFORMED"


class ParseError(MalformedInputError):
    """Raised when the input is not well-formed JSON."""

    default_code = "INPUT_PARSE_FAILED"


class SchemaError(MalformedInputError):
    """Raised when the input lacks a top-level ``features`` sequence."""

    default_stage = "flatten_features"
    default_code = "INPUT_SCHEMA_INVALID"


class OutputWriteError(PermanentError):
    """Raised when the output document cannot be written."""

    default_stage = "write_locations"
    default_code = "OUTPUT_WRITE_FAILED"
