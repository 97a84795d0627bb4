"""Read activity: load and parse the GeoJSON export.

The whole document is parsed into memory in one pass; the file handle is
closed before this function returns, on success and on failure.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from campus_locations.core.constants import ENCODING
from campus_locations.core.exceptions import InputNotFoundError, ParseError

logger = logging.getLogger("campus_locations.activities.read_geojson")


def read_geojson(input_path: Path | str) -> object:
    """Read and parse a GeoJSON document.

    Args:
        input_path: Filesystem path to the GeoJSON file (str or pathlib.Path).

    Returns:
        The parsed JSON value. Its shape is checked by ``flatten_features``.

    Raises:
        InputNotFoundError: If the file cannot be opened or read.
        ParseError: If the file is not UTF-8 or not well-formed JSON
            (including the non-standard ``NaN``/``Infinity`` tokens).
    """
    input_path = Path(input_path)
    logger.info("Reading GeoJSON | path=%s", input_path)

    try:
        content = input_path.read_text(encoding=ENCODING)
    except UnicodeDecodeError as exc:
        msg = f"Failed to parse GeoJSON in {input_path}: not valid UTF-8 ({exc})"
        raise ParseError(msg) from exc
    except OSError as exc:
        msg = f"Could not open {input_path}: {exc}"
        raise InputNotFoundError(msg) from exc

    try:
        document = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        msg = f"Failed to parse GeoJSON in {input_path}: {exc}"
        raise ParseError(msg) from exc

    logger.info("Parsed GeoJSON | path=%s | bytes=%d", input_path, len(content))
    return document


def _reject_constant(token: str) -> object:
    """Refuse ``NaN``, ``Infinity`` and ``-Infinity``, which JSON does not allow."""
    msg = f"invalid token {token!r}: not a JSON number"
    raise ValueError(msg)
