"""Write activity: serialise location records to ``locations.json``.

The document is rendered fully in memory before the output file is
opened, so a serialisation problem never leaves a truncated file behind.
An existing file at the output path is overwritten.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from campus_locations.core.constants import DEFAULT_JSON_INDENT, ENCODING
from campus_locations.core.exceptions import OutputWriteError
from campus_locations.models.location import LocationRecord

logger = logging.getLogger("campus_locations.activities.write_locations")


def render_locations(
    records: Sequence[LocationRecord], *, indent: int = DEFAULT_JSON_INDENT
) -> str:
    """Render records as a JSON array, keeping each record's field order.

    Raises:
        ValueError: If a coordinate is NaN or infinite, which JSON cannot hold.
    """
    payload = [record.to_dict() for record in records]
    return json.dumps(payload, ensure_ascii=False, indent=indent, allow_nan=False)


def write_locations(
    records: Sequence[LocationRecord],
    output_path: Path | str,
    *,
    indent: int = DEFAULT_JSON_INDENT,
) -> Path:
    """Write records to *output_path* as an indented JSON array.

    Args:
        records: Records from ``flatten_features``.
        output_path: Destination file (str or pathlib.Path).
        indent: JSON indentation width.

    Returns:
        The output path as a ``Path``.

    Raises:
        OutputWriteError: If the records cannot be serialised as strict JSON,
            or the destination cannot be opened or written. Nothing is
            written in the first case.
    """
    output_path = Path(output_path)
    try:
        content = render_locations(records, indent=indent)
    except ValueError as exc:
        msg = f"Could not serialise locations for {output_path}: {exc}"
        raise OutputWriteError(msg) from exc

    try:
        output_path.write_text(content, encoding=ENCODING)
    except OSError as exc:
        msg = f"Could not open {output_path} for writing: {exc}"
        raise OutputWriteError(msg) from exc

    logger.info(
        "Locations written | path=%s | records=%d",
        output_path,
        len(records),
    )
    return output_path
