"""Command-line entry point: GeoJSON export to ``locations.json``.

This module is the wiring layer: it loads configuration, runs the read,
flatten and write stages in order and maps failures to an exit status.
All conversion logic lives in ``campus_locations.activities``.

Exit status is ``0`` on success and ``1`` on any ``FlattenError``.
"""

from __future__ import annotations

import logging
import sys

from campus_locations.activities.flatten_features import flatten_features
from campus_locations.activities.read_geojson import read_geojson
from campus_locations.activities.write_locations import write_locations
from campus_locations.core.config import FlattenConfig
from campus_locations.core.exceptions import FlattenError
from campus_locations.models.location import LocationRecord

logger = logging.getLogger("campus_locations.cli")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run_conversion(config: FlattenConfig) -> list[LocationRecord]:
    """Read, flatten and write once using *config*.

    Returns:
        The records written to ``config.output_path``.

    Raises:
        FlattenError: If any stage fails. Nothing is written unless the
            read and flatten stages both succeed.
    """
    document = read_geojson(config.input_path)
    records = flatten_features(document)
    write_locations(records, config.output_path, indent=config.indent)
    return records


def main() -> int:
    """Run the conversion and report the outcome on the console."""
    try:
        config = FlattenConfig.from_env()
    except FlattenError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        records = run_conversion(config)
    except FlattenError as exc:
        logger.debug("Conversion failed | %s", exc.to_error_dict())
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"Successfully converted {len(records)} features.")
    print(f"Output written to {config.output_path}")
    return EXIT_SUCCESS
