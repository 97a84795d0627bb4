"""Shared constants for the location export."""

from __future__ import annotations

DEFAULT_INPUT_PATH: str = "export.geojson"
"""GeoJSON export read when no input location is configured."""

DEFAULT_OUTPUT_PATH: str = "locations.json"
"""Location list written when no output location is configured."""

DEFAULT_JSON_INDENT: int = 2
"""Indentation of the written JSON document."""

DEFAULT_LOG_LEVEL: str = "WARNING"

FEATURES_KEY: str = "features"

# Minimum coordinate elements for a usable point: [lon, lat]
MIN_COORDINATE_ELEMENTS: int = 2

ENCODING: str = "utf-8"
