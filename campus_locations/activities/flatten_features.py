"""Flatten activity: turn GeoJSON features into location records.

Extraction is best-effort: a feature is kept only when it has a string
``properties.name`` and a ``geometry.coordinates`` position with at least
two numeric elements. Anything else is skipped and logged at DEBUG; one
unusable feature never stops the rest from converting.

The document itself must be a mapping with a ``features`` list. Without
it there is nothing to convert and ``SchemaError`` is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from campus_locations.core.constants import FEATURES_KEY
from campus_locations.core.exceptions import SchemaError
from campus_locations.models.location import LocationRecord
from campus_locations.utils.helpers import coords_to_lon_lat

logger = logging.getLogger("campus_locations.activities.flatten_features")


def flatten_features(document: object) -> list[LocationRecord]:
    """Convert a parsed FeatureCollection into location records.

    Args:
        document: Parsed GeoJSON value (usually from ``read_geojson``).

    Returns:
        One ``LocationRecord`` per usable feature, in input order.
        Empty list if ``features`` is empty.

    Raises:
        SchemaError: If *document* is not a mapping or its ``features``
            entry is missing or not a list.
    """
    features = _get_features(document)

    records: list[LocationRecord] = []
    for idx, feature in enumerate(features):
        record = _feature_to_record(feature, idx)
        if record is not None:
            records.append(record)

    skipped = len(features) - len(records)
    logger.info(
        "Flattened features | total=%d | converted=%d | skipped=%d",
        len(features),
        len(records),
        skipped,
    )
    return records


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _get_features(document: object) -> Sequence[object]:
    if not isinstance(document, Mapping):
        msg = f"GeoJSON document must be an object, got {type(document).__name__}"
        raise SchemaError(msg)

    if FEATURES_KEY not in document:
        msg = f"GeoJSON document does not contain a '{FEATURES_KEY}' array"
        raise SchemaError(msg)

    features = document[FEATURES_KEY]
    if isinstance(features, str | bytes) or not isinstance(features, Sequence):
        msg = f"'{FEATURES_KEY}' must be an array, got {type(features).__name__}"
        raise SchemaError(msg)
    return features


def _feature_to_record(feature: object, idx: int) -> LocationRecord | None:
    """Return the record for one feature, or ``None`` if it is unusable."""
    if not isinstance(feature, Mapping):
        logger.debug("Skipping feature %d: not an object", idx)
        return None

    properties = feature.get("properties")
    name = properties.get("name") if isinstance(properties, Mapping) else None
    if not isinstance(name, str):
        logger.debug("Skipping feature %d: no name", idx)
        return None

    geometry = feature.get("geometry")
    raw_coords = geometry.get("coordinates") if isinstance(geometry, Mapping) else None
    lon_lat = coords_to_lon_lat(raw_coords)
    if lon_lat is None:
        logger.debug("Skipping feature %d (%s): no usable coordinates", idx, name)
        return None

    lon, lat = lon_lat
    return LocationRecord.from_name_and_coords(name, lon=lon, lat=lat)
