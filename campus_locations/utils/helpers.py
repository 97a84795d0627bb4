"""Shared helper functions used across the export stages."""

from __future__ import annotations

import math
from collections.abc import Sequence

from campus_locations.core.constants import MIN_COORDINATE_ELEMENTS


def create_id_from_name(name: str) -> str:
    """Derive a location identifier from a display name.

    Spaces become underscores and letters are upper-cased; every other
    character passes through. ``"Van der Sterr 1024"`` becomes
    ``"VAN_DER_STERR_1024"``. Applying it twice gives the same result.
    """
    return name.replace(" ", "_").upper()


def is_number(value: object) -> bool:
    """Whether *value* is a JSON number (``bool`` excluded)."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def coords_to_lon_lat(raw_coords: object) -> tuple[float, float] | None:
    """Return ``(lon, lat)`` from a GeoJSON position, or ``None`` if unusable.

    Elements beyond the second (altitude) are ignored. No bounds checking
    is performed, but values that are not finite floats (integers too large
    for a float, or literals such as ``1e400``) make the position unusable.
    """
    if isinstance(raw_coords, str) or not isinstance(raw_coords, Sequence):
        return None
    if len(raw_coords) < MIN_COORDINATE_ELEMENTS:
        return None
    lon, lat = raw_coords[0], raw_coords[1]
    if not (is_number(lon) and is_number(lat)):
        return None
    try:
        lon_f, lat_f = float(lon), float(lat)
    except OverflowError:
        return None
    if not (math.isfinite(lon_f) and math.isfinite(lat_f)):
        return None
    return (lon_f, lat_f)
