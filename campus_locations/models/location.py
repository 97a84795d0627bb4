"""Pydantic model for a flattened location record.

A LocationRecord is one named point taken from a GeoJSON feature. The
field order (``id``, ``name``, ``building``, ``lat``, ``lon``) is the
order written to ``locations.json``.
"""

from __future__ import annotations

from pydantic import BaseModel

from campus_locations.utils.helpers import create_id_from_name


class LocationRecord(BaseModel):
    """A single location entry.

    Attributes:
        id: Identifier derived from the name (see ``create_id_from_name``).
        name: Original feature name, unmodified.
        building: Building name. The GeoJSON export carries no separate
            building field, so this repeats ``name``.
        lat: Latitude (second GeoJSON coordinate).
        lon: Longitude (first GeoJSON coordinate).
    """

    id: str
    name: str
    building: str
    lat: float
    lon: float

    model_config = {"frozen": True}

    @classmethod
    def from_name_and_coords(cls, name: str, lon: float, lat: float) -> LocationRecord:
        """Build a record from a feature name and a ``(lon, lat)`` pair."""
        return cls(
            id=create_id_from_name(name),
            name=name,
            building=name,
            lat=lat,
            lon=lon,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict in output field order."""
        return self.model_dump()  # type: ignore[return-value]
