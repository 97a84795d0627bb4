"""Campus location export tooling.

Converts a GeoJSON FeatureCollection of named campus buildings into the
flat ``locations.json`` list consumed by the room-finder web app.
"""

__version__ = "0.1.0"
