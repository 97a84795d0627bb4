"""Data models and schemas.

Defines the data structures produced by the export:
- LocationRecord: One flattened location entry
- LocationPayload: Plain-dict shape of a serialised LocationRecord
"""

from campus_locations.models.contracts import LocationPayload
from campus_locations.models.location import LocationRecord

__all__ = [
    "LocationPayload",
    "LocationRecord",
]
