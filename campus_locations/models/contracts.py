"""Payload contracts for the written location document.

The web app reads ``locations.json`` as a list of these dicts, looking
rooms up by ``id`` and matching calendar locations against ``name`` and
``building``.
"""

from __future__ import annotations

from typing import TypedDict


class LocationPayload(TypedDict):
    """Serialised ``LocationRecord``: one entry of ``locations.json``."""

    id: str
    name: str
    building: str
    lat: float
    lon: float
