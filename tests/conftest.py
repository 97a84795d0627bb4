"""Shared pytest fixtures for the campus_locations test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def sample_geojson(data_dir: Path) -> Path:
    """Path to a 5-feature export; 3 features are convertible."""
    return data_dir / "export.geojson"


# ---------------------------------------------------------------------------
# Document builders
# ---------------------------------------------------------------------------


def _make_feature(
    name: object = "Van der Sterr 1024",
    coordinates: object = (4.37, 52.01),
) -> dict[str, object]:
    coords = list(coordinates) if isinstance(coordinates, tuple) else coordinates
    return {
        "type": "Feature",
        "properties": {"name": name},
        "geometry": {"type": "Point", "coordinates": coords},
    }


@pytest.fixture()
def make_feature():
    """Return a builder for GeoJSON Point features."""
    return _make_feature


@pytest.fixture()
def write_geojson(tmp_path: Path):
    """Return a helper that writes a document to ``tmp_path/export.geojson``."""

    def _write(document: object, name: str = "export.geojson") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
