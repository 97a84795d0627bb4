"""Tests for the write_locations activity."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from campus_locations.activities.write_locations import render_locations, write_locations
from campus_locations.core.exceptions import OutputWriteError
from campus_locations.models.location import LocationRecord

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def records() -> list[LocationRecord]:
    return [
        LocationRecord.from_name_and_coords("Van der Sterr 1024", lon=4.37, lat=52.01),
        LocationRecord.from_name_and_coords("Jan Mouton Learning Centre", lon=18.8671, lat=-33.9319),
    ]


class TestRenderLocations:
    """In-memory rendering."""

    def test_two_space_indent_and_field_order(self, records: list[LocationRecord]) -> None:
        text = render_locations(records[:1])
        assert text == (
            "[\n"
            "  {\n"
            '    "id": "VAN_DER_STERR_1024",\n'
            '    "name": "Van der Sterr 1024",\n'
            '    "building": "Van der Sterr 1024",\n'
            '    "lat": 52.01,\n'
            '    "lon": 4.37\n'
            "  }\n"
            "]"
        )

    def test_non_finite_coordinate_rejected(self) -> None:
        record = LocationRecord.from_name_and_coords("A", lon=float("nan"), lat=float("inf"))
        with pytest.raises(ValueError):
            render_locations([record])

    def test_empty(self) -> None:
        assert render_locations([]) == "[]"

    def test_non_ascii_not_escaped(self) -> None:
        record = LocationRecord.from_name_and_coords("Küsel Gebäude", lon=1.0, lat=2.0)
        text = render_locations([record])
        assert "Küsel Gebäude" in text
        assert "KÜSEL_GEBÄUDE" in text


class TestWriteLocations:
    """Writing the output file."""

    def test_writes_file(self, tmp_path: Path, records: list[LocationRecord]) -> None:
        out = write_locations(records, tmp_path / "locations.json")
        assert out == tmp_path / "locations.json"
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [d["id"] for d in data] == ["VAN_DER_STERR_1024", "JAN_MOUTON_LEARNING_CENTRE"]

    def test_overwrites_existing(self, tmp_path: Path, records: list[LocationRecord]) -> None:
        path = tmp_path / "locations.json"
        path.write_text("stale content that is longer than the new output" * 100, encoding="utf-8")
        write_locations([], path)
        assert path.read_text(encoding="utf-8") == "[]"

    def test_custom_indent(self, tmp_path: Path, records: list[LocationRecord]) -> None:
        path = write_locations(records, tmp_path / "locations.json", indent=4)
        assert '\n        "id": "VAN_DER_STERR_1024"' in path.read_text(encoding="utf-8")

    def test_unwritable_destination(self, tmp_path: Path, records: list[LocationRecord]) -> None:
        with pytest.raises(OutputWriteError, match="for writing"):
            write_locations(records, tmp_path / "no-such-dir" / "locations.json")

    def test_non_finite_coordinate_writes_nothing(self, tmp_path: Path) -> None:
        record = LocationRecord.from_name_and_coords("A", lon=float("nan"), lat=52.01)
        path = tmp_path / "locations.json"
        with pytest.raises(OutputWriteError, match="Could not serialise"):
            write_locations([record], path)

        assert not path.exists()
