"""Tests for the LocationRecord pydantic model."""

from __future__ import annotations

import pydantic
import pytest

from campus_locations.models import LocationPayload, LocationRecord


class TestLocationRecord:
    """LocationRecord construction and serialisation."""

    def test_from_name_and_coords(self) -> None:
        record = LocationRecord.from_name_and_coords("Van der Sterr 1024", lon=4.37, lat=52.01)
        assert record.id == "VAN_DER_STERR_1024"
        assert record.name == "Van der Sterr 1024"
        assert record.building == "Van der Sterr 1024"
        assert record.lat == 52.01
        assert record.lon == 4.37

    def test_to_dict_field_order(self) -> None:
        record = LocationRecord.from_name_and_coords("Merensky", lon=18.86, lat=-33.93)
        assert list(record.to_dict()) == ["id", "name", "building", "lat", "lon"]

    def test_to_dict_matches_payload_contract(self) -> None:
        record = LocationRecord.from_name_and_coords("Merensky", lon=18.86, lat=-33.93)
        assert set(record.to_dict()) == set(LocationPayload.__annotations__)

    def test_frozen(self) -> None:
        record = LocationRecord.from_name_and_coords("Merensky", lon=18.86, lat=-33.93)
        with pytest.raises(pydantic.ValidationError):
            record.name = "Other"  # type: ignore[misc]
