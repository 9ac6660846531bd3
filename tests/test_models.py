from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from trackify.database.models import Sighting, format_timestamp

from conftest import make_document


def test_validates_stored_document():
    document = make_document()

    sighting = Sighting.model_validate(document)

    assert sighting.id == str(document["_id"])
    assert sighting.frame_number == 120
    assert sighting.car_id == 7
    assert sighting.plate_text == "DL01AB1234"
    assert sighting.camera_id == "CAM-01"
    assert sighting.confidence_score == pytest.approx(0.93)
    assert sighting.timestamp == datetime(2024, 5, 1, 10, 15)


def test_dump_uses_wire_names():
    document = make_document()

    payload = Sighting.model_validate(document).model_dump(mode="json", by_alias=True)

    assert payload == {
        "_id": str(document["_id"]),
        "frame_nmr": 120,
        "car_id": 7,
        "license_plate_text": "DL01AB1234",
        "camera_number": "CAM-01",
        "license_number_score": 0.93,
        "location": document["location"],
        "timestamp": "2024-05-01T10:15:00.000Z",
    }


def test_json_rendering_reads_back():
    original = Sighting.model_validate(make_document())
    payload = original.model_dump(mode="json", by_alias=True)

    again = Sighting.model_validate(payload)

    assert again.model_dump(mode="json", by_alias=True) == payload


def test_numeric_coercion():
    sighting = Sighting.model_validate(make_document(
        frame_nmr=12.0, license_number_score=1, camera_number=3))

    assert sighting.frame_number == 12
    assert isinstance(sighting.frame_number, int)
    assert sighting.confidence_score == 1.0
    assert sighting.camera_id == "3"


def test_missing_field_is_rejected():
    document = make_document()
    del document["location"]

    with pytest.raises(ValidationError, match="location"):
        Sighting.model_validate(document)


@pytest.mark.parametrize("field, value", [
    ("car_id", "seven"),
    ("car_id", 7.5),
    ("license_number_score", "high"),
    ("license_number_score", float("nan")),
    ("license_number_score", float("inf")),
    ("license_plate_text", None),
    ("timestamp", "yesterday"),
])
def test_wrong_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Sighting.model_validate(make_document(**{field: value}))


def test_format_timestamp_converts_aware_values_to_utc():
    value = datetime(2024, 5, 1, 15, 45, 0, 123456, tzinfo=timezone(timedelta(hours=5, minutes=30)))

    assert format_timestamp(value) == "2024-05-01T10:15:00.123Z"
