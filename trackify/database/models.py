from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def format_timestamp(value: datetime) -> str:
    # naive values are UTC, as pymongo returns them
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec='milliseconds') + 'Z'


class Sighting(BaseModel):
    """One stored plate sighting, read from a document or its JSON rendering."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = Field(None, alias="_id")
    frame_number: int = Field(alias="frame_nmr")
    car_id: int
    plate_text: str = Field(alias="license_plate_text")
    camera_id: str = Field(alias="camera_number")
    confidence_score: float = Field(alias="license_number_score", allow_inf_nan=False)
    location: str  # D°M'S.s"H D°M'S.s"H
    timestamp: datetime

    @field_validator("id", mode="before")
    @classmethod
    def object_id_to_str(cls, value: Any) -> Optional[str]:
        return str(value) if value is not None else None

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)
