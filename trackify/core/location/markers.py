from typing import Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from trackify.core.location.coordinate_parser import LocationFormatError, parse_location
from trackify.database.models import Sighting
from trackify.utils.logger import get_logger

ON_INVALID_SKIP = "skip"
ON_INVALID_ABORT = "abort"
ON_INVALID_POLICIES = (ON_INVALID_SKIP, ON_INVALID_ABORT)


class Marker(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str]
    plate_text: str
    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lng")
    label: str


class SkippedLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str]
    location: str
    reason: str


class MarkerSet(BaseModel):
    markers: List[Marker] = []
    skipped: List[SkippedLocation] = []


def build_markers(sightings: Iterable[Sighting], on_invalid: str = ON_INVALID_SKIP) -> MarkerSet:
    """Parse each sighting's location once and turn it into a map marker.

    ``on_invalid`` decides what a malformed location does: ``"skip"`` records
    it in ``MarkerSet.skipped``, ``"abort"`` raises ``LocationFormatError``.
    """
    if on_invalid not in ON_INVALID_POLICIES:
        raise ValueError(f"Unknown invalid-location policy: {on_invalid!r}")

    logger = get_logger(__name__)
    marker_set = MarkerSet()

    for sighting in sightings:
        result = parse_location(sighting.location)
        if not result.ok:
            if on_invalid == ON_INVALID_ABORT:
                raise LocationFormatError(result.text, f"sighting {sighting.id}: {result.reason}")
            logger.warning(f"Skipping marker for sighting {sighting.id}: {result.reason}")
            marker_set.skipped.append(SkippedLocation(
                id=sighting.id, location=sighting.location, reason=result.reason))
            continue

        latitude, longitude = result.coordinates
        marker_set.markers.append(Marker(
            id=sighting.id,
            plate_text=sighting.plate_text,
            latitude=latitude,
            longitude=longitude,
            label=sighting.plate_text,
        ))

    return marker_set
