"""Parsing of degrees/minutes/seconds location strings.

Sightings carry their location as text, e.g. ``28°36'50.2"N 77°12'30.0"E``.
``parse_location`` turns that into decimal degrees and reports malformed
input as an ``InvalidLocation`` result instead of raising, so every caller
decides for itself whether a bad record is skipped or fatal.
"""
import re
from dataclasses import dataclass, field
from typing import NamedTuple, Union

LOCATION_PATTERN = re.compile(
    r"\s*(\d{1,3})°(\d{1,2})'(\d{1,2}(?:\.\d+)?)\"([NS])"
    r"\s+(\d{1,3})°(\d{1,2})'(\d{1,2}(?:\.\d+)?)\"([EW])\s*",
    re.ASCII)

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


class LocationFormatError(ValueError):
    def __init__(self, text, reason: str):
        super().__init__(f"Invalid location {text!r}: {reason}")
        self.text = text
        self.reason = reason


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ParsedLocation:
    text: str
    coordinates: Coordinates
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class InvalidLocation:
    text: str
    reason: str
    ok: bool = field(default=False, init=False)


LocationResult = Union[ParsedLocation, InvalidLocation]


def _to_decimal(degrees: str, minutes: str, seconds: str, hemisphere: str, negative: str) -> float:
    value = int(degrees) + int(minutes) / 60 + float(seconds) / 3600
    return -value if hemisphere == negative else value


def _component_error(degrees: str, minutes: str, seconds: str, limit: float, axis: str):
    if int(minutes) >= 60:
        return f"{axis} minutes out of range: {minutes}"
    if float(seconds) >= 60:
        return f"{axis} seconds out of range: {seconds}"
    if int(degrees) + int(minutes) / 60 + float(seconds) / 3600 > limit:
        return f"{axis} exceeds {limit:g} degrees"
    return None


def parse_location(text) -> LocationResult:
    if not isinstance(text, str):
        return InvalidLocation(text=text, reason="location is not a string")

    match = LOCATION_PATTERN.fullmatch(text)
    if match is None:
        return InvalidLocation(text=text, reason="expected D°M'S.s\"[NS] D°M'S.s\"[EW]")

    lat_deg, lat_min, lat_sec, lat_dir, lng_deg, lng_min, lng_sec, lng_dir = match.groups()

    reason = (_component_error(lat_deg, lat_min, lat_sec, MAX_LATITUDE, "latitude") or
              _component_error(lng_deg, lng_min, lng_sec, MAX_LONGITUDE, "longitude"))
    if reason:
        return InvalidLocation(text=text, reason=reason)

    return ParsedLocation(text=text, coordinates=Coordinates(
        latitude=_to_decimal(lat_deg, lat_min, lat_sec, lat_dir, 'S'),
        longitude=_to_decimal(lng_deg, lng_min, lng_sec, lng_dir, 'W'),
    ))


def parse_location_strict(text) -> Coordinates:
    result = parse_location(text)
    if not result.ok:
        raise LocationFormatError(result.text, result.reason)
    return result.coordinates
