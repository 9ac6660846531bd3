"""Vehicle sighting lookup endpoints"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from trackify.core.location.markers import ON_INVALID_POLICIES, ON_INVALID_SKIP, MarkerSet, build_markers
from trackify.database.models import Sighting
from trackify.database.mongodb_manager import MongoDBManager

router = APIRouter()


def get_db(request: Request) -> MongoDBManager:
    return request.app.state.db


@router.get("", response_model=List[Sighting])
def list_vehicles(
    number_plate: Optional[str] = Query(None, alias="numberPlate"),
    db: MongoDBManager = Depends(get_db),
):
    """Sightings whose plate text equals numberPlate exactly, or all of them"""
    return db.find_sightings(number_plate)


@router.get("/markers", response_model=MarkerSet)
def list_vehicle_markers(
    number_plate: Optional[str] = Query(None, alias="numberPlate"),
    on_invalid: str = Query(ON_INVALID_SKIP, alias="onInvalid"),
    db: MongoDBManager = Depends(get_db),
):
    """Map markers for the matching sightings"""
    if on_invalid not in ON_INVALID_POLICIES:
        return JSONResponse(
            status_code=422,
            content={"message": f"onInvalid must be one of {', '.join(ON_INVALID_POLICIES)}"},
        )

    sightings = db.find_sightings(number_plate)
    return build_markers(sightings, on_invalid=on_invalid)
