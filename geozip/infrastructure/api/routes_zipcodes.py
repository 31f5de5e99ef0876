"""Zip code endpoints — lookup, distance and radius search."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from geozip.application.use_cases.zip_queries import ZipCodeQueries
from geozip.config import settings
from geozip.domain.entities.zip_record import ZipRecord
from geozip.domain.errors import NotFoundError
from geozip.domain.value_objects.enums import DistanceUnit
from geozip.infrastructure.api.dependencies import get_zip_queries

router = APIRouter(prefix="/zipcodes", tags=["zipcodes"])


@router.get("/{zip_code}")
async def get_zip_code(zip_code: str, queries: ZipCodeQueries = Depends(get_zip_queries)):
    """Get a single zip code record."""
    try:
        record = queries.lookup(zip_code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return _serialize_record(record)


@router.get("/{zip_a}/distance/{zip_b}")
async def get_distance_between(
    zip_a: str,
    zip_b: str,
    unit: DistanceUnit | None = None,
    queries: ZipCodeQueries = Depends(get_zip_queries),
):
    """Great-circle distance between two zip codes."""
    unit = unit or settings.default_unit
    try:
        distance = queries.distance_between_zips(zip_a, zip_b, unit)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {"from": zip_a, "to": zip_b, "distance": distance, "unit": unit.value}


@router.get("/{zip_code}/distance")
async def get_distance_to_point(
    zip_code: str,
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: DistanceUnit | None = None,
    queries: ZipCodeQueries = Depends(get_zip_queries),
):
    """Great-circle distance from a zip code to an arbitrary coordinate."""
    unit = unit or settings.default_unit
    try:
        distance = queries.distance_to_coordinate(zip_code, lat, lon, unit)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {
        "from": zip_code,
        "to": {"latitude": lat, "longitude": lon},
        "distance": distance,
        "unit": unit.value,
    }


@router.get("/{zip_code}/nearby")
async def get_nearby_zip_codes(
    zip_code: str,
    radius: float = Query(..., gt=0),
    unit: DistanceUnit | None = None,
    queries: ZipCodeQueries = Depends(get_zip_queries),
):
    """Zip codes strictly within ``radius`` of a zip code, sorted for display."""
    unit = unit or settings.default_unit
    try:
        nearby = queries.zip_codes_within_radius(zip_code, radius, unit)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {
        "zip_code": zip_code,
        "radius": radius,
        "unit": unit.value,
        "total": len(nearby),
        "zip_codes": sorted(nearby),
    }


def _serialize_record(r: ZipRecord) -> dict:
    return {
        "zip_code": r.zip_code,
        "place_name": r.place_name,
        "admin_name": r.admin_name,
        "state_code": r.state_code,
        "latitude": r.latitude,
        "longitude": r.longitude,
    }
