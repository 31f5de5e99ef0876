"""Health check endpoint."""

from fastapi import APIRouter, Depends

from geozip.application.use_cases.zip_queries import ZipCodeQueries
from geozip.infrastructure.api.dependencies import get_zip_queries

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(queries: ZipCodeQueries = Depends(get_zip_queries)):
    """Report how many zip codes are loaded."""
    return {
        "status": "ok",
        "zip_codes": len(queries.index),
        "service": "geozip",
    }
