"""geozip — FastAPI application factory."""

import logging

from fastapi import FastAPI

from geozip.config import settings
from geozip.infrastructure.api.routes_health import router as health_router
from geozip.infrastructure.api.routes_zipcodes import router as zipcodes_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    app = FastAPI(
        title="geozip — postal code lookup",
        description="Zip code lookup, great-circle distance and radius search",
        version="0.1.0",
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(zipcodes_router, prefix="/api")

    return app


app = create_app()
