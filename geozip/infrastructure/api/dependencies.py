"""FastAPI dependency injection — wires the dataset loader into the query engine."""

from __future__ import annotations

import logging
from functools import lru_cache

from geozip.adapters.dataset_loader.loader import GeoNamesDatasetLoader
from geozip.application.use_cases.zip_queries import ZipCodeQueries
from geozip.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_zip_queries() -> ZipCodeQueries:
    """Load the configured dataset once per process.

    The index is read-only, so the instance is shared by all requests.
    """
    loader = GeoNamesDatasetLoader(encoding=settings.dataset_encoding)
    queries = ZipCodeQueries.from_dataset(settings.dataset_path, loader=loader)
    logger.info("Serving %d zip codes from %s", len(queries.index), settings.dataset_path)
    return queries
