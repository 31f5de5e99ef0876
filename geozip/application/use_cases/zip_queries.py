"""ZipCodeQueries — lookup, distance and radius search over a ZipIndex."""

from __future__ import annotations

from pathlib import Path

from geozip.application.ports.dataset_port import DatasetLoaderPort
from geozip.domain.entities.zip_index import ZipIndex
from geozip.domain.entities.zip_record import ZipRecord
from geozip.domain.errors import NotFoundError
from geozip.domain.value_objects.enums import DistanceUnit
from geozip.domain.value_objects.geo_point import GeoPoint


class ZipCodeQueries:
    """Read-only query engine over a loaded postal-code index.

    All distances are great-circle distances rounded to 2 decimals.
    """

    def __init__(self, index: ZipIndex):
        self._index = index

    @classmethod
    def from_dataset(
        cls,
        path: str | Path,
        loader: DatasetLoaderPort | None = None,
    ) -> ZipCodeQueries:
        """Load the dataset at ``path`` and wrap it in a query engine."""
        if loader is None:
            from geozip.adapters.dataset_loader.loader import GeoNamesDatasetLoader

            loader = GeoNamesDatasetLoader()
        return cls(loader.load(path))

    @property
    def index(self) -> ZipIndex:
        return self._index

    def lookup(self, zip_code: str) -> ZipRecord:
        """Exact-key lookup; the key is not trimmed or case-folded."""
        record = self._index.get(zip_code)
        if record is None:
            raise NotFoundError(zip_code)
        return record

    # ─── Pairwise distance ──────────────────────────────────────────

    def calculate_distance(self, zip_a: str, zip_b: str, earth_radius: float) -> float:
        location_a = self.lookup(zip_a)
        location_b = self.lookup(zip_b)
        return location_a.location.distance_to(location_b.location, earth_radius)

    def distance_between_zips(
        self, zip_a: str, zip_b: str, unit: DistanceUnit = DistanceUnit.KM
    ) -> float:
        """Distance between two zip codes; ``zip_a`` is looked up first."""
        return self.calculate_distance(zip_a, zip_b, unit.earth_radius)

    def distance_km(self, zip_a: str, zip_b: str) -> float:
        return self.distance_between_zips(zip_a, zip_b, DistanceUnit.KM)

    def distance_miles(self, zip_a: str, zip_b: str) -> float:
        return self.distance_between_zips(zip_a, zip_b, DistanceUnit.MILES)

    # ─── Distance to an arbitrary point ─────────────────────────────

    def distance_to_coordinate(
        self,
        zip_code: str,
        latitude: float,
        longitude: float,
        unit: DistanceUnit = DistanceUnit.KM,
    ) -> float:
        location = self.lookup(zip_code)
        point = GeoPoint(latitude=latitude, longitude=longitude)
        return location.location.distance_to(point, unit.earth_radius)

    def distance_km_to_point(self, zip_code: str, latitude: float, longitude: float) -> float:
        return self.distance_to_coordinate(zip_code, latitude, longitude, DistanceUnit.KM)

    def distance_miles_to_point(self, zip_code: str, latitude: float, longitude: float) -> float:
        return self.distance_to_coordinate(zip_code, latitude, longitude, DistanceUnit.MILES)

    # ─── Radius search ──────────────────────────────────────────────

    def find_zip_codes_within_radius(
        self, location: ZipRecord, max_radius: float, earth_radius: float
    ) -> list[str]:
        """Zip codes strictly closer than ``max_radius`` to ``location``.

        ``location`` itself is excluded by zip code, not by coordinates.
        Result order is unspecified.
        """
        origin = location.location
        return [
            record.zip_code
            for record in self._index.records()
            if record.zip_code != location.zip_code
            and origin.distance_to(record.location, earth_radius) < max_radius
        ]

    def zip_codes_within_radius(
        self, zip_code: str, max_radius: float, unit: DistanceUnit = DistanceUnit.KM
    ) -> list[str]:
        location = self.lookup(zip_code)
        return self.find_zip_codes_within_radius(location, max_radius, unit.earth_radius)

    def zip_codes_within_km_radius(self, zip_code: str, radius_km: float) -> list[str]:
        return self.zip_codes_within_radius(zip_code, radius_km, DistanceUnit.KM)

    def zip_codes_within_miles_radius(self, zip_code: str, radius_mi: float) -> list[str]:
        return self.zip_codes_within_radius(zip_code, radius_mi, DistanceUnit.MILES)
