"""ZipRecord entity — one row of the postal-code dataset."""

from dataclasses import dataclass

from geozip.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class ZipRecord:
    zip_code: str
    place_name: str
    admin_name: str
    latitude: float
    longitude: float
    state_code: str = ""

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
