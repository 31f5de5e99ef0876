"""GeoPoint value object — immutable (lat, lon) pair and haversine distance."""

import math
from dataclasses import dataclass


def round_distance(distance: float) -> float:
    """Round a non-negative distance to 2 decimals, halves away from zero.

    NaN passes through unchanged.
    """
    if math.isnan(distance):
        return distance
    return math.floor(distance * 100 + 0.5) / 100


def great_circle_distance(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float,
    earth_radius: float,
) -> float:
    """Distance between two points using the Haversine formula.

    Args:
        latitude1, longitude1: first point, in degrees.
        latitude2, longitude2: second point, in degrees.
        earth_radius: sphere radius; the result is in the same unit.

    Returns:
        Distance rounded to 2 decimal places, or NaN when any coordinate is
        not finite. NaN compares false against every radius.
    """
    if not all(math.isfinite(v) for v in (latitude1, longitude1, latitude2, longitude2)):
        return math.nan

    lat1 = latitude1 * math.pi / 180
    lon1 = longitude1 * math.pi / 180
    lat2 = latitude2 * math.pi / 180
    lon2 = longitude2 * math.pi / 180
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_distance(c * earth_radius)


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def distance_to(self, other: "GeoPoint", earth_radius: float) -> float:
        """Great-circle distance to ``other`` on a sphere of ``earth_radius``."""
        return great_circle_distance(
            self.latitude,
            self.longitude,
            other.latitude,
            other.longitude,
            earth_radius,
        )
