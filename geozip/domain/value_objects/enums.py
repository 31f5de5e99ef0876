"""Domain enums — pure Python, no external dependencies."""

from enum import Enum

# Fixed sphere radii; not WGS-84 values. Reference distances depend on them.
EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MI = 3958.0


class DistanceUnit(str, Enum):
    KM = "km"
    MILES = "mi"

    @property
    def earth_radius(self) -> float:
        if self is DistanceUnit.MILES:
            return EARTH_RADIUS_MI
        return EARTH_RADIUS_KM
