"""Domain errors raised by the dataset loader and the query engine."""

from __future__ import annotations


class GeoZipError(Exception):
    """Base class for all geozip errors."""


class LoadError(GeoZipError):
    """The dataset could not be loaded; no index was produced."""


class FileAccessError(LoadError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"error while opening dataset {path}: {reason}")


class MalformedLineError(LoadError):
    def __init__(self, line_number: int, field_count: int, expected: int = 12):
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"line {line_number} has {field_count} fields, expected {expected}"
        )


class InvalidCoordinateError(LoadError):
    coordinate = "coordinate"

    def __init__(self, raw_value: str, line_number: int):
        self.raw_value = raw_value
        self.line_number = line_number
        super().__init__(
            f"error while converting {raw_value!r} to {self.coordinate} "
            f"(line {line_number})"
        )


class InvalidLatitudeError(InvalidCoordinateError):
    coordinate = "latitude"


class InvalidLongitudeError(InvalidCoordinateError):
    coordinate = "longitude"


class NotFoundError(GeoZipError, LookupError):
    def __init__(self, zip_code: str):
        self.zip_code = zip_code
        super().__init__(f"zipcode {zip_code} not found")
