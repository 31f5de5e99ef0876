"""GeoNames line parsing — field-count and coordinate validation."""

from __future__ import annotations

import math
import re

from geozip.domain.entities.zip_record import ZipRecord
from geozip.domain.errors import (
    InvalidCoordinateError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    MalformedLineError,
)

# GeoNames postal-code export: country code, postal code, place name,
# admin name1, admin code1, admin name2, admin code2, admin name3,
# admin code3, latitude, longitude, accuracy
FIELD_COUNT = 12

ZIP_CODE = 1
PLACE_NAME = 2
ADMIN_NAME = 3
STATE_CODE = 4
LATITUDE = 9
LONGITUDE = 10

# Plain decimal or exponent notation; no whitespace, underscores, inf or nan
DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def split_fields(line: str, line_number: int) -> list[str]:
    """Split a raw line on tabs, enforcing the GeoNames field count."""
    fields = line.split("\t")
    if len(fields) != FIELD_COUNT:
        raise MalformedLineError(line_number, len(fields), FIELD_COUNT)
    return fields


def parse_coordinate(
    raw: str,
    line_number: int,
    error_cls: type[InvalidCoordinateError],
) -> float:
    """Parse a coordinate token; it must be a finite plain decimal number."""
    if not DECIMAL_RE.fullmatch(raw):
        raise error_cls(raw, line_number)
    value = float(raw)
    if not math.isfinite(value):
        raise error_cls(raw, line_number)
    return value


def parse_line(line: str, line_number: int) -> ZipRecord:
    """Parse one dataset line into a ZipRecord.

    Raises:
        MalformedLineError: the line does not have exactly 12 fields.
        InvalidLatitudeError: field 9 is not a number.
        InvalidLongitudeError: field 10 is not a number.
    """
    fields = split_fields(line, line_number)
    latitude = parse_coordinate(fields[LATITUDE], line_number, InvalidLatitudeError)
    longitude = parse_coordinate(fields[LONGITUDE], line_number, InvalidLongitudeError)

    return ZipRecord(
        zip_code=fields[ZIP_CODE],
        place_name=fields[PLACE_NAME],
        admin_name=fields[ADMIN_NAME],
        latitude=latitude,
        longitude=longitude,
        state_code=fields[STATE_CODE],
    )
