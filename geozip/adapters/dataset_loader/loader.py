"""Dataset loader — reads a GeoNames postal-code file into a ZipIndex."""

from __future__ import annotations

import logging
from pathlib import Path

from geozip.adapters.dataset_loader.parser import parse_line
from geozip.application.ports.dataset_port import DatasetLoaderPort
from geozip.domain.entities.zip_index import ZipIndex
from geozip.domain.entities.zip_record import ZipRecord
from geozip.domain.errors import FileAccessError

logger = logging.getLogger(__name__)


def _read_records(file_path: Path, encoding: str) -> dict[str, ZipRecord]:
    """Parse every non-empty line; the first invalid line aborts the read."""
    records: dict[str, ZipRecord] = {}
    with open(file_path, encoding=encoding, newline="\n") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = raw_line.removesuffix("\n").removesuffix("\r")
            if not line:
                continue
            record = parse_line(line, line_number)
            if record.zip_code in records:
                logger.debug(
                    "Zip code %s on line %d replaces an earlier entry",
                    record.zip_code,
                    line_number,
                )
            records[record.zip_code] = record
    return records


def load_dataset(path: str | Path, encoding: str = "utf-8") -> ZipIndex:
    """Load a tab-separated GeoNames postal-code file.

    Args:
        path: path to the dataset file.
        encoding: file encoding.

    Returns:
        A read-only ZipIndex. An empty file gives an empty index.

    Raises:
        FileAccessError: the file is missing, unreadable or not decodable.
        MalformedLineError: a line does not have 12 tab-separated fields.
        InvalidLatitudeError / InvalidLongitudeError: a coordinate is not a number.
    """
    file_path = Path(path)
    try:
        records = _read_records(file_path, encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(file_path), str(e)) from e

    logger.info("Loaded %d zip codes from %s", len(records), file_path.name)
    return ZipIndex(records)


class GeoNamesDatasetLoader(DatasetLoaderPort):
    """Loads GeoNames postal-code exports from the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def load(self, path: str | Path) -> ZipIndex:
        return load_dataset(path, encoding=self._encoding)
