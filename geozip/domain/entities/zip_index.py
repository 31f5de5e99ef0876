"""ZipIndex — read-only mapping of zip code to ZipRecord."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from geozip.domain.entities.zip_record import ZipRecord


class ZipIndex(Mapping[str, ZipRecord]):
    """Immutable index built once by the dataset loader.

    No mutation API is exposed, so one instance can be shared across threads
    without locking. Iteration order is not part of the contract.
    """

    def __init__(self, records: Mapping[str, ZipRecord] | None = None):
        self._records = MappingProxyType(dict(records or {}))

    def __getitem__(self, zip_code: str) -> ZipRecord:
        return self._records[zip_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> Iterator[ZipRecord]:
        return iter(self._records.values())

    def __repr__(self) -> str:
        return f"ZipIndex({len(self)} zip codes)"
