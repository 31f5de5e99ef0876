"""Port interface for loading a postal-code dataset into an index."""

from abc import ABC, abstractmethod
from pathlib import Path

from geozip.domain.entities.zip_index import ZipIndex


class DatasetLoaderPort(ABC):
    @abstractmethod
    def load(self, path: str | Path) -> ZipIndex:
        """Load the dataset at ``path``.

        Raises a LoadError subclass; never returns a partial index.
        """
        ...
