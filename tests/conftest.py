"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from geozip.adapters.dataset_loader.loader import load_dataset
from geozip.application.use_cases.zip_queries import ZipCodeQueries

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def valid_dataset_path() -> Path:
    return DATA_DIR / "valid_dataset.txt"


@pytest.fixture
def zip_index(valid_dataset_path):
    return load_dataset(valid_dataset_path)


@pytest.fixture
def queries(zip_index):
    return ZipCodeQueries(zip_index)
