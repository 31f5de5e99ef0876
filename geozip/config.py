"""Application configuration via Pydantic Settings.

NOTE: env names are mapped explicitly (GEOZIP_DATASET_PATH, GEOZIP_DEFAULT_UNIT,
DEBUG) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from geozip.domain.value_objects.enums import DistanceUnit


class Settings(BaseSettings):
    # Dataset
    dataset_path: str = Field(
        default="data/allCountries.txt",
        validation_alias="GEOZIP_DATASET_PATH",
    )
    dataset_encoding: str = Field(default="utf-8", validation_alias="GEOZIP_DATASET_ENCODING")

    # Queries
    default_unit: DistanceUnit = Field(default=DistanceUnit.KM, validation_alias="GEOZIP_DEFAULT_UNIT")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
