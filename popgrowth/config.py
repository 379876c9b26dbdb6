"""
Configuration settings for popgrowth.

Uses Pydantic Settings to load environment variables (and an optional `.env`
file) for the input location, the two target census years, column layout,
and logging. CLI options override these per run.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Input
    input_path: Path = Field(Path("./popu-pref.csv"), alias="POPGROWTH_INPUT")
    encoding: str = Field("utf-8", alias="POPGROWTH_ENCODING")
    delimiter: str = Field(",", alias="POPGROWTH_DELIMITER", min_length=1)

    # Column layout: <year>,<region>,<unused>,<value>
    year_column: int = Field(0, alias="POPGROWTH_YEAR_COLUMN", ge=0)
    region_column: int = Field(1, alias="POPGROWTH_REGION_COLUMN", ge=0)
    value_column: int = Field(3, alias="POPGROWTH_VALUE_COLUMN", ge=0)

    # Target years
    year_a: int = Field(2010, alias="POPGROWTH_YEAR_A")
    year_b: int = Field(2015, alias="POPGROWTH_YEAR_B")

    # Drop target-year rows whose value is not an integer instead of
    # aggregating them as not-a-number.
    skip_invalid: bool = Field(False, alias="POPGROWTH_SKIP_INVALID")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_distinct_years(self) -> "Settings":
        if self.year_a == self.year_b:
            raise ValueError(f"target years must differ (both are {self.year_a})")
        return self

    def with_overrides(self, **overrides: object) -> "Settings":
        """
        Return a re-validated copy with the non-None overrides applied.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return Settings.model_validate({**self.model_dump(), **changes})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
