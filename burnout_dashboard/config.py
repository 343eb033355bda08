"""
Configuration settings for the burnout dashboard.

Uses Pydantic Settings to load environment variables for the web server,
logging, dataset generation, and panel presentation defaults.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from burnout_dashboard.domain.models import Ethnicity, PlotType


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Web server
    host: str = Field("127.0.0.1", alias="DASHBOARD_HOST")
    port: int = Field(8050, ge=1, le=65535, alias="DASHBOARD_PORT")
    debug: bool = Field(False, alias="DASHBOARD_DEBUG")

    # Dataset
    dataset_seed: Optional[int] = Field(None, alias="DATASET_SEED")

    # Panels
    table_page_size: int = Field(10, gt=0, alias="TABLE_PAGE_SIZE")
    map_radius_scale: float = Field(1000.0, gt=0, alias="MAP_RADIUS_SCALE")
    map_zoom: float = Field(3.0, ge=0, alias="MAP_ZOOM")

    # Selector defaults
    default_plot_type: PlotType = Field(PlotType.GENDER_SALARY, alias="DEFAULT_PLOT_TYPE")
    default_ethnicity: Ethnicity = Field(Ethnicity.ASIAN, alias="DEFAULT_ETHNICITY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
