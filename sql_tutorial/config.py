from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TutorialSettings(BaseSettings):
    DUCKDB_DATABASE: str = ":memory:"  # in-process, gone when the session closes
    DUCKDB_THREADS: Optional[int] = Field(None, ge=1)

    HEALTH_CSV_URL: str = "https://storage.googleapis.com/covid19-open-data/v3/health.csv"
    LOCATIONS_CSV_URL: str = "https://storage.googleapis.com/covid19-open-data/v2/index.csv"
    ENABLE_REMOTE_FETCH: bool = True   # httpfs is only loaded for http(s) sources

    MAX_DISPLAY_ROWS: int = Field(20, ge=1, le=2000)
    OUTPUT_DIR: str = "./output"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file="./.env",
        env_ignore_empty=True,
        extra="ignore",
    )


def get_settings(**overrides) -> TutorialSettings:
    return TutorialSettings(**overrides)


settings = TutorialSettings()
