"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from ARGCHECK_* environment variables."""

    # Initial mode of the default engine: off | disabled | normal | strict
    MODE: str = "normal"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "warning"

    model_config = SettingsConfigDict(
        env_prefix="ARGCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
