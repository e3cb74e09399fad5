"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from drug_browser.constants import DEFAULT_CORS_ORIGINS, OPENFDA_DRUGSFDA_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # openFDA
    openfda_api_key: str = ""
    openfda_drugsfda_url: str = OPENFDA_DRUGSFDA_URL

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
