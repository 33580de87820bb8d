# shopapi/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every value has a default so the service starts with a local SQLite
    file and no .env at all.

    Common overrides (.env):
      - DATABASE_URL (any SQLAlchemy URL, e.g. postgresql+psycopg://...)
      - LOG_LEVEL
      - CORS_ORIGINS (JSON list)
    """

    PROJECT_NAME: str = "Shop API"
    API_PREFIX: str = ""

    # Storage
    DATABASE_URL: str = "sqlite:///./shop.db"
    SQL_ECHO: bool = False

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 1323

    LOG_LEVEL: str = "INFO"

    # Raw body echo for debugging clients; never enable in production
    ENABLE_ECHO_ENDPOINT: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
