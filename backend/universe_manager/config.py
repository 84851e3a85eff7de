"""
Application Configuration

Settings come from environment variables or a .env file. Names are
case-insensitive: DATABASE_URL, LOG_LEVEL, CORS_ORIGINS (a JSON list), ...
"""
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Runtime settings for the universe manager API"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = "Wrestling Universe Manager API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Storage; SQLite by default, any SQLAlchemy URL works
    database_url: str = "sqlite:///./universe.db"
    database_echo: bool = False

    # Desktop front end (dev server)
    cors_origins: List[str] = ["http://localhost:1420"]

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def effective_log_level(self) -> str:
        """debug=True always logs at DEBUG"""
        return "DEBUG" if self.debug else self.log_level

    @property
    def sql_echo(self) -> bool:
        return self.database_echo or self.debug


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
