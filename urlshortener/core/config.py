"""Application configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

SQLITE_URL_PREFIX = "sqlite:///"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    database_url: str = "url_shortener.db"

    # Application
    app_title: str = "URL Shortener Service"
    app_version: str = "1.0.0"
    app_description: str = "Shorten long URLs and track clicks on the short links"
    log_level: str = "INFO"

    # URL Shortener
    short_id_length: int = 8
    max_short_id_attempts: int = 5

    @property
    def db_path(self) -> str:
        """Get the sqlite database path from the connection string."""
        if self.database_url.startswith(SQLITE_URL_PREFIX):
            return self.database_url[len(SQLITE_URL_PREFIX):]
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
