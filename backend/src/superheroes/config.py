"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:3001,http://127.0.0.1:3001,http://localhost:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Hero dataset (JSON array), relative paths resolve from the repo root
    data_path: str = "data/superheroes.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_data_path() -> Path:
    """Get the hero dataset path from settings, resolving relative paths from the repo root."""
    data_path = Path(settings.data_path)
    if data_path.is_absolute():
        return data_path
    repo_root = Path(__file__).parent.parent.parent.parent
    return repo_root / data_path
