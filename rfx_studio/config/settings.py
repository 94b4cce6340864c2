"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development"
    )

    # Storage Settings
    data_directory: Path = Field(default=Path("./data"))
    store_filename: str = Field(default="rfx_studio.json", min_length=1)

    # API Settings
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def store_path(self) -> Path:
        """Full path of the persistence file."""
        return self.data_directory / self.store_filename


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
