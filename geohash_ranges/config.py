"""
Configuration management for the geohash ranges service.

Uses pydantic-settings for environment variable loading with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Geohash ranges service configuration."""

    # Service identity
    service_url: str = "http://localhost:8000"

    # Server options
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Query options
    default_precision: int = 10
    max_radius_km: float = 1000

    model_config = {
        "env_prefix": "GEOHASH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
