"""Centralized configuration using Pydantic Settings.

Single source of truth for storage paths, the boundary dataset URL,
error feedback timing and logging.

Configuration can be overridden via environment variables:
- FOOTPRINT_STORAGE_DATA_DIR=/path/to/data
- FOOTPRINT_STORAGE_LEDGER_KEY=my_cities
- FOOTPRINT_BOUNDARY_URL=https://example.org/china.json
- FOOTPRINT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Durable key-value store configuration.

    Environment variables prefixed with FOOTPRINT_STORAGE_.
    """

    model_config = SettingsConfigDict(env_prefix="FOOTPRINT_STORAGE_")

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".footprint")
    store_file: str = "footprint_store.json"
    ledger_key: str = "footprint_visited_cities"

    @property
    def store_path(self) -> Path:
        """Full path to the JSON store file."""
        return self.data_dir / self.store_file


class BoundaryConfig(BaseSettings):
    """Boundary dataset fetch configuration.

    Environment variables prefixed with FOOTPRINT_BOUNDARY_.
    """

    model_config = SettingsConfigDict(env_prefix="FOOTPRINT_BOUNDARY_")

    url: str = "https://geo.datav.aliyun.com/areas_v3/bound/100000_full.json"
    timeout_seconds: float = 15.0
    user_agent: str = "footprint-ledger"


class FeedbackConfig(BaseSettings):
    """User-facing error feedback configuration.

    Environment variables prefixed with FOOTPRINT_FEEDBACK_.
    """

    model_config = SettingsConfigDict(env_prefix="FOOTPRINT_FEEDBACK_")

    error_display_seconds: float = Field(default=3.0, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FOOTPRINT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FOOTPRINT_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.storage.store_path)
        print(config.boundary.url)

    Environment variables prefixed with FOOTPRINT_.
    """

    model_config = SettingsConfigDict(env_prefix="FOOTPRINT_")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    boundary: BoundaryConfig = Field(default_factory=BoundaryConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
