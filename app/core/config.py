from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "XOR Word Breaker"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./xorbreak.db"

    # Dictionary
    dictionary_path: str = "/usr/share/dict/ngerman"
    dictionary_encoding: str = "latin-1"

    # Attack settings
    key_length: int = 4
    default_ciphertexts: list[list[int]] = [
        [9, 0, 4, 10],
        [10, 20, 28, 9],
        [10, 16, 2, 2],
        [10, 20, 5, 8],
        [26, 26, 3, 0],
        [28, 16, 3, 17],
    ]
    max_ciphertexts: int = 1_000
    max_parallel_workers: int = 4

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
