"""Storefront Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Identity tokens
    token_private_key_path: Optional[str] = None
    token_private_key: Optional[str] = None  # Can also be inline
    token_public_key_path: Optional[str] = None
    token_public_key: Optional[str] = None
    token_ttl_days: int = 30
    token_max_clock_skew: int = 60

    # Catalog
    seed_catalog: bool = True

    # Cart behaviour
    cart_cumulative_stock_check: bool = False

    def get_token_private_key(self) -> Optional[str]:
        """Get token signing key from file or inline"""
        return self._read_key(self.token_private_key, self.token_private_key_path)

    def get_token_public_key(self) -> Optional[str]:
        """Get token verification key from file or inline"""
        return self._read_key(self.token_public_key, self.token_public_key_path)

    @staticmethod
    def _read_key(inline: Optional[str], path: Optional[str]) -> Optional[str]:
        if inline:
            return inline

        if path and os.path.exists(path):
            with open(path, "r") as f:
                return f.read()

        return None

    @property
    def token_ttl_seconds(self) -> int:
        return self.token_ttl_days * 24 * 60 * 60


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
