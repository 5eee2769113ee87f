"""Configuration management for the Shop API."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in src/shop_api/config.py, so the project root is 3 levels up
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "shop-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 3000

    # Database
    database_backend: Literal["cosmos", "memory"] = "cosmos"
    azure_cosmosdb_endpoint: str | None = None
    azure_cosmosdb_key: str | None = None
    database_name: str = "shop"

    # Containers
    users_container: str = "users"
    products_container: str = "products"
    orders_container: str = "orders"

    # Seeding
    seed_batch_size: int = 10

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
