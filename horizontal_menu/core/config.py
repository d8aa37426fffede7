"""Application configuration."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Catalog resources, relative to data_dir unless absolute
    data_dir: Optional[Path] = None  # Bundled data when unset
    catalog_file: str = "menu_data.json"
    products_file: Optional[str] = "products.json"

    # Selection
    strict_selection: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MENU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
