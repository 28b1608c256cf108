"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Catalog settings; defaults reproduce the fixed ``data/`` layout."""

    data_dir: Path = Path("data")
    snapshot_filename: str = "users.dat"
    stock_dirname: str = "stock"
    stock_password: str = "stock"
    stock_min_photos: int = 5
    stock_max_photos: int = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PHOTO_CATALOG_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def snapshot_path(self) -> Path:
        return self.data_dir / self.snapshot_filename

    @property
    def stock_dir(self) -> Path:
        return self.data_dir / self.stock_dirname
