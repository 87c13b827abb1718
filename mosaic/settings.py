# mosaic/settings.py
"""
Mosaic Settings — the filesystem roots every path is derived from.

Resolution order: explicit arguments > env vars (MOSAIC_*) > .env file > defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Installation root: one level above the package directory.
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PROJECT_ROOT = PACKAGE_DIR.parent


class MosaicSettings(BaseSettings):
    """Roots injected into the path resolver instead of ambient process state."""

    model_config = SettingsConfigDict(
        env_prefix="MOSAIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Roots ---
    home_dir: Path = Field(default_factory=Path.home)
    project_root: Path = DEFAULT_PROJECT_ROOT
    working_dir: Path = Field(default_factory=Path.cwd)

    # --- Logging ---
    log_level: str = "INFO"

    @property
    def data_dir(self) -> Path:
        return self.home_dir / ".mosaic"

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"


@lru_cache(maxsize=1)
def get_settings() -> MosaicSettings:
    """Return the global settings singleton."""
    return MosaicSettings()
