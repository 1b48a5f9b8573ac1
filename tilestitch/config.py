"""Configuration management for tile stitcher."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .models.manifest import METADATA_FILENAME


class AppConfig(BaseModel):
    """Application-level configuration."""

    manifest_filename: str = Field(
        default=METADATA_FILENAME,
        description="Manifest file looked up when --manifest is not given",
    )
    tiles_dir: Path = Field(
        default_factory=Path.cwd,
        description="Root of the {zoom}/{x}/{y}.png tile tree",
    )
    log_level: str = Field(default="INFO", description="Logging level without --verbose")

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        return cls(
            manifest_filename=os.environ.get("TILESTITCH_MANIFEST", METADATA_FILENAME),
            tiles_dir=Path(os.environ.get("TILESTITCH_TILES_DIR", str(Path.cwd()))),
            log_level=os.environ.get("TILESTITCH_LOG_LEVEL", "INFO").upper(),
        )


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
