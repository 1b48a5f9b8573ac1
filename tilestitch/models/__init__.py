"""Data models for tile stitching."""

from .manifest import (
    METADATA_FILENAME,
    TILE_SIZE,
    GeoBounds,
    Manifest,
)
from .tile import TileCoordinate, TileRect
from .window import RequestWindow, ResolvedWindow

__all__ = [
    "METADATA_FILENAME",
    "TILE_SIZE",
    "GeoBounds",
    "Manifest",
    "TileCoordinate",
    "TileRect",
    "RequestWindow",
    "ResolvedWindow",
]
