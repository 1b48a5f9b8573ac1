"""Utility functions for tile stitching."""

from .image_utils import (
    create_canvas,
    load_image,
    save_image,
)
from .geo_utils import (
    MAX_LATITUDE,
    lon_lat_to_tile,
    tile_to_lon_lat,
)

__all__ = [
    "create_canvas",
    "load_image",
    "save_image",
    "MAX_LATITUDE",
    "lon_lat_to_tile",
    "tile_to_lon_lat",
]
