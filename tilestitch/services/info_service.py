"""Per-zoom summaries of what a tile set holds."""

from dataclasses import dataclass

from ..models.manifest import GeoBounds, Manifest
from ..models.tile import TileRect
from ..utils.geo_utils import tile_to_lon_lat
from .bounds_service import resolve_extent


@dataclass
class ZoomSummary:
    """Tile and pixel dimensions of the full extent at one zoom level."""

    zoom: int
    rect: TileRect
    scale: float
    tile_size: int

    @property
    def width_tiles(self) -> int:
        return self.rect.width

    @property
    def height_tiles(self) -> int:
        return self.rect.height

    @property
    def tile_count(self) -> int:
        return self.rect.tile_count

    @property
    def width_pixels(self) -> int:
        return int(self.width_tiles * self.scale * self.tile_size)

    @property
    def height_pixels(self) -> int:
        return int(self.height_tiles * self.scale * self.tile_size)

    @property
    def covered_bounds(self) -> GeoBounds:
        """Geographic area actually covered by the snapped tile rectangle."""
        west, north = tile_to_lon_lat(self.rect.min_x, self.rect.min_y, self.zoom)
        east, south = tile_to_lon_lat(self.rect.max_x, self.rect.max_y, self.zoom)
        return GeoBounds(west=west, south=south, east=east, north=north)


def summarize_zooms(manifest: Manifest) -> list[ZoomSummary]:
    """Summarize the full extent of ``manifest`` at every available zoom level."""
    bounds = manifest.geo_bounds
    return [
        ZoomSummary(
            zoom=zoom,
            rect=resolve_extent(bounds, zoom),
            scale=manifest.scale_factor,
            tile_size=manifest.tile_size,
        )
        for zoom in manifest.zoom_levels
    ]
