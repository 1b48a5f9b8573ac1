"""Tile coordinate models."""

from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TileCoordinate(BaseModel):
    """A single tile in a slippy-map pyramid."""

    model_config = ConfigDict(frozen=True)

    zoom: int = Field(..., ge=0, description="Zoom level")
    x: int = Field(..., ge=0, description="Column index")
    y: int = Field(..., ge=0, description="Row index")

    @model_validator(mode="after")
    def _check_within_zoom(self) -> "TileCoordinate":
        n = 2 ** self.zoom
        if self.x >= n or self.y >= n:
            raise ValueError(f"tile ({self.x}, {self.y}) is outside zoom {self.zoom} (max {n - 1})")
        return self

    @property
    def relative_path(self) -> Path:
        """Path of the tile file relative to the tile root: ``{zoom}/{x}/{y}.png``."""
        return Path(str(self.zoom)) / str(self.x) / f"{self.y}.png"

    def __str__(self) -> str:
        return f"{self.zoom}/{self.x}/{self.y}"


class TileRect(BaseModel):
    """Integer tile index rectangle.

    ``min_x``/``min_y`` are inclusive and ``max_x``/``max_y`` exclusive when
    iterating, so width is simply ``max_x - min_x``. An inverted rectangle
    (max below min) is representable and reports itself as empty.
    """

    model_config = ConfigDict(frozen=True)

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def tile_count(self) -> int:
        if self.is_empty:
            return 0
        return self.width * self.height

    def intersect(self, other: "TileRect") -> "TileRect":
        """Componentwise intersection. The result may be inverted."""
        return TileRect(
            min_x=max(self.min_x, other.min_x),
            min_y=max(self.min_y, other.min_y),
            max_x=min(self.max_x, other.max_x),
            max_y=min(self.max_y, other.max_y),
        )

    def contains(self, other: "TileRect") -> bool:
        """True if ``other`` lies within this rectangle's bounds."""
        return (
            other.min_x >= self.min_x
            and other.min_y >= self.min_y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )

    def iter_tiles(self, zoom: int) -> Iterator[TileCoordinate]:
        """Yield every tile in the rectangle, column by column."""
        for x in range(self.min_x, self.max_x):
            for y in range(self.min_y, self.max_y):
                yield TileCoordinate(zoom=zoom, x=x, y=y)

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)
