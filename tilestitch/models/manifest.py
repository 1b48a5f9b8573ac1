"""Tile set manifest models."""

import json
import math
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..utils.geo_utils import MAX_LATITUDE

# Native edge length of a tile in pixels, before the manifest scale is applied
TILE_SIZE = 256

# Default manifest filename looked up in the working directory
METADATA_FILENAME = "metadata.json"


class GeoBounds(BaseModel):
    """Geographic bounds in degrees (west, south, east, north).

    Latitudes are limited to the Web-Mercator range, so the poles are
    rejected here rather than failing inside the projection.
    """

    model_config = ConfigDict(frozen=True)

    west: float = Field(..., ge=-180, le=180, description="Western longitude boundary")
    south: float = Field(..., ge=-MAX_LATITUDE, le=MAX_LATITUDE, description="Southern latitude boundary")
    east: float = Field(..., ge=-180, le=180, description="Eastern longitude boundary")
    north: float = Field(..., ge=-MAX_LATITUDE, le=MAX_LATITUDE, description="Northern latitude boundary")

    @classmethod
    def parse(cls, text: str) -> "GeoBounds":
        """Parse a ``minLon,minLat,maxLon,maxLat`` string.

        Raises:
            ValueError: If the string does not hold four numbers or the
                numbers are out of range.
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"Expected 'minLon,minLat,maxLon,maxLat', got {text!r}")

        try:
            west, south, east, north = (float(part) for part in parts)
        except ValueError:
            raise ValueError(f"Bounds must be numeric, got {text!r}") from None

        try:
            return cls(west=west, south=south, east=east, north=north)
        except ValidationError as exc:
            raise ValueError(f"Bounds out of range: {text!r}") from exc

    @property
    def top_left(self) -> tuple[float, float]:
        """(lon, lat) of the north-west corner."""
        return (self.west, self.north)

    @property
    def bottom_right(self) -> tuple[float, float]:
        """(lon, lat) of the south-east corner."""
        return (self.east, self.south)

    def to_string(self) -> str:
        return f"{self.west},{self.south},{self.east},{self.north}"


class Manifest(BaseModel):
    """Metadata describing a pre-rendered tile set.

    Mirrors the ``metadata.json`` written by MapTiler-style tile generators.
    Numeric values are stored as strings in the file and exposed parsed
    through properties.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    description: str = ""
    legend: str = ""
    attribution: str = ""
    type: str = ""
    version: str = ""
    format: str = "png"
    format_arguments: str = ""
    minzoom: str = Field(..., description="Lowest zoom level available")
    maxzoom: str = Field(..., description="Highest zoom level available")
    bounds: str = Field(..., description="minLon,minLat,maxLon,maxLat")
    scale: str = Field(default="1", description="Pixel multiplier per tile")
    profile: str = "mercator"
    scheme: str = ""
    generator: str = ""

    @field_validator("minzoom", "maxzoom", "bounds", "scale", "version", mode="before")
    @classmethod
    def _coerce_to_string(cls, value):
        # Some generators write plain JSON numbers instead of strings
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("minzoom", "maxzoom")
    @classmethod
    def _check_zoom(cls, value: str) -> str:
        number = float(value)
        if not math.isfinite(number) or number < 0 or number != int(number):
            raise ValueError(f"zoom must be a non-negative integer, got {value!r}")
        return value

    @field_validator("scale")
    @classmethod
    def _check_scale(cls, value: str) -> str:
        number = float(value)
        if not math.isfinite(number) or number <= 0:
            raise ValueError(f"scale must be a positive number, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "Manifest":
        if self.min_zoom > self.max_zoom:
            raise ValueError(f"minzoom ({self.min_zoom}) is greater than maxzoom ({self.max_zoom})")

        bounds = self.geo_bounds
        if bounds.west >= bounds.east:
            raise ValueError(f"bounds are not ordered west to east: {self.bounds}")
        if bounds.south >= bounds.north:
            raise ValueError(f"bounds are not ordered south to north: {self.bounds}")
        return self

    @property
    def min_zoom(self) -> int:
        return int(float(self.minzoom))

    @property
    def max_zoom(self) -> int:
        return int(float(self.maxzoom))

    @property
    def zoom_levels(self) -> range:
        """All zoom levels from min_zoom to max_zoom inclusive."""
        return range(self.min_zoom, self.max_zoom + 1)

    @property
    def geo_bounds(self) -> GeoBounds:
        return GeoBounds.parse(self.bounds)

    @property
    def scale_factor(self) -> float:
        return float(self.scale)

    @property
    def tile_size(self) -> int:
        return TILE_SIZE

    @property
    def tile_pixel_size(self) -> int:
        """Edge length of one tile on disk, in pixels."""
        return int(self.tile_size * self.scale_factor)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "Manifest":
        """Load a manifest from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid JSON or fails validation.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(f"{path} does not contain a JSON object")

        # pydantic's ValidationError is a ValueError subclass
        return cls(**data)
