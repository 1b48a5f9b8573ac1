"""Request window models: the parameters of one stitching run."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .tile import TileRect

RANGE_FIELDS = ("min_x", "max_x", "min_y", "max_y")


class ResolvedWindow(BaseModel):
    """Fully resolved, immutable parameters consumed by the compositor."""

    model_config = ConfigDict(frozen=True)

    zoom: int = Field(..., ge=0)
    rect: TileRect
    scale: float = Field(..., gt=0)
    output_path: Path

    @property
    def tile_count(self) -> int:
        """Number of tile slots in the window (zero when inverted)."""
        return self.rect.tile_count


class RequestWindow(BaseModel):
    """Parameters collected from flags, manifest defaults and prompts.

    Every range field starts as None (unknown) and is filled in by the
    resolution steps. Call ``freeze()`` once all fields are known.
    """

    zoom: Optional[int] = Field(default=None, ge=0)
    min_x: Optional[int] = None
    min_y: Optional[int] = None
    max_x: Optional[int] = None
    max_y: Optional[int] = None
    scale: float = Field(default=1.0, gt=0)
    output_filename: Optional[str] = None

    @property
    def missing_fields(self) -> list[str]:
        fields = ["zoom"] if self.zoom is None else []
        return fields + [name for name in RANGE_FIELDS if getattr(self, name) is None]

    @property
    def is_resolved(self) -> bool:
        return not self.missing_fields

    def apply_rect(self, rect: TileRect) -> None:
        """Fill the range fields that are still unknown from ``rect``."""
        for name in RANGE_FIELDS:
            if getattr(self, name) is None:
                setattr(self, name, getattr(rect, name))

    def to_rect(self) -> TileRect:
        if not self.is_resolved:
            raise ValueError(f"Window is missing: {', '.join(self.missing_fields)}")
        return TileRect(min_x=self.min_x, min_y=self.min_y, max_x=self.max_x, max_y=self.max_y)

    def resolved_output_path(self) -> Path:
        """Output filename, defaulting to ``output-{zoom}.png``."""
        if self.output_filename:
            return Path(self.output_filename)
        if self.zoom is None:
            raise ValueError("Cannot name output before the zoom level is known")
        return Path(f"output-{self.zoom}.png")

    def freeze(self) -> ResolvedWindow:
        """Return the immutable window used for composition.

        Raises:
            ValueError: If a field is unknown or a tile index falls outside
                the pyramid at this zoom level.
        """
        rect = self.to_rect()
        n = 2 ** self.zoom
        for name in RANGE_FIELDS:
            value = getattr(rect, name)
            if value < 0 or value > n:
                raise ValueError(f"{name}={value} is outside the zoom {self.zoom} tile range 0-{n}")

        return ResolvedWindow(
            zoom=self.zoom,
            rect=rect,
            scale=self.scale,
            output_path=self.resolved_output_path(),
        )
