"""Composition service for assembling tiles into a single image."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from PIL import Image

from ..models.manifest import TILE_SIZE
from ..models.tile import TileCoordinate
from ..models.window import ResolvedWindow
from ..utils.image_utils import create_canvas, load_image, save_image

logger = logging.getLogger(__name__)

# Loads one tile image; raises OSError when the tile is missing or unreadable
TileLoader = Callable[[TileCoordinate], Image.Image]

# Called after each tile slot with (done, total)
ProgressFn = Callable[[int, int], None]


class FileTileLoader:
    """Load tiles from a ``{zoom}/{x}/{y}.png`` directory tree."""

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def path_for(self, tile: TileCoordinate) -> Path:
        return self.root / tile.relative_path

    def __call__(self, tile: TileCoordinate) -> Image.Image:
        return load_image(self.path_for(tile))


@dataclass
class CompositionResult:
    """Outcome of compositing one window."""

    image: Image.Image
    attempted: int
    loaded: list[TileCoordinate] = field(default_factory=list)
    missing: list[TileCoordinate] = field(default_factory=list)


class CompositionService:
    """Service for placing tiles onto a canvas at their absolute offsets."""

    def __init__(self, loader: Optional[TileLoader] = None, tile_size: int = TILE_SIZE):
        """
        Initialize composition service.

        Args:
            loader: Callable returning the image for a tile (defaults to
                reading from the current directory)
            tile_size: Native tile edge length before scaling
        """
        self.loader = loader or FileTileLoader()
        self.tile_size = tile_size

    def canvas_size(self, window: ResolvedWindow) -> tuple[int, int]:
        """Pixel (width, height) of the canvas for ``window``."""
        rect = window.rect
        return (
            int(rect.width * window.scale * self.tile_size),
            int(rect.height * window.scale * self.tile_size),
        )

    def tile_offset(self, window: ResolvedWindow, tile: TileCoordinate) -> tuple[int, int]:
        """Pixel position of the top-left corner of ``tile`` on the canvas."""
        return (
            int((tile.x - window.rect.min_x) * window.scale * self.tile_size),
            int((tile.y - window.rect.min_y) * window.scale * self.tile_size),
        )

    def compose(self, window: ResolvedWindow, progress: Optional[ProgressFn] = None) -> CompositionResult:
        """
        Load every tile in ``window`` and paste it onto a transparent canvas.

        Tiles that fail to load are logged and left transparent; they never
        abort the run.

        Args:
            window: Resolved window to composite
            progress: Optional callback invoked after each tile slot

        Returns:
            CompositionResult holding the canvas and per-tile outcome

        Raises:
            ValueError: If the canvas would have no area.
        """
        width, height = self.canvas_size(window)
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid image size: {width}x{height}")

        canvas = create_canvas((width, height))
        result = CompositionResult(image=canvas, attempted=window.tile_count)

        for done, tile in enumerate(window.rect.iter_tiles(window.zoom), start=1):
            self._place_tile(canvas, window, tile, result)
            if progress is not None:
                progress(done, result.attempted)

        logger.info(
            "Placed %d of %d tiles (%d missing)",
            len(result.loaded), result.attempted, len(result.missing),
        )
        return result

    def _place_tile(
        self,
        canvas: Image.Image,
        window: ResolvedWindow,
        tile: TileCoordinate,
        result: CompositionResult,
    ) -> None:
        try:
            image = self.loader(tile)
        except OSError:
            logger.debug("Image %s not found", tile.relative_path.as_posix())
            result.missing.append(tile)
            return

        canvas.paste(image, self.tile_offset(window, tile))
        result.loaded.append(tile)

    def write(self, result: CompositionResult, path: Union[str, Path]) -> Path:
        """Encode the canvas as PNG and write it to ``path``."""
        path = Path(path)
        save_image(result.image, path)
        logger.info("Wrote %s (%dx%d)", path, result.image.width, result.image.height)
        return path
