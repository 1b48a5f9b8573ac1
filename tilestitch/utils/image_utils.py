"""Image processing utilities."""

from pathlib import Path
from typing import Union

from PIL import Image


def load_image(path: Union[str, Path]) -> Image.Image:
    """Load an image from file."""
    with Image.open(path) as image:
        return image.convert("RGBA")


def save_image(image: Image.Image, path: Union[str, Path]) -> None:
    """Save an image to file as PNG."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")


def create_canvas(size: tuple[int, int]) -> Image.Image:
    """Create a fully transparent RGBA canvas."""
    return Image.new("RGBA", size, (0, 0, 0, 0))
