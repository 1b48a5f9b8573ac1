"""Shared test fixtures."""

import json

import pytest
from PIL import Image

from tilestitch.config import reset_config
from tilestitch.models.manifest import Manifest

# Hong Kong tile set written by MapTiler Desktop; zoom 8 covers tiles
# x 208-209, y 111 (two 512px tiles at scale 2)
HK_BOUNDS = "113.516359,22.067786,114.502779,22.568333"


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test load configuration from a clean slate."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def manifest_data():
    """Raw manifest contents as written by the tile generator."""
    return {
        "name": "2021-11",
        "description": "",
        "legend": "",
        "attribution": "Rendered with MapTiler Desktop",
        "type": "overlay",
        "version": "1",
        "format": "png",
        "format_arguments": "",
        "minzoom": "8",
        "maxzoom": "16",
        "bounds": HK_BOUNDS,
        "scale": "2.000000",
        "profile": "mercator",
        "scheme": "tms",
        "generator": "MapTiler Desktop Pro 10.3-0934099ad7",
    }


@pytest.fixture
def hk_manifest(manifest_data):
    return Manifest(**manifest_data)


@pytest.fixture
def manifest_file(tmp_path, manifest_data):
    """metadata.json written to a temporary directory."""
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(manifest_data))
    return path


@pytest.fixture
def make_tile():
    """Factory for solid-colour square RGBA tiles."""

    def _make(color, size=512):
        return Image.new("RGBA", (size, size), color)

    return _make


@pytest.fixture
def tile_tree(tmp_path, make_tile):
    """Factory writing tiles to ``tmp_path/tiles/{z}/{x}/{y}.png``.

    Takes a mapping of (zoom, x, y) -> RGBA colour and returns the tile root.
    """
    root = tmp_path / "tiles"

    def _write(tiles, size=512):
        for (zoom, x, y), color in tiles.items():
            path = root / str(zoom) / str(x) / f"{y}.png"
            path.parent.mkdir(parents=True, exist_ok=True)
            make_tile(color, size).save(path)
        root.mkdir(exist_ok=True)
        return root

    return _write


@pytest.fixture
def red():
    return (255, 0, 0, 255)


@pytest.fixture
def blue():
    return (0, 0, 255, 255)
