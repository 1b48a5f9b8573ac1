"""Tests for Manifest and GeoBounds models."""

import json

import pytest
from pydantic import ValidationError

from tilestitch.models.manifest import TILE_SIZE, GeoBounds, Manifest
from tilestitch.utils.geo_utils import MAX_LATITUDE


class TestGeoBoundsParse:
    """Test parsing comma separated bounds."""

    def test_parses_four_numbers(self):
        bounds = GeoBounds.parse("113.516359,22.067786,114.502779,22.568333")
        assert bounds.west == pytest.approx(113.516359)
        assert bounds.south == pytest.approx(22.067786)
        assert bounds.east == pytest.approx(114.502779)
        assert bounds.north == pytest.approx(22.568333)

    def test_tolerates_whitespace(self):
        bounds = GeoBounds.parse(" 1, 2 ,3,4 ")
        assert bounds.to_string() == "1.0,2.0,3.0,4.0"

    def test_corners(self):
        bounds = GeoBounds.parse("1,2,3,4")
        assert bounds.top_left == (1, 4)
        assert bounds.bottom_right == (3, 2)

    @pytest.mark.parametrize("text", ["1,2,3", "1,2,3,4,5", "", "a,b,c,d", "1,2,,4"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            GeoBounds.parse(text)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            GeoBounds.parse("0,0,200,10")

    @pytest.mark.parametrize("text", ["113,-90,114,22", "113,22,114,90", "0,-86,1,0", "0,0,inf,1"])
    def test_rejects_latitudes_outside_mercator(self, text):
        with pytest.raises(ValueError, match="out of range"):
            GeoBounds.parse(text)

    def test_accepts_mercator_limit(self):
        bounds = GeoBounds(west=-180, south=-MAX_LATITUDE, east=180, north=MAX_LATITUDE)
        assert bounds.north == pytest.approx(85.0511, abs=1e-4)

    def test_is_immutable(self):
        bounds = GeoBounds.parse("1,2,3,4")
        with pytest.raises(ValidationError):
            bounds.west = 0


class TestManifestConstruction:
    """Test Manifest parsing and validation."""

    def test_parsed_values(self, hk_manifest):
        assert hk_manifest.min_zoom == 8
        assert hk_manifest.max_zoom == 16
        assert hk_manifest.scale_factor == pytest.approx(2.0)
        assert hk_manifest.tile_size == TILE_SIZE == 256
        assert hk_manifest.tile_pixel_size == 512
        assert hk_manifest.geo_bounds.west == pytest.approx(113.516359)

    def test_zoom_levels_inclusive(self, hk_manifest):
        assert list(hk_manifest.zoom_levels) == list(range(8, 17))

    def test_accepts_plain_numbers(self):
        manifest = Manifest(minzoom=3, maxzoom=5, bounds="1,2,3,4", scale=1.5)
        assert manifest.min_zoom == 3
        assert manifest.max_zoom == 5
        assert manifest.scale_factor == pytest.approx(1.5)

    def test_descriptive_fields_optional(self):
        manifest = Manifest(minzoom="0", maxzoom="2", bounds="1,2,3,4")
        assert manifest.name == ""
        assert manifest.scale_factor == 1.0

    def test_ignores_unknown_fields(self, manifest_data):
        manifest_data["center"] = "114,22,10"
        assert Manifest(**manifest_data).name == "2021-11"

    def test_rejects_inverted_zoom_range(self, manifest_data):
        manifest_data["minzoom"] = "12"
        manifest_data["maxzoom"] = "10"
        with pytest.raises(ValidationError):
            Manifest(**manifest_data)

    def test_single_zoom_level_allowed(self, manifest_data):
        manifest_data["maxzoom"] = "8"
        assert list(Manifest(**manifest_data).zoom_levels) == [8]

    @pytest.mark.parametrize("bounds", ["114,22,113,23", "113,23,114,22", "113,22,113,23"])
    def test_rejects_unordered_bounds(self, manifest_data, bounds):
        manifest_data["bounds"] = bounds
        with pytest.raises(ValidationError):
            Manifest(**manifest_data)

    @pytest.mark.parametrize("field,value", [
        ("minzoom", "eight"),
        ("maxzoom", "-1"),
        ("minzoom", "8.5"),
        ("scale", "0"),
        ("scale", "big"),
        ("bounds", "not,bounds"),
        ("maxzoom", "inf"),
        ("minzoom", "nan"),
        ("maxzoom", float("inf")),
        ("scale", "nan"),
        ("scale", "inf"),
        ("bounds", "-180,-90,180,90"),
    ])
    def test_rejects_bad_values(self, manifest_data, field, value):
        manifest_data[field] = value
        with pytest.raises(ValidationError):
            Manifest(**manifest_data)

    def test_requires_bounds(self, manifest_data):
        del manifest_data["bounds"]
        with pytest.raises(ValidationError):
            Manifest(**manifest_data)

    def test_is_immutable(self, hk_manifest):
        with pytest.raises(ValidationError):
            hk_manifest.minzoom = "1"


class TestManifestFromJson:
    """Test loading manifests from disk."""

    def test_loads_file(self, manifest_file):
        manifest = Manifest.from_json(manifest_file)
        assert manifest.generator.startswith("MapTiler")
        assert manifest.max_zoom == 16

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Manifest.from_json(tmp_path / "metadata.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "metadata.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="not valid JSON"):
            Manifest.from_json(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "metadata.json"
        path.write_text(json.dumps(["minzoom", "8"]))
        with pytest.raises(ValueError, match="JSON object"):
            Manifest.from_json(path)

    def test_invalid_contents(self, tmp_path, manifest_data):
        manifest_data["minzoom"] = "20"
        path = tmp_path / "metadata.json"
        path.write_text(json.dumps(manifest_data))
        with pytest.raises(ValueError):
            Manifest.from_json(path)
