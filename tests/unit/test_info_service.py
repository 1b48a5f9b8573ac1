"""Tests for per-zoom tile set summaries."""

import pytest

from tilestitch.models.manifest import Manifest
from tilestitch.models.tile import TileRect
from tilestitch.services.info_service import summarize_zooms


class TestSummarizeZooms:

    def test_one_summary_per_zoom(self, hk_manifest):
        summaries = summarize_zooms(hk_manifest)
        assert [s.zoom for s in summaries] == list(range(8, 17))

    def test_zoom_8(self, hk_manifest):
        summary = summarize_zooms(hk_manifest)[0]
        assert summary.rect == TileRect(min_x=208, min_y=111, max_x=210, max_y=112)
        assert summary.width_tiles == 2
        assert summary.height_tiles == 1
        assert summary.tile_count == 2
        assert summary.width_pixels == 1024
        assert summary.height_pixels == 512

    def test_zoom_10(self, hk_manifest):
        summary = summarize_zooms(hk_manifest)[2]
        assert summary.zoom == 10
        assert summary.tile_count == 4 * 2
        assert (summary.width_pixels, summary.height_pixels) == (4 * 512, 2 * 512)

    def test_fractional_scale(self, manifest_data):
        manifest_data["scale"] = "1.5"
        manifest_data["maxzoom"] = "8"
        summary = summarize_zooms(Manifest(**manifest_data))[0]
        assert (summary.width_pixels, summary.height_pixels) == (768, 384)

    def test_covered_bounds_contain_manifest_bounds(self, hk_manifest):
        bounds = hk_manifest.geo_bounds
        for summary in summarize_zooms(hk_manifest):
            covered = summary.covered_bounds
            assert covered.west <= bounds.west
            assert covered.east >= bounds.east
            assert covered.north >= bounds.north
            assert covered.south <= bounds.south

    def test_covered_bounds_zoom_8(self, hk_manifest):
        covered = summarize_zooms(hk_manifest)[0].covered_bounds
        assert covered.west == pytest.approx(112.5)
        assert covered.east == pytest.approx(115.3125)

    def test_does_not_mutate_manifest(self, hk_manifest):
        before = hk_manifest.model_dump()
        summarize_zooms(hk_manifest)
        assert hk_manifest.model_dump() == before
