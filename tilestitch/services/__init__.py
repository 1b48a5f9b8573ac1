"""Tile stitching services."""

from .bounds_service import intersect, resolve_extent
from .info_service import ZoomSummary, summarize_zooms
from .prompt_service import (
    apply_full_extent,
    apply_requested_bounds,
    ask_bounded_int,
    negotiate,
)
from .composition_service import CompositionResult, CompositionService, FileTileLoader

__all__ = [
    "intersect",
    "resolve_extent",
    "ZoomSummary",
    "summarize_zooms",
    "apply_full_extent",
    "apply_requested_bounds",
    "ask_bounded_int",
    "negotiate",
    "CompositionResult",
    "CompositionService",
    "FileTileLoader",
]
