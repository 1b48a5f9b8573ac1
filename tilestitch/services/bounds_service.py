"""Resolve geographic bounds to integer tile rectangles."""

import math

from ..models.manifest import GeoBounds
from ..models.tile import TileRect
from ..utils.geo_utils import lon_lat_to_tile


def resolve_extent(bounds: GeoBounds, zoom: int) -> TileRect:
    """
    Get the tile rectangle that fully covers ``bounds`` at ``zoom``.

    The north-west corner is floored and the south-east corner ceiled, so
    the rectangle over-covers the bounds by up to one tile on each edge
    rather than cropping any of the requested area. Indices are kept
    within the ``2**zoom`` grid.

    Args:
        bounds: Geographic bounds
        zoom: Zoom level

    Returns:
        TileRect with exclusive max_x/max_y
    """
    n = 2 ** zoom
    top_left_x, top_left_y = lon_lat_to_tile(*bounds.top_left, zoom)
    bottom_right_x, bottom_right_y = lon_lat_to_tile(*bounds.bottom_right, zoom)

    return TileRect(
        min_x=max(math.floor(top_left_x), 0),
        min_y=max(math.floor(top_left_y), 0),
        max_x=min(math.ceil(bottom_right_x), n),
        max_y=min(math.ceil(bottom_right_y), n),
    )


def intersect(requested: GeoBounds, max_bounds: GeoBounds, zoom: int) -> TileRect:
    """
    Clip the tiles covering ``requested`` to those available in ``max_bounds``.

    The result is inverted (``is_empty``) when the requested area lies
    outside the available extent; callers decide what to do with that.
    """
    available = resolve_extent(max_bounds, zoom)
    return available.intersect(resolve_extent(requested, zoom))
