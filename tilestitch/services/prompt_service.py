"""Fill in the request window from manifest extents and interactive answers."""

import logging
from typing import Callable, Optional

from ..models.manifest import GeoBounds, Manifest
from ..models.window import RequestWindow
from .bounds_service import intersect, resolve_extent

logger = logging.getLogger(__name__)

# Asks one question and returns the raw line typed in reply
AskFn = Callable[[str], str]


def format_question(text: str, min_value: int, max_value: int, default: Optional[int] = None) -> str:
    question = f"{text} (range: {min_value} - {max_value})"
    if default is not None:
        question += f" (default: {default})"
    return question


def ask_bounded_int(
    ask: AskFn,
    text: str,
    min_value: int,
    max_value: int,
    default: Optional[int] = None,
) -> int:
    """
    Ask for an integer in ``[min_value, max_value]`` until one is given.

    An empty answer selects ``default`` when there is one. Anything that is
    not an integer, or falls outside the range, is rejected and the question
    is asked again; there is no retry limit.

    Args:
        ask: Callable that shows a question and returns the answer line
        text: Question text
        min_value: Smallest accepted answer
        max_value: Largest accepted answer
        default: Value used for an empty answer

    Returns:
        The accepted integer
    """
    question = format_question(text, min_value, max_value, default)

    while True:
        answer = ask(question).strip()

        if not answer:
            if default is not None:
                return default
            logger.warning("An answer is required")
            continue

        try:
            value = int(answer)
        except ValueError:
            logger.warning("%r is not a whole number", answer)
            continue

        if min_value <= value <= max_value:
            return value

        logger.warning("%d is outside the range %d - %d", value, min_value, max_value)


def apply_full_extent(window: RequestWindow, manifest: Manifest) -> RequestWindow:
    """
    Use every available tile at ``window.zoom``.

    Reads ``zoom``; writes any of ``min_x``, ``max_x``, ``min_y``, ``max_y``
    that are still unknown.

    Raises:
        ValueError: If the zoom level is not known yet.
    """
    if window.zoom is None:
        raise ValueError("The full extent needs a zoom level")

    window.apply_rect(resolve_extent(manifest.geo_bounds, window.zoom))
    return window


def apply_requested_bounds(window: RequestWindow, manifest: Manifest, requested: GeoBounds) -> RequestWindow:
    """
    Use the tiles covering ``requested``, clipped to what the manifest holds.

    Reads ``zoom``; writes any range field that is still unknown. The
    resulting rectangle may be empty if ``requested`` lies outside the
    tile set.

    Raises:
        ValueError: If the zoom level is not known yet.
    """
    if window.zoom is None:
        raise ValueError("Bounds need a zoom level to be projected")

    rect = intersect(requested, manifest.geo_bounds, window.zoom)
    if rect.is_empty:
        logger.warning("Requested bounds %s do not overlap the tile set", requested.to_string())
    window.apply_rect(rect)
    return window


def negotiate(window: RequestWindow, manifest: Manifest, ask: AskFn) -> RequestWindow:
    """
    Ask for every field of ``window`` that is still unknown.

    Fields are resolved in order: zoom, min_x, max_x, min_y, max_y. Range
    questions are bounded by the manifest's full extent at the chosen zoom,
    and each max is bounded below by its just-resolved min. Ranges given
    up front that reach past the full extent are kept, with a warning.
    """
    if window.zoom is None:
        window.zoom = ask_bounded_int(ask, "What zoom level?", manifest.min_zoom, manifest.max_zoom)

    full = resolve_extent(manifest.geo_bounds, window.zoom)

    if window.min_x is None:
        window.min_x = ask_bounded_int(ask, "Western tile?", full.min_x, full.max_x, full.min_x)

    if window.max_x is None:
        window.max_x = ask_bounded_int(ask, "Eastern tile?", window.min_x, full.max_x, full.max_x)

    if window.min_y is None:
        window.min_y = ask_bounded_int(ask, "Northern tile?", full.min_y, full.max_y, full.min_y)

    if window.max_y is None:
        window.max_y = ask_bounded_int(ask, "Southern tile?", window.min_y, full.max_y, full.max_y)

    rect = window.to_rect()
    if not rect.is_empty and not full.contains(rect):
        logger.warning(
            "Tile range %s reaches past the tiles available at zoom %d %s",
            rect.to_tuple(), window.zoom, full.to_tuple(),
        )

    return window
