"""Geographic and coordinate utilities."""

import math

# Latitude at which Web-Mercator maps to the top edge of tile row 0
MAX_LATITUDE = math.degrees(math.atan(math.sinh(math.pi)))


def lon_lat_to_tile(lon: float, lat: float, zoom: int) -> tuple[float, float]:
    """
    Convert longitude/latitude to fractional Web-Mercator tile coordinates.

    Args:
        lon: Longitude in degrees
        lat: Latitude in degrees, within +/-MAX_LATITUDE
        zoom: Zoom level

    Returns:
        (x, y) fractional tile coordinates; the integer part is the tile
        index and the fraction the position inside that tile
    """
    n = 2 ** zoom
    lat_rad = math.radians(lat)

    x = (lon + 180) / 360 * n
    y = (1 - math.log(math.tan(lat_rad) + 1 / math.cos(lat_rad)) / math.pi) / 2 * n

    return (x, y)


def tile_to_lon_lat(x: float, y: float, zoom: int) -> tuple[float, float]:
    """
    Convert tile coordinates back to longitude/latitude.

    Integer inputs give the north-west corner of the tile.

    Returns:
        (lon, lat) in degrees
    """
    n = 2 ** zoom
    lon = x / n * 360 - 180
    lat_rad = math.atan(math.sinh(math.pi * (1 - 2 * y / n)))
    return (lon, math.degrees(lat_rad))
