"""
Geohash encoding and decoding utilities.

Provides functions to convert between geohash strings and lat/lon coordinates,
cell bounding boxes, and grid stepping between adjacent cells.
Implementation based on standard geohash algorithm.
"""
from typing import List, Tuple
from shapely.geometry import Polygon


# Base32 encoding for geohash
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# (drow, dcol) steps for neighbor(); north and east are positive
NORTH = (1, 0)
SOUTH = (-1, 0)
EAST = (0, 1)
WEST = (0, -1)


def _decode_ranges(geohash: str) -> Tuple[List[float], List[float]]:
    """Narrow the latitude and longitude ranges bit by bit."""
    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    is_even = True  # Start with longitude

    for char in geohash.lower():
        if char not in BASE32:
            raise ValueError(f"Invalid geohash character: {char}")

        idx = BASE32.index(char)

        # Each character encodes 5 bits
        for i in range(4, -1, -1):
            bit = (idx >> i) & 1

            if is_even:  # Longitude bit
                mid = (lon_range[0] + lon_range[1]) / 2
                if bit == 1:
                    lon_range[0] = mid
                else:
                    lon_range[1] = mid
            else:  # Latitude bit
                mid = (lat_range[0] + lat_range[1]) / 2
                if bit == 1:
                    lat_range[0] = mid
                else:
                    lat_range[1] = mid

            is_even = not is_even

    return lat_range, lon_range


def decode(geohash: str) -> Tuple[float, float]:
    """
    Decode a geohash string to latitude/longitude coordinates.

    Returns the center point of the geohash box.

    Args:
        geohash: Geohash string (e.g., "gc7x3r4")

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Example:
        >>> lat, lon = decode("s000")
        >>> print(f"{lat:.5f}, {lon:.5f}")
        0.08789, 0.17578

    References:
        https://en.wikipedia.org/wiki/Geohash
    """
    lat_range, lon_range = _decode_ranges(geohash)

    # Return center of box
    latitude = (lat_range[0] + lat_range[1]) / 2
    longitude = (lon_range[0] + lon_range[1]) / 2

    return latitude, longitude


def encode(latitude: float, longitude: float, precision: int = 6) -> str:
    """
    Encode latitude/longitude to a geohash string.

    Args:
        latitude: Latitude in decimal degrees (-90 to 90)
        longitude: Longitude in decimal degrees (-180 to 180)
        precision: Number of characters in geohash (default 6)

    Returns:
        Geohash string

    Example:
        >>> encode(0.5, 0.5, precision=4)
        's006'

    Raises:
        ValueError: If lat/lon out of valid range
    """
    if not (-90 <= latitude <= 90):
        raise ValueError(f"Latitude must be in [-90, 90], got {latitude}")
    if not (-180 <= longitude <= 180):
        raise ValueError(f"Longitude must be in [-180, 180], got {longitude}")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    geohash = []
    bits = 0
    bit_count = 0
    is_even = True  # Start with longitude

    while len(geohash) < precision:
        if is_even:  # Longitude
            mid = (lon_range[0] + lon_range[1]) / 2
            if longitude >= mid:
                bits |= (1 << (4 - bit_count))
                lon_range[0] = mid
            else:
                lon_range[1] = mid
        else:  # Latitude
            mid = (lat_range[0] + lat_range[1]) / 2
            if latitude >= mid:
                bits |= (1 << (4 - bit_count))
                lat_range[0] = mid
            else:
                lat_range[1] = mid

        is_even = not is_even
        bit_count += 1

        if bit_count == 5:
            geohash.append(BASE32[bits])
            bits = 0
            bit_count = 0

    return ''.join(geohash)


def decode_bbox(geohash: str) -> Tuple[float, float, float, float]:
    """
    Get the bounding box for a geohash.

    Args:
        geohash: Geohash string

    Returns:
        Tuple of (south, west, north, east)

    Example:
        >>> south, west, north, east = decode_bbox("s000")
        >>> print(f"Lat: [{south:.5f}, {north:.5f}]")
        Lat: [0.00000, 0.17578]
    """
    lat_range, lon_range = _decode_ranges(geohash)

    return lat_range[0], lon_range[0], lat_range[1], lon_range[1]


def neighbor(geohash: str, direction: Tuple[int, int]) -> str:
    """
    Step from a geohash cell to another cell of the same precision.

    The neighbor's center is the source center shifted by ``drow`` cell
    heights and ``dcol`` cell widths. Longitude wraps across the antimeridian;
    latitude is clamped to the poles, so stepping south from the southernmost
    row returns the same cell.

    Args:
        geohash: Source geohash string
        direction: (drow, dcol) offsets, north and east positive
            (see NORTH, SOUTH, EAST, WEST)

    Returns:
        Geohash string of the neighboring cell

    Example:
        >>> neighbor("s000", EAST)
        's002'
        >>> neighbor("s000", SOUTH)
        'kpbp'
    """
    south, west, north, east = decode_bbox(geohash)
    drow, dcol = direction

    latitude = (south + north) / 2 + drow * (north - south)
    longitude = (west + east) / 2 + dcol * (east - west)

    if longitude > 180:
        longitude -= 360
    elif longitude < -180:
        longitude += 360
    latitude = max(-90.0, min(90.0, latitude))

    return encode(latitude, longitude, precision=len(geohash))


def geohash_polygon(geohash: str) -> Polygon:
    """
    Convert a geohash to a Shapely Polygon representing its bounding box.

    Args:
        geohash: Geohash string

    Returns:
        Shapely Polygon representing the geohash bounding box

    Example:
        >>> poly = geohash_polygon("s000")
        >>> poly.area > 0
        True
    """
    south, west, north, east = decode_bbox(geohash)

    return Polygon([
        (west, south),
        (west, north),
        (east, north),
        (east, south),
        (west, south)
    ])
